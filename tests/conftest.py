import pytest

from subsynth.config.settings import ArgOption, Setting
from subsynth.domain.schema import DomainSchema
from subsynth.generator.random_source import RandomSource
from subsynth.generator.substance_generator import SubstanceGenerator


SET_DOMAIN = {
    "types": ["Set", "Point"],
    "subtypes": [["Point", "Set"]],
    "predicates": {
        "IsSubset": ["Set", "Set"],
        "PointIn": ["Set", "Point"],
        "Not": {"binary": True},
    },
}


@pytest.fixture
def set_schema():
    return DomainSchema.from_dict(SET_DOMAIN)


@pytest.fixture
def real_schema():
    return DomainSchema.from_dict({"types": ["Real"]})


@pytest.fixture
def make_generator():
    def _make(schema, min_length=1, max_length=5, arg_option=ArgOption.MIXED, seed=7):
        setting = Setting((min_length, max_length), arg_option)
        return SubstanceGenerator(schema, setting, RandomSource(seed))

    return _make
