"""
Batch driver: runs the generator N times over one random source.

Settings and schema are validated before anything is generated.  Programs
are produced one at a time by :meth:`Synthesizer.iter_programs`; if a later
program fails, the ones already handed out stay valid.
"""

import logging
from typing import Iterator, List, Optional

from subsynth.config.settings import Setting
from subsynth.constants import DEFAULT_SEED
from subsynth.domain.schema import DomainSchema
from subsynth.errors import InvalidRange
from subsynth.generator.program import Program
from subsynth.generator.random_source import RandomSource
from subsynth.generator.substance_generator import SubstanceGenerator

# ---------------------------------------------------------------------------
# Debug infrastructure, activated by ``--debug`` on the CLI.
# ---------------------------------------------------------------------------
_logger = logging.getLogger("subsynth")


def enable_debug() -> None:
    """Turn on verbose debug logging for every synthesizer module."""
    _logger.setLevel(logging.DEBUG)
    if not _logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [DEBUG] %(name)s: %(message)s"))
        _logger.addHandler(handler)


class Synthesizer:
    """Generates batches of independent programs from one seed."""

    def __init__(self, schema: DomainSchema, setting: Setting, seed: Optional[int] = None):
        schema.validate()
        setting.validate()
        self.schema = schema
        self.setting = setting
        self.random = RandomSource(DEFAULT_SEED if seed is None else seed)
        self.generator = SubstanceGenerator(schema, setting, self.random)

    def iter_programs(self, n: int) -> Iterator[Program]:
        if n < 0:
            raise InvalidRange(f"number of programs must not be negative (got {n})")
        for i in range(n):
            try:
                program = self.generator.generate_program()
            finally:
                self.generator.reset()
            _logger.debug("program %d/%d: %d statements", i + 1, n, len(program))
            yield program

    def generate_programs(self, n: int) -> List[Program]:
        return list(self.iter_programs(n))


def generate_programs(schema: DomainSchema, setting: Setting, n: int, seed: Optional[int] = None) -> List[Program]:
    """
    Generate *n* programs for *schema*.

    Args:
        schema: the domain schema
        setting: length range and argument policy
        n: number of programs
        seed: random seed (DEFAULT_SEED when omitted)

    Returns:
        The programs, in generation order
    """
    return Synthesizer(schema, setting, seed).generate_programs(n)
