"""
Domain schema consumed by the synthesizer.

A schema is the vocabulary a generated program must conform to: the declared
types, the subtype relation between them and the declared predicates.  It is
read-only for the whole batch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Tuple, Union

from subsynth.errors import EmptySchema


@dataclass(frozen=True)
class TypeConstructor:
    name: str
    arity: int = 0


@dataclass(frozen=True)
class UnaryPredicate:
    """Predicate whose arguments are objects of the listed types."""

    name: str
    arg_types: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BinaryPredicate:
    """Higher-order predicate; carries no argument metadata."""

    name: str


Predicate = Union[UnaryPredicate, BinaryPredicate]


@dataclass(frozen=True)
class DomainSchema:
    types: Dict[str, TypeConstructor] = field(default_factory=dict)
    subtypes: FrozenSet[Tuple[str, str]] = frozenset()
    predicates: Dict[str, Predicate] = field(default_factory=dict)

    def type_names(self) -> List[str]:
        """Declared type names in key order."""
        return sorted(self.types)

    def predicate_list(self) -> List[Predicate]:
        """Declared predicates in key order."""
        return [self.predicates[name] for name in sorted(self.predicates)]

    def possible_types(self, type_name: str) -> List[str]:
        """The type itself followed by its direct subtypes."""
        children = sorted(child for child, parent in self.subtypes if parent == type_name)
        return [type_name] + children

    def validate(self) -> None:
        if not self.types:
            raise EmptySchema("the domain declares no types to generate objects from")
        for name in self.types:
            if not name:
                raise EmptySchema("the domain declares a type with an empty name")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DomainSchema":
        """
        Build a schema from plain data::

            {
                "types": ["Set", "Point"],
                "subtypes": [["Point", "Set"]],
                "predicates": {
                    "In": ["Point", "Set"],       # unary, typed arguments
                    "Not": {"binary": True},      # binary, no arguments
                },
            }
        """
        types = {name: TypeConstructor(name) for name in _name_list(data.get("types", []), "types")}
        subtypes = frozenset((child, parent) for child, parent in data.get("subtypes", []))
        predicates: Dict[str, Predicate] = {}
        for name, spec in data.get("predicates", {}).items():
            predicates[name] = _predicate_from_spec(name, spec)
        return cls(types=types, subtypes=subtypes, predicates=predicates)


def _predicate_from_spec(name: str, spec: Union[Iterable[str], Mapping[str, Any]]) -> Predicate:
    if isinstance(spec, Mapping):
        if spec.get("binary"):
            return BinaryPredicate(name)
        return UnaryPredicate(name, tuple(_name_list(spec.get("args", ()), name)))
    return UnaryPredicate(name, tuple(_name_list(spec, name)))


def _name_list(value: Any, field_name: str) -> List[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise TypeError(f"'{field_name}' must be a list of names, not {type(value).__name__}")
    return list(value)
