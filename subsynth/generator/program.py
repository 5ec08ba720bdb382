"""
Substance program AST and the builder that accumulates it.

Only the two statement kinds the synthesizer emits are modelled: object
declarations and predicate applications whose arguments are plain variable
references.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union


@dataclass(frozen=True)
class VarRef:
    name: str


@dataclass(frozen=True)
class Declaration:
    """``<type_name> <name>``: binds a fresh identifier to a type."""

    type_name: str
    name: str
    constructor_args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PredicateApplication:
    """``<predicate>(<args>)``"""

    predicate: str
    args: Tuple[VarRef, ...] = ()


Statement = Union[Declaration, PredicateApplication]


@dataclass(frozen=True)
class Program:
    """A finished program.

    ``header_count`` is the number of opening type declarations and
    ``body_count`` the number of body statements drawn for it.  Declarations
    introduced while generating arguments are in ``statements`` but counted
    by neither.
    """

    statements: Tuple[Statement, ...]
    header_count: int = 0
    body_count: int = 0

    def declarations(self) -> List[Declaration]:
        return [s for s in self.statements if isinstance(s, Declaration)]

    def applications(self) -> List[PredicateApplication]:
        return [s for s in self.statements if isinstance(s, PredicateApplication)]

    def __len__(self) -> int:
        return len(self.statements)


class ProgramBuilder:
    """Append-only statement sequence for the program under construction."""

    def __init__(self) -> None:
        self._statements: List[Statement] = []

    def append(self, stmt: Statement) -> None:
        self._statements.append(stmt)

    @property
    def statements(self) -> Tuple[Statement, ...]:
        return tuple(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def build(self, header_count: int = 0, body_count: int = 0) -> Program:
        return Program(self.statements, header_count, body_count)

    def reset(self) -> None:
        self._statements = []
