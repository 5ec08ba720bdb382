"""Renders generated programs as Substance source text."""

from typing import Iterable

from subsynth.generator.program import Declaration, PredicateApplication, Program, Statement


def format_statement(stmt: Statement) -> str:
    if isinstance(stmt, Declaration):
        if stmt.constructor_args:
            return f"{stmt.type_name} {stmt.name} := {stmt.type_name}({', '.join(stmt.constructor_args)})"
        return f"{stmt.type_name} {stmt.name}"
    if isinstance(stmt, PredicateApplication):
        args = ", ".join(arg.name for arg in stmt.args)
        return f"{stmt.predicate}({args})"
    raise TypeError(f"cannot print statement of type {type(stmt).__name__}")


def format_statements(statements: Iterable[Statement]) -> str:
    return "\n".join(format_statement(s) for s in statements)


def pretty_substance(program: Program) -> str:
    """Substance text for *program*, one statement per line."""
    return format_statements(program.statements) + "\n"
