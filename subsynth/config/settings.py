"""
Synthesizer settings.

This module holds the knobs that stay fixed for a whole batch: the range the
body length is drawn from and the policy used to produce predicate
arguments.  Settings can be built directly or from the option names used on
the command line (``existing``, ``generated``, ``mixed``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from subsynth.constants import DEFAULT_ARG_OPTION, DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from subsynth.errors import InvalidRange


class ArgOption(Enum):
    """How a required predicate argument is obtained."""

    EXISTING = "existing"
    GENERATED = "generated"
    MIXED = "mixed"


class GenericOption(Enum):
    """Which type a declaration may use for a requested type.

    ``CONCRETE`` declares exactly the requested type.  ``GENERAL`` may pick
    the type itself or any of its direct subtypes in the domain.
    """

    CONCRETE = "concrete"
    GENERAL = "general"


# Option names accepted on the command line -> ArgOption
ARG_OPTION_NAMES = {option.value: option for option in ArgOption}


def get_arg_option(name: str) -> ArgOption:
    """
    Resolve a command-line option name to an :class:`ArgOption`.

    Args:
        name: Option name, case-insensitive (e.g. "mixed")

    Returns:
        The matching ArgOption

    Raises:
        ValueError: if the name is unknown
    """
    try:
        return ARG_OPTION_NAMES[name.lower()]
    except KeyError:
        raise ValueError(
            f"unknown argument option '{name}' (expected one of {sorted(ARG_OPTION_NAMES)})"
        ) from None


@dataclass(frozen=True)
class Setting:
    """Immutable synthesizer settings, shared by every program of a batch."""

    length_range: Tuple[int, int] = (DEFAULT_MIN_LENGTH, DEFAULT_MAX_LENGTH)
    arg_option: ArgOption = ArgOption(DEFAULT_ARG_OPTION)

    @property
    def min_length(self) -> int:
        return self.length_range[0]

    @property
    def max_length(self) -> int:
        return self.length_range[1]

    def validate(self) -> None:
        """Raise :class:`InvalidRange` unless ``0 <= min_length <= max_length``."""
        lmin, lmax = self.length_range
        if lmin < 0:
            raise InvalidRange(f"minimum length must not be negative (got {lmin})")
        if lmin > lmax:
            raise InvalidRange(f"minimum length {lmin} exceeds maximum length {lmax}")

    @classmethod
    def from_names(cls, min_length: int, max_length: int, arg_option: str = DEFAULT_ARG_OPTION) -> "Setting":
        return cls(length_range=(min_length, max_length), arg_option=get_arg_option(arg_option))
