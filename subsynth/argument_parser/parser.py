"""
Command-line argument parsing for the synthesizer.

Uses a dataclass to hold parsed values, making the contract between the CLI
and the rest of the system explicit.
"""

from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass
from typing import Any, Dict

from subsynth.config.settings import ARG_OPTION_NAMES
from subsynth.constants import (
    DEFAULT_ARG_OPTION,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_NUM_PROGRAMS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SEED,
)


@dataclass
class SynthesizerArgs:
    """Container for parsed CLI arguments."""

    domain: str = ""
    path: str = DEFAULT_OUTPUT_DIR
    num_programs: int = DEFAULT_NUM_PROGRAMS
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    arg_option: str = DEFAULT_ARG_OPTION
    seed: int = DEFAULT_SEED
    quiet: bool = False
    debug: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the ``ArgumentParser`` (no side-effects)."""
    parser = argparse.ArgumentParser(
        description="Random Substance program synthesizer",
    )
    parser.add_argument("domain", help="domain file (Element subset or .json)")
    parser.add_argument(
        "--path", type=str, default=DEFAULT_OUTPUT_DIR,
        help="output directory for generated programs (default: %(default)s)",
    )
    parser.add_argument(
        "--num-programs", "-n", type=int, default=DEFAULT_NUM_PROGRAMS,
        help="number of programs to generate (default: %(default)s)",
    )
    parser.add_argument(
        "--min-length", type=int, default=DEFAULT_MIN_LENGTH,
        help="minimum number of body statements (default: %(default)s)",
    )
    parser.add_argument(
        "--max-length", type=int, default=DEFAULT_MAX_LENGTH,
        help="maximum number of body statements (default: %(default)s)",
    )
    parser.add_argument(
        "--arg-option", type=str, choices=sorted(ARG_OPTION_NAMES), default=DEFAULT_ARG_OPTION,
        help="how predicate arguments are obtained (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=DEFAULT_SEED,
        help="random seed for the whole batch (default: %(default)s)",
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="do not echo generated programs")
    parser.add_argument("--debug", action="store_true", help="enable verbose debug logging")
    return parser


def parse_args(argv=None) -> SynthesizerArgs:
    """Parse *argv* (or ``sys.argv``) and return a :class:`SynthesizerArgs`."""
    ns = _build_parser().parse_args(argv)
    return SynthesizerArgs(
        domain=ns.domain,
        path=ns.path,
        num_programs=ns.num_programs,
        min_length=ns.min_length,
        max_length=ns.max_length,
        arg_option=ns.arg_option,
        seed=ns.seed,
        quiet=ns.quiet,
        debug=ns.debug,
    )
