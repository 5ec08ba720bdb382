"""
Global constants used across the synthesizer.

Guidelines
----------
* Every constant is typed and immutable (``Final``).
* Nothing machine-specific is hard-coded; seed and output directory can be
  overridden through environment variables.
"""

from __future__ import annotations

import os
from typing import Final, Tuple

# -- Generation bounds -------------------------------------------------------

# Number of type declarations opening every program.
HEADER_RANGE: Final[Tuple[int, int]] = (1, 2)

DEFAULT_MIN_LENGTH: Final[int] = 1
DEFAULT_MAX_LENGTH: Final[int] = 10
DEFAULT_NUM_PROGRAMS: Final[int] = 1

# -- Randomness ----------------------------------------------------------------

DEFAULT_SEED: Final[int] = int(os.environ.get("SUBSYNTH_SEED", "7"))

# -- Argument policy -----------------------------------------------------------

DEFAULT_ARG_OPTION: Final[str] = "mixed"

# -- Output --------------------------------------------------------------------

DEFAULT_OUTPUT_DIR: Final[str] = os.environ.get("SUBSYNTH_OUTPUT_DIR", "./synthesized/")
PROGRAM_FILE_PREFIX: Final[str] = "prog-"
PROGRAM_FILE_SUFFIX: Final[str] = ".sub"

# Argument type marking a higher-order (binary) predicate in domain files.
PROP_TYPE: Final[str] = "Prop"
