"""
Output file helpers.

Programs are written as ``<directory>/prog-<i>.sub`` with ``i`` counting
from 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from subsynth.constants import PROGRAM_FILE_PREFIX, PROGRAM_FILE_SUFFIX


def program_file_names(directory: str, n: int) -> List[str]:
    """Return the *n* output paths under *directory*, in batch order."""
    return [
        str(Path(directory) / f"{PROGRAM_FILE_PREFIX}{i}{PROGRAM_FILE_SUFFIX}")
        for i in range(1, n + 1)
    ]


def ensure_directory(directory: str) -> Path:
    """Create *directory* (and parents) if missing."""
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_program(path: str, text: str) -> None:
    with open(path, "w") as f:
        f.write(text)
