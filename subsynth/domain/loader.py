"""
Domain file reader.

Reads the Element-style subset the synthesizer understands::

    -- comments start with '--' or '//'
    type Set
    type Point
    Point <: Set
    predicate In : Point p * Set s
    predicate Not : Prop p

A predicate whose arguments are all ``Prop`` is a higher-order (binary)
predicate.  ``function``, ``operator``, ``notation`` and ``value`` lines are
accepted but not used for generation.  Files ending in ``.json`` are read
with :meth:`DomainSchema.from_dict`.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Set, Tuple

from subsynth.constants import PROP_TYPE
from subsynth.domain.schema import (
    BinaryPredicate,
    DomainSchema,
    Predicate,
    TypeConstructor,
    UnaryPredicate,
)
from subsynth.errors import DomainParseError

logger = logging.getLogger("subsynth.domain")

_IDENT = r"[A-Za-z_][A-Za-z0-9_']*"
_TYPE_RE = re.compile(rf"^type\s+({_IDENT})\s*$")
_SUBTYPE_RE = re.compile(rf"^({_IDENT})\s*<:\s*({_IDENT})\s*$")
_PREDICATE_RE = re.compile(rf"^predicate\s+({_IDENT})\s*(?::\s*(.*))?$")
_ARG_RE = re.compile(rf"^({_IDENT})(?:\s+{_IDENT})?$")

_IGNORED_KEYWORDS = frozenset({"function", "operator", "notation", "value"})


def _strip_comment(line: str) -> str:
    for marker in ("--", "//"):
        idx = line.find(marker)
        if idx != -1:
            line = line[:idx]
    return line.strip()


def _parse_arg_types(text: str, filename: str, lineno: int) -> List[str]:
    text = text.strip()
    if not text:
        return []
    arg_types = []
    for part in text.split("*"):
        m = _ARG_RE.match(part.strip())
        if not m:
            raise DomainParseError(f"malformed predicate argument '{part.strip()}'", filename, lineno)
        arg_types.append(m.group(1))
    return arg_types


def parse_domain(text: str, filename: str = "<domain>") -> DomainSchema:
    """Parse domain source text into a :class:`DomainSchema`."""
    types: Dict[str, TypeConstructor] = {}
    subtypes: Set[Tuple[str, str]] = set()
    predicates: Dict[str, Predicate] = {}

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _strip_comment(raw)
        if not line:
            continue

        m = _TYPE_RE.match(line)
        if m:
            types[m.group(1)] = TypeConstructor(m.group(1))
            continue

        m = _SUBTYPE_RE.match(line)
        if m:
            subtypes.add((m.group(1), m.group(2)))
            continue

        m = _PREDICATE_RE.match(line)
        if m:
            name = m.group(1)
            if name in predicates:
                raise DomainParseError(f"predicate '{name}' declared twice", filename, lineno)
            arg_types = _parse_arg_types(m.group(2) or "", filename, lineno)
            if arg_types and all(t == PROP_TYPE for t in arg_types):
                predicates[name] = BinaryPredicate(name)
            elif PROP_TYPE in arg_types:
                raise DomainParseError(
                    f"predicate '{name}' mixes {PROP_TYPE} with object arguments", filename, lineno
                )
            else:
                predicates[name] = UnaryPredicate(name, tuple(arg_types))
            continue

        keyword = line.split()[0]
        if keyword in _IGNORED_KEYWORDS:
            logger.debug("%s:%d: skipping unsupported '%s' declaration", filename, lineno, keyword)
            continue

        raise DomainParseError(f"unrecognised declaration '{line}'", filename, lineno)

    return DomainSchema(types=types, subtypes=frozenset(subtypes), predicates=predicates)


def load_domain(path: str) -> DomainSchema:
    """Read a domain file from *path*."""
    domain_path = Path(path)
    try:
        with open(domain_path, "r") as f:
            content = f.read()
    except OSError as e:
        raise DomainParseError(f"cannot read domain file: {e.strerror}", str(domain_path)) from e

    if domain_path.suffix == ".json":
        try:
            return DomainSchema.from_dict(json.loads(content))
        except (ValueError, TypeError, AttributeError) as e:
            raise DomainParseError(f"invalid JSON domain: {e}", str(domain_path)) from e
    return parse_domain(content, str(domain_path))
