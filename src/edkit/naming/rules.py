"""Ordered suffix-substitution rules between sources, headers and forward headers."""

from __future__ import annotations

from collections.abc import Sequence
from re import Pattern

from edkit.constants.naming import (
    FORWARD_MARKER,
    HEADER_SUFFIXES,
    SOURCE_SUFFIXES,
    TO_FORWARD_HEADER_RULES,
    TO_HEADER_RULES,
    TO_SOURCE_RULES,
)
from edkit.types import FileCategory, TransformTarget


def apply_rules(name: str, rules: Sequence[tuple[Pattern[str], str]]) -> str:
    """Apply the first matching ``(pattern, replacement)`` rule to *name*.

    Names that match no rule are returned unchanged.
    """
    for pattern, replacement in rules:
        if pattern.search(name):
            return pattern.sub(replacement, name, count=1)
    return name


def source_or_forward_header_to_header(name: str) -> str:
    """Map ``foo.cpp``/``foo_fwd.cpp`` to ``foo.hpp`` and ``foo.c`` to ``foo.h``."""
    return apply_rules(name, TO_HEADER_RULES)


def header_or_forward_header_to_source(name: str) -> str:
    """Map ``foo.hpp``/``foo_fwd.hpp`` to ``foo.cpp`` and ``foo.h`` to ``foo.c``."""
    return apply_rules(name, TO_SOURCE_RULES)


def header_or_source_to_forward_header(name: str) -> str:
    """Map ``foo.cpp``/``foo.hpp`` to ``foo_fwd.hpp`` and ``foo.c``/``foo.h`` to ``foo_fwd.h``."""
    return apply_rules(name, TO_FORWARD_HEADER_RULES)


_TRANSFORMS = {
    "header": source_or_forward_header_to_header,
    "source": header_or_forward_header_to_source,
    "forward_header": header_or_source_to_forward_header,
}


def transform(name: str, target: TransformTarget) -> str:
    """Derive the related file name of *target* category for *name*."""
    return _TRANSFORMS[target](name)


def suffix_category(name: str) -> FileCategory | None:
    """Classify *name* as a source, header or forward-declaration header."""
    for suffix in HEADER_SUFFIXES:
        if name.endswith(f"{FORWARD_MARKER}{suffix}"):
            return "forward_header"
    if name.endswith(HEADER_SUFFIXES):
        return "header"
    if name.endswith(SOURCE_SUFFIXES):
        return "source"
    return None
