"""Related file-name derivation for C and C++ sources."""

from __future__ import annotations

from .rules import (
    apply_rules,
    header_or_forward_header_to_source,
    header_or_source_to_forward_header,
    source_or_forward_header_to_header,
    suffix_category,
    transform,
)

__all__ = [
    "apply_rules",
    "header_or_forward_header_to_source",
    "header_or_source_to_forward_header",
    "source_or_forward_header_to_header",
    "suffix_category",
    "transform",
]
