"""Repository root discovery and related-file lookup."""

from __future__ import annotations

from .alternate import AlternateResult, find_alternate, find_forward_header, find_header, find_source
from .root import find_marker_root, find_repository_root

__all__ = [
    "AlternateResult",
    "find_alternate",
    "find_forward_header",
    "find_header",
    "find_marker_root",
    "find_repository_root",
    "find_source",
]
