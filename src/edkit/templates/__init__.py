"""File header and include guard generation."""

from __future__ import annotations

from .guard import has_include_guard, include_guard_name, wrap_include_guard
from .header import comment_style, has_file_header, insert_file_header, render_file_header

__all__ = [
    "comment_style",
    "has_file_header",
    "has_include_guard",
    "include_guard_name",
    "insert_file_header",
    "render_file_header",
    "wrap_include_guard",
]
