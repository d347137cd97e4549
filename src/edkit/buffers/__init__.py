"""Buffer text cleanup helpers."""

from __future__ import annotations

from .whitespace import CleanupResult, clean_file, strip_trailing_whitespace, substitute

__all__ = ["CleanupResult", "clean_file", "strip_trailing_whitespace", "substitute"]
