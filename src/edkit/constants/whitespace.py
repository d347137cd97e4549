"""Patterns used by buffer whitespace cleanup."""

from __future__ import annotations

TRAILING_WHITESPACE_PATTERN: str = r"[ \t]+(?=\r?$)"
