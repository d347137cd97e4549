"""File I/O exceptions."""

from __future__ import annotations

from edkit.exceptions.base import EdkitError


class TextDecodeError(EdkitError, ValueError):
    """Raised when a file edkit rewrites is not valid UTF-8 text."""
