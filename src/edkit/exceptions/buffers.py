"""Text substitution exceptions."""

from __future__ import annotations

from edkit.exceptions.base import EdkitError


class PatternNotFoundError(EdkitError, LookupError):
    """Raised when a substitution pattern matches nothing."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Pattern not found: {pattern}")
        self.pattern = pattern
