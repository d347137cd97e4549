"""Web lookup exceptions."""

from __future__ import annotations

from edkit.exceptions.base import EdkitError


class UnknownLookupError(EdkitError, KeyError):
    """Raised when a lookup name is not present in the lookup menu."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
