"""External command exceptions."""

from __future__ import annotations

from edkit.exceptions.base import EdkitError


class ExternalCommandError(EdkitError, OSError):
    """Raised when an external tool cannot be started."""
