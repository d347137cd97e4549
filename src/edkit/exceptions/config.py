"""Configuration-related exceptions."""

from __future__ import annotations

from edkit.exceptions.base import EdkitError


class ConfigError(EdkitError, ValueError):
    """Raised when edkit configuration is invalid."""
