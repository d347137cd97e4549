"""Shared exception hierarchy for Edkit."""

from __future__ import annotations

from .base import EdkitError
from .buffers import PatternNotFoundError
from .config import ConfigError
from .external import ExternalCommandError
from .io import TextDecodeError
from .lookup import UnknownLookupError

__all__ = [
    "ConfigError",
    "EdkitError",
    "ExternalCommandError",
    "PatternNotFoundError",
    "TextDecodeError",
    "UnknownLookupError",
]
