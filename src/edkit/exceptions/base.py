"""Root of the Edkit exception hierarchy."""

from __future__ import annotations


class EdkitError(Exception):
    """Base class for all Edkit errors."""
