"""Configuration loading and normalization for Edkit.

This package facade re-exports the public names so callers can use
``from edkit.config import ...``.
"""

from __future__ import annotations

from edkit.config.loader import load_config, resolve_config_path
from edkit.config.model import EdkitConfig

__all__ = ["EdkitConfig", "load_config", "resolve_config_path"]
