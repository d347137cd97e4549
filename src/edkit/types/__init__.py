"""Shared types for Edkit."""

from __future__ import annotations

from .common import FileCategory, TransformTarget
from .config import LookupEntry, ToolCommands

__all__ = ["FileCategory", "LookupEntry", "ToolCommands", "TransformTarget"]
