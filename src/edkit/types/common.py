"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

FileCategory: TypeAlias = Literal["source", "header", "forward_header"]
TransformTarget: TypeAlias = Literal["header", "source", "forward_header"]
