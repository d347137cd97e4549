"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "EDKIT"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ EDKIT",
    "     // editor helpers for C and C++ trees",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} editor companion"))
