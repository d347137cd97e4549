"""Shared pytest fixtures for edkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from edkit.config import EdkitConfig


@pytest.fixture
def nested_repo(tmp_path: Path) -> Path:
    """Create ``a/.git`` and ``a/b/c`` under *tmp_path* and return ``a``."""
    outer = tmp_path / "a"
    (outer / ".git").mkdir(parents=True)
    (outer / "b" / "c").mkdir(parents=True)
    return outer


@pytest.fixture
def config() -> EdkitConfig:
    """Return a config with a fixed author for header rendering."""
    return EdkitConfig(author="Jane Doe", email="jane@example.com", license="MIT")


@pytest.fixture
def write_file(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Return a helper that writes text below *tmp_path* and returns the path."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
