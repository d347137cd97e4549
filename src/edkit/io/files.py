"""Text read/write helpers with atomic persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from edkit.exceptions import TextDecodeError

TEMP_PREFIX: str = ".edkit-"
TEMP_SUFFIX: str = ".tmp"


def read_text(path: Path) -> str:
    """Read a UTF-8 text file, keeping its line endings untouched."""
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise TextDecodeError(f"{path} is not valid UTF-8 text") from exc


def write_text_atomic(path: Path, text: str) -> None:
    """Replace *path* with *text* by writing a sibling temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=TEMP_PREFIX,
            suffix=TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    if path.exists():
        os.chmod(temp_name, path.stat().st_mode)
    os.replace(temp_name, path)
