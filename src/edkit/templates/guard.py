"""Include guard naming and wrapping."""

from __future__ import annotations

from pathlib import Path

from edkit.constants.templates import GUARD_INVALID_CHARS_PATTERN, GUARD_PRESENT_PATTERN


def _identifier(raw: str) -> str:
    return GUARD_INVALID_CHARS_PATTERN.sub("_", raw).strip("_").upper()


def include_guard_name(path: Path, root: Path | None = None, prefix: str = "") -> str:
    """Build an include guard macro such as ``SRC_NET_SOCKET_FWD_HPP``.

    The path is taken relative to *root* when it lies below it; otherwise
    only the file name is used.
    """
    relative = Path(path.name)
    if root is not None:
        try:
            relative = path.resolve().relative_to(root.resolve())
        except ValueError:
            pass

    guard = _identifier(relative.as_posix())
    if prefix:
        guard = f"{_identifier(prefix)}_{guard}"
    if not guard or guard[0].isdigit():
        guard = f"_{guard}"
    return guard


def wrap_include_guard(text: str, guard: str) -> str:
    """Surround *text* with an ``#ifndef``/``#define``/``#endif`` guard."""
    body = text if not text or text.endswith("\n") else f"{text}\n"
    if body:
        body = f"{body}\n"
    return f"#ifndef {guard}\n#define {guard}\n\n{body}#endif // {guard}\n"


def has_include_guard(text: str) -> bool:
    """Return True if *text* already has ``#pragma once`` or an ifndef/define pair."""
    return GUARD_PRESENT_PATTERN.search(text) is not None
