"""File header rendering and insertion."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from edkit.config import EdkitConfig
from edkit.constants.templates import (
    COMMENT_LEADERS,
    DEFAULT_COMMENT_LEADER,
    GUARDED_SUFFIXES,
    HEADER_RULE_WIDTH,
    SPECIAL_FILENAME_LEADERS,
)
from edkit.io import read_text, write_text_atomic
from edkit.templates.guard import has_include_guard, include_guard_name, wrap_include_guard

logger = logging.getLogger(__name__)


def comment_style(path: Path) -> str:
    """Return the line-comment leader for *path*."""
    if path.name in SPECIAL_FILENAME_LEADERS:
        return SPECIAL_FILENAME_LEADERS[path.name]
    return COMMENT_LEADERS.get(path.suffix.lower(), DEFAULT_COMMENT_LEADER)


def render_file_header(path: Path, config: EdkitConfig, today: date) -> str:
    """Render the comment block placed at the top of new files."""
    leader = comment_style(path)
    rule = f"{leader} {'-' * (HEADER_RULE_WIDTH - len(leader) - 1)}"
    fields = [("File", path.name)]
    if config.author_line:
        fields.append(("Author", config.author_line))
    fields.append(("Created", today.isoformat()))
    if config.license:
        fields.append(("License", config.license))

    width = max(len(label) for label, _ in fields) + 1
    lines = [rule]
    lines.extend(f"{leader} {f'{label}:':<{width}} {value}" for label, value in fields)
    lines.append(rule)
    return "\n".join(lines) + "\n"


def has_file_header(text: str, path: Path, config: EdkitConfig) -> bool:
    """Return True if *text* already starts with an edkit header for *path*."""
    expected = render_file_header(path, config, date.today()).splitlines()[:2]
    lines = text.splitlines()
    if lines and lines[0].startswith("#!"):
        lines = lines[1:]
    return lines[:2] == expected


def insert_file_header(
    path: Path,
    config: EdkitConfig,
    *,
    today: date | None = None,
    root: Path | None = None,
) -> str:
    """Rewrite *path* with a file header (and include guard for headers) on top.

    A leading ``#!`` line stays first and CRLF files keep CRLF line endings.
    Files that already carry the header are left untouched. Returns the resulting text.
    """
    text = read_text(path) if path.exists() else ""
    if has_file_header(text, path, config):
        logger.info("%s already has a file header", path)
        return text

    shebang = ""
    body = text
    if body.startswith("#!"):
        shebang, _, body = body.partition("\n")
        shebang = f"{shebang}\n"

    if path.suffix.lower() in GUARDED_SUFFIXES and not has_include_guard(body):
        body = wrap_include_guard(body, include_guard_name(path, root, config.guard_prefix))

    header = render_file_header(path, config, today or date.today())
    updated = f"{shebang}{header}\n{body}" if body else f"{shebang}{header}"
    if "\r\n" in text:
        updated = updated.replace("\r\n", "\n").replace("\n", "\r\n")
    write_text_atomic(path, updated)
    logger.info("Inserted file header into %s", path)
    return updated
