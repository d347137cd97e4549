"""Repository root discovery by version-control marker directories."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from edkit.constants.config import DEFAULT_MAX_ROOT_LEVELS, DEFAULT_ROOT_MARKERS

logger = logging.getLogger(__name__)


def find_marker_root(start: Path, marker: str, max_levels: int = DEFAULT_MAX_ROOT_LEVELS) -> Path:
    """Return the outermost directory containing *marker*, walking up from *start*.

    *start* itself and at most *max_levels* ancestors above it are examined.
    The walk keeps going past the first hit so nested checkouts resolve to the
    outer repository. When no directory holds the marker, *start* is returned.
    """
    if max_levels <= 0:
        raise ValueError("max_levels must be positive")

    current = start
    found = start
    for _ in range(max_levels + 1):
        if (current / marker).is_dir():
            found = current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return found


def find_repository_root(
    start: Path | None = None,
    markers: Sequence[str] = DEFAULT_ROOT_MARKERS,
    max_levels: int = DEFAULT_MAX_ROOT_LEVELS,
) -> Path:
    """Locate the repository root above *start* (default: the working directory).

    Markers are tried in priority order; the first one whose search lands
    somewhere other than *start* wins. Falls back to *start* itself.
    """
    start = (start or Path.cwd()).resolve()
    for marker in markers:
        root = find_marker_root(start, marker, max_levels)
        if root != start:
            logger.debug("Repository root %s found via %s", root, marker)
            return root
    logger.debug("No repository marker above %s", start)
    return start
