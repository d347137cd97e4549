"""Existence-checked lookup of a file's header, source or forward header."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from edkit.constants.naming import C_HEADER_SUFFIX, CPP_SOURCE_SUFFIX
from edkit.naming import (
    header_or_forward_header_to_source,
    header_or_source_to_forward_header,
    source_or_forward_header_to_header,
)
from edkit.types import TransformTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlternateResult:
    """Outcome of a related-file lookup; ``path`` is ``None`` when nothing exists."""

    name: str
    candidates: tuple[str, ...]
    path: Path | None = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def message(self) -> str:
        if self.path is not None:
            return str(self.path)
        return f"{' or '.join(self.candidates) or self.name} not found"


def _first_existing(name: str, candidates: tuple[str, ...], lookup_root: Path) -> AlternateResult:
    for candidate in candidates:
        path = lookup_root / candidate
        if path.is_file():
            return AlternateResult(name=name, candidates=candidates, path=path)
    logger.info("No related file for %s under %s", name, lookup_root)
    return AlternateResult(name=name, candidates=candidates)


def find_header(name: str, lookup_root: Path) -> AlternateResult:
    """Find the header belonging to *name*, trying ``.h`` after ``.hpp`` for C++ sources."""
    candidate = source_or_forward_header_to_header(name)
    if candidate == name:
        return AlternateResult(name=name, candidates=())
    candidates: tuple[str, ...] = (candidate,)
    if name.endswith(CPP_SOURCE_SUFFIX):
        candidates += (Path(candidate).with_suffix(C_HEADER_SUFFIX).as_posix(),)
    return _first_existing(name, candidates, lookup_root)


def find_source(name: str, lookup_root: Path) -> AlternateResult:
    """Find the source file belonging to header *name*."""
    candidate = header_or_forward_header_to_source(name)
    if candidate == name:
        return AlternateResult(name=name, candidates=())
    return _first_existing(name, (candidate,), lookup_root)


def find_forward_header(name: str, lookup_root: Path) -> AlternateResult:
    """Find the forward-declaration header belonging to *name*."""
    candidate = header_or_source_to_forward_header(name)
    if candidate == name:
        return AlternateResult(name=name, candidates=())
    return _first_existing(name, (candidate,), lookup_root)


_FINDERS = {
    "header": find_header,
    "source": find_source,
    "forward_header": find_forward_header,
}


def find_alternate(name: str, target: TransformTarget, lookup_root: Path) -> AlternateResult:
    """Dispatch to the existence-checked finder for *target*."""
    return _FINDERS[target](name, lookup_root)
