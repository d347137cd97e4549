"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from edkit.buffers import clean_file
from edkit.config import resolve_config_path
from edkit.external import lookup_command, lookup_menu, plot_command, typeset_command, vcs_add_command
from edkit.hooks import Session
from edkit.io import read_text, write_text_atomic
from edkit.templates import has_include_guard, include_guard_name, insert_file_header, wrap_include_guard
from edkit.types import TransformTarget
from edkit.workspace import find_alternate, find_repository_root

logger = logging.getLogger(__name__)

TARGETS: dict[str, TransformTarget] = {
    "header": "header",
    "source": "source",
    "fwd": "forward_header",
}


def _repository_root(session: Session, start: Path | None = None) -> Path:
    return find_repository_root(
        start,
        markers=session.config.root_markers,
        max_levels=session.config.max_root_levels,
    )


def handle_switch(args: argparse.Namespace, session: Session) -> int:
    """Print the related file if it exists, otherwise a not-found message."""
    lookup_root = args.root if args.root is not None else Path.cwd()
    result = find_alternate(args.file, TARGETS[args.target], lookup_root)
    print(result.message)
    return 0


def handle_root(args: argparse.Namespace, session: Session) -> int:
    print(_repository_root(session, args.directory))
    return 0


def handle_header(args: argparse.Namespace, session: Session) -> int:
    before = read_text(args.file) if args.file.exists() else None
    after = insert_file_header(args.file, session.config, root=args.guard_root)
    if after == before:
        print(f"{args.file}: file header already present")
    else:
        print(f"{args.file}: file header inserted")
    return 0


def handle_guard(args: argparse.Namespace, session: Session) -> int:
    guard = include_guard_name(args.file, args.guard_root, session.config.guard_prefix)
    if not args.insert:
        print(guard)
        return 0

    text = read_text(args.file) if args.file.exists() else ""
    if has_include_guard(text):
        print(f"{args.file}: include guard already present")
        return 0
    write_text_atomic(args.file, wrap_include_guard(text, guard))
    print(f"{args.file}: wrapped in {guard}")
    return 0


def handle_strip_ws(args: argparse.Namespace, session: Session) -> int:
    result = clean_file(args.file)
    print(f"{args.file}: {result.message}")
    return 0


def handle_lookup(args: argparse.Namespace, session: Session) -> int:
    """Show the lookup menu or open a search for the given term."""
    if args.list or args.name is None:
        for line in lookup_menu(session.config):
            print(line)
        return 0

    term = " ".join(args.term).strip()
    session.runner.launch(lookup_command(session.config, args.name, term))
    return 0


def handle_vcs_add(args: argparse.Namespace, session: Session) -> int:
    path = args.file.resolve()
    root = _repository_root(session, path.parent)
    session.runner.launch(vcs_add_command(path, session.config, root=root))
    return 0


def handle_typeset(args: argparse.Namespace, session: Session) -> int:
    session.runner.launch(typeset_command(args.file.resolve(), session.config))
    return 0


def handle_plot(args: argparse.Namespace, session: Session) -> int:
    session.runner.launch(plot_command(args.file.resolve(), session.config))
    return 0


def handle_on_save(args: argparse.Namespace, session: Session) -> int:
    count = session.file_written(args.file.resolve())
    logger.debug("Ran %d save hook(s) for %s", count, args.file)
    return 0


def handle_validate_config(args: argparse.Namespace, session: Session) -> int:
    path = resolve_config_path(find_repository_root(), args.config)
    source = path if path.exists() else "built-in defaults"
    print(f"Configuration is valid ({source}).")
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace, Session], int]] = {
    "switch": handle_switch,
    "root": handle_root,
    "header": handle_header,
    "guard": handle_guard,
    "strip-ws": handle_strip_ws,
    "lookup": handle_lookup,
    "vcs-add": handle_vcs_add,
    "typeset": handle_typeset,
    "plot": handle_plot,
    "on-save": handle_on_save,
    "validate-config": handle_validate_config,
}
