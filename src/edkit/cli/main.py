"""CLI entrypoint for Edkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from edkit import __version__
from edkit.cli.handlers import COMMANDS, TARGETS
from edkit.config import EdkitConfig, load_config
from edkit.constants.branding import CLI_DESCRIPTION
from edkit.exceptions import ConfigError, EdkitError
from edkit.external import CommandRunner, DryRunRunner, SubprocessRunner
from edkit.hooks import Session
from edkit.naming import transform
from edkit.workspace import find_repository_root


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="edkit",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print external commands instead of launching them",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    alt = subparsers.add_parser("alt", help="Print the related file name (no existence check)")
    alt.add_argument("target", choices=sorted(TARGETS), help="Kind of related file")
    alt.add_argument("file", help="Source, header or forward header file name")

    switch = subparsers.add_parser("switch", help="Find an existing related file")
    switch.add_argument("target", choices=sorted(TARGETS), help="Kind of related file")
    switch.add_argument("file", help="Source, header or forward header file name")
    switch.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Directory the file name is relative to (default: working directory)",
    )

    root = subparsers.add_parser("root", help="Print the repository root")
    root.add_argument(
        "-C",
        "--directory",
        type=Path,
        default=None,
        help="Start the search here instead of the working directory",
    )

    header = subparsers.add_parser("header", help="Insert a file header (and include guard for headers)")
    header.add_argument("file", type=Path, help="File to rewrite")
    header.add_argument("--guard-root", type=Path, default=None, help="Derive the include guard relative to this")

    guard = subparsers.add_parser("guard", help="Print or insert an include guard")
    guard.add_argument("file", type=Path, help="Header file")
    guard.add_argument("--guard-root", type=Path, default=None, help="Derive the include guard relative to this")
    guard.add_argument("-i", "--insert", action="store_true", help="Wrap the file contents in the guard")

    strip_ws = subparsers.add_parser("strip-ws", help="Remove trailing whitespace")
    strip_ws.add_argument("file", type=Path, help="File to clean")

    lookup = subparsers.add_parser("lookup", help="Search the web for a term")
    lookup.add_argument("name", nargs="?", default=None, help="Lookup name or menu number")
    lookup.add_argument("term", nargs="*", default=[], help="Search term")
    lookup.add_argument("-l", "--list", action="store_true", help="Show the lookup menu")

    for name, help_text in (
        ("vcs-add", "Stage a file in its repository"),
        ("typeset", "Compile a document"),
        ("plot", "Render a plot script"),
        ("on-save", "Run the save hooks for a file"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", type=Path, help="Target file")

    subparsers.add_parser("validate-config", help="Validate configuration and exit")

    return parser


def load_session(args: argparse.Namespace, runner: CommandRunner | None = None) -> Session:
    """Load config from the repository around the working directory and start a session."""
    config = _load_config(args.config)
    if runner is None:
        runner = DryRunRunner() if args.dry_run else SubprocessRunner()
    return Session(config, runner)


def _load_config(config_path: Path | None) -> EdkitConfig:
    return load_config(find_repository_root(), config_path)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "alt":
        print(transform(args.file, TARGETS[args.target]))
        return 0

    if args.command == "lookup" and args.name is not None and not args.list and not " ".join(args.term).strip():
        parser.error("lookup requires a search term")

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        session = load_session(args)
        return handler(args, session)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except EdkitError as exc:
        print(f"edkit error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"edkit error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
