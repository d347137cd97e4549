"""Tests for CLI parser and main behavior."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from edkit.cli.main import build_parser, main
from edkit.exceptions import ExternalCommandError


def test_build_parser_accepts_global_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["-c", str(tmp_path / "edkit.yaml"), "-n", "-v", "root"])

    assert args.config == tmp_path / "edkit.yaml"
    assert args.dry_run is True
    assert args.verbose is True
    assert args.command == "root"
    assert args.directory is None


def test_build_parser_rejects_unknown_target() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["alt", "module", "foo.cpp"])


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(["-n", "plot", "a.gp"], ["--dry-run", "plot", "a.gp"], id="dry-run"),
        pytest.param(["root", "-C", "src"], ["root", "--directory", "src"], id="directory"),
        pytest.param(["switch", "header", "a.cpp", "-r", "x"], ["switch", "header", "a.cpp", "--root", "x"], id="root"),
        pytest.param(["guard", "a.h", "-i"], ["guard", "a.h", "--insert"], id="insert"),
        pytest.param(["lookup", "-l"], ["lookup", "--list"], id="list"),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_main_help_shows_ascii_banner(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--help"])

    captured = capsys.readouterr()
    assert ">_ EDKIT" in captured.out


@pytest.mark.parametrize(
    ("target", "name", "expected"),
    [
        ("header", "module_fwd.cpp", "module.hpp"),
        ("source", "foo.h", "foo.c"),
        ("fwd", "foo.cpp", "foo_fwd.hpp"),
        ("header", "README.md", "README.md"),
    ],
)
def test_main_alt_prints_related_name(
    target: str, name: str, expected: str, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["alt", target, name]) == 0

    assert capsys.readouterr().out.strip() == expected


def test_main_root_prints_outermost_repository(
    nested_repo: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(nested_repo / "b" / "c")

    assert main(["root"]) == 0

    assert capsys.readouterr().out.strip() == str(nested_repo.resolve())


def test_main_root_uses_configured_markers(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    project = tmp_path / "proj"
    (project / ".jj").mkdir(parents=True)
    (project / "src").mkdir()
    (tmp_path / "cfg.yaml").write_text("root_markers: [.jj]\n", encoding="utf-8")
    monkeypatch.chdir(project / "src")

    assert main(["-c", str(tmp_path / "cfg.yaml"), "root"]) == 0

    assert capsys.readouterr().out.strip() == str(project.resolve())


def test_main_switch_reports_not_found(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["switch", "header", "widget.cpp"]) == 0

    assert capsys.readouterr().out.strip() == "widget.hpp or widget.h not found"


def test_main_switch_prints_existing_file(
    tmp_path: Path, write_file, capsys: pytest.CaptureFixture[str]  # type: ignore[no-untyped-def]
) -> None:
    header = write_file("lib/widget.h")

    assert main(["switch", "header", "widget.cpp", "--root", str(tmp_path / "lib")]) == 0

    assert capsys.readouterr().out.strip() == str(header)


def test_main_header_then_header_again(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "net.hpp"

    assert main(["header", str(target)]) == 0
    assert main(["header", str(target)]) == 0

    out = capsys.readouterr().out
    assert "file header inserted" in out
    assert "file header already present" in out
    assert "#ifndef NET_HPP" in target.read_text(encoding="utf-8")


def test_main_guard_prints_and_inserts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, write_file, capsys: pytest.CaptureFixture[str]  # type: ignore[no-untyped-def]
) -> None:
    monkeypatch.chdir(tmp_path)
    path = write_file("src/util.h", "int f(void);\n")

    assert main(["guard", str(path), "--guard-root", str(tmp_path)]) == 0
    assert main(["guard", str(path), "--insert"]) == 0
    assert main(["guard", str(path), "--insert"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "SRC_UTIL_H"
    assert out[1].endswith("wrapped in UTIL_H")
    assert out[2].endswith("include guard already present")
    assert path.read_text(encoding="utf-8").startswith("#ifndef UTIL_H\n")


def test_main_strip_ws_reports_message(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, write_file, capsys: pytest.CaptureFixture[str]  # type: ignore[no-untyped-def]
) -> None:
    monkeypatch.chdir(tmp_path)
    path = write_file("a.c", "int x; \n")

    assert main(["strip-ws", str(path)]) == 0
    assert main(["strip-ws", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Removed trailing whitespace on 1 line(s)" in out
    assert "No trailing whitespace found" in out


def test_main_strip_ws_missing_file_exit_code(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["strip-ws", str(tmp_path / "missing.c")]) == 1

    assert "edkit error" in capsys.readouterr().err


def test_main_lookup_dry_run_echoes_browser_command(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["--dry-run", "lookup", "wikipedia", "include", "guard"]) == 0

    out = capsys.readouterr().out.strip()
    assert out.startswith("xdg-open ")
    assert "search=include+guard" in out


def test_main_lookup_list_shows_menu(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["lookup"]) == 0

    assert "1. google" in capsys.readouterr().out


def test_main_lookup_without_term_is_usage_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["lookup", "google"])

    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "lookup requires a search term" in err
    assert "Configuration error" not in err


def test_main_unknown_lookup_exit_code(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["lookup", "bing", "x"]) == 1

    assert "Unknown lookup `bing`" in capsys.readouterr().err


def test_main_missing_explicit_config_exit_code(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["-c", str(tmp_path / "nope.yaml"), "root"]) == 2

    assert "Configuration error: Config file not found" in capsys.readouterr().err


def test_main_vcs_add_runs_from_repository_root(
    nested_repo: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(nested_repo)
    target = nested_repo / "b" / "c" / "x.c"

    assert main(["-n", "vcs-add", str(target)]) == 0

    out = capsys.readouterr().out.strip()
    assert out == f"(cd {nested_repo.resolve()} && git add -- {target.resolve()})"


def test_main_on_save_renders_plot_in_dry_run(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["-n", "on-save", "fig.gp"]) == 0
    assert main(["-n", "on-save", "main.cpp"]) == 0

    assert capsys.readouterr().out.strip() == f"(cd {tmp_path.resolve()} && gnuplot fig.gp)"


@patch("edkit.external.runner.subprocess.Popen", side_effect=FileNotFoundError("missing"))
def test_main_typeset_launch_failure_exit_code(
    mock_popen: MagicMock,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["typeset", "paper.tex"]) == 1

    assert "Cannot launch latexmk" in capsys.readouterr().err
    assert issubclass(ExternalCommandError, OSError)


def test_main_validate_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "edkit.yaml").write_text("author: Jane\n", encoding="utf-8")

    assert main(["validate-config"]) == 0

    assert "Configuration is valid" in capsys.readouterr().out


@pytest.mark.parametrize(
    "command",
    [["strip-ws"], ["header"], ["guard", "--insert"]],
    ids=["strip-ws", "header", "guard-insert"],
)
def test_main_non_utf8_file_exit_code(
    command: list[str], tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "latin1.h"
    path.write_bytes(b"caf\xe9  \n")

    assert main([command[0], str(path), *command[1:]]) == 1

    assert "is not valid UTF-8 text" in capsys.readouterr().err
    assert path.read_bytes() == b"caf\xe9  \n"
