"""Tests for existence-checked related-file lookup."""

from __future__ import annotations

from pathlib import Path

from edkit.workspace import find_alternate, find_forward_header, find_header, find_source


def test_find_header_prefers_hpp(tmp_path: Path, write_file) -> None:  # type: ignore[no-untyped-def]
    hpp = write_file("widget.hpp")
    write_file("widget.h")

    result = find_header("widget.cpp", tmp_path)

    assert result.found
    assert result.path == hpp


def test_find_header_falls_back_to_h_for_cpp(tmp_path: Path, write_file) -> None:  # type: ignore[no-untyped-def]
    h = write_file("lib/widget.h")

    result = find_header("lib/widget.cpp", tmp_path)

    assert result.path == h
    assert result.candidates == ("lib/widget.hpp", "lib/widget.h")


def test_find_header_not_found_reports_message(tmp_path: Path) -> None:
    result = find_header("widget.cpp", tmp_path)

    assert not result.found
    assert result.path is None
    assert result.message == "widget.hpp or widget.h not found"


def test_find_header_for_c_source_has_no_fallback(tmp_path: Path) -> None:
    result = find_header("driver.c", tmp_path)

    assert result.candidates == ("driver.h",)
    assert result.message == "driver.h not found"


def test_find_source_and_forward_header(tmp_path: Path, write_file) -> None:  # type: ignore[no-untyped-def]
    source = write_file("widget.cpp")
    forward = write_file("widget_fwd.hpp")

    assert find_source("widget.hpp", tmp_path).path == source
    assert find_forward_header("widget.cpp", tmp_path).path == forward


def test_unrelated_name_yields_no_candidates(tmp_path: Path) -> None:
    result = find_alternate("notes.txt", "header", tmp_path)

    assert result.candidates == ()
    assert result.message == "notes.txt not found"


def test_directory_with_candidate_name_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "widget.hpp").mkdir()

    assert not find_alternate("widget.cpp", "header", tmp_path).found
