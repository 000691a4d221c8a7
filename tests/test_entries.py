"""Tests for entry helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from unclog.entries import (
    Entry,
    as_list_item,
    indent_entries,
    parse_entry_id,
    read_entries_sorted,
)
from unclog.errors import InvalidEntryIdError, InvalidEntryNumberError

WriteFile = Callable[[Path, str], Path]


def test_parse_entry_id_reads_leading_digits() -> None:
    assert parse_entry_id("42-add-feature.md") == 42
    assert parse_entry_id("007.md") == 7
    assert parse_entry_id("18446744073709551615-max.md") == 2**64 - 1


@pytest.mark.parametrize("filename", ["add-feature.md", ".hidden", "-1-negative.md", ""])
def test_parse_entry_id_rejects_missing_prefix(filename: str) -> None:
    with pytest.raises(InvalidEntryIdError):
        parse_entry_id(filename)


def test_parse_entry_id_rejects_overflowing_number() -> None:
    with pytest.raises(InvalidEntryNumberError):
        parse_entry_id("18446744073709551616-too-big.md")


@pytest.mark.parametrize("filename", ["½-half.md", "٣-arabic-indic.md", "1٣-mixed.md"])
def test_parse_entry_id_rejects_non_ascii_numerals(filename: str) -> None:
    with pytest.raises(InvalidEntryNumberError):
        parse_entry_id(filename)


def test_read_entry_trims_only_newlines(tmp_path: Path, write_file: WriteFile) -> None:
    path = write_file(tmp_path / "3-entry.md", "\n\n- Some change\n  continued  \n\n")

    entry = Entry.read_from_file(path)

    assert entry == Entry(id=3, details="- Some change\n  continued  ")


def test_read_entries_sorted_orders_by_id(tmp_path: Path, write_file: WriteFile) -> None:
    paths = [
        write_file(tmp_path / "10-ten.md", "- Ten"),
        write_file(tmp_path / "2-two.md", "- Two"),
        write_file(tmp_path / "1-one.md", "- One"),
    ]

    entries = read_entries_sorted(paths)

    assert [entry.id for entry in entries] == [1, 2, 10]


def test_read_entries_sorted_keeps_given_order_for_duplicate_ids(
    tmp_path: Path, write_file: WriteFile
) -> None:
    paths = [
        write_file(tmp_path / "1-second.md", "- Second"),
        write_file(tmp_path / "1-first.md", "- First"),
    ]

    entries = read_entries_sorted(paths)

    assert [entry.details for entry in entries] == ["- Second", "- First"]


def test_as_list_item_applies_bullet_style() -> None:
    assert as_list_item("- Change", "*") == "* Change"
    assert as_list_item("* Change", "-") == "- Change"
    assert as_list_item("Plain text", "-") == "- Plain text"


def test_indent_entries_aligns_continuation_lines() -> None:
    entries = [
        Entry(id=1, details="- First line\n  second line\n    nested"),
        Entry(id=2, details="- Other"),
    ]

    lines = indent_entries(entries, "-", 2, 4)

    assert lines == [
        "  - First line",
        "    second line",
        "      nested",
        "  - Other",
    ]


def test_indent_entries_keeps_blank_lines_empty() -> None:
    entries = [Entry(id=1, details="- Title\n\n  Paragraph")]

    assert indent_entries(entries, "-", 0, 2) == ["- Title", "", "  Paragraph"]


def test_blank_entry_renders_without_trailing_whitespace(
    tmp_path: Path, write_file: WriteFile
) -> None:
    entry = Entry.read_from_file(write_file(tmp_path / "1-blank.md", "\n\n"))

    assert indent_entries([entry], "-", 0, 2) == ["-"]
    assert indent_entries([entry], "*", 2, 4) == ["  *"]
