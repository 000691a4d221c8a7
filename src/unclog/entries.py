"""Entry management utilities."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from itertools import takewhile
from pathlib import Path
from typing import Iterable

from .config import BulletStyle
from .errors import InvalidEntryIdError, InvalidEntryNumberError
from .fs import entry_name, read_text
from .utils import trim_newlines

MAX_ENTRY_ID = 2**64 - 1
LIST_MARKERS = ("- ", "* ")


@dataclass(frozen=True)
class Entry:
    """A single change, read from one fragment file."""

    id: int
    details: str

    @classmethod
    def read_from_file(cls, path: Path) -> "Entry":
        entry_id = parse_entry_id(entry_name(path))
        details = trim_newlines(read_text(path))
        return cls(id=entry_id, details=details)


def parse_entry_id(filename: str) -> int:
    """Extract the numeric prefix from an entry filename."""
    digits = "".join(takewhile(str.isnumeric, filename))
    if not digits:
        raise InvalidEntryIdError(filename)
    if not (digits.isascii() and digits.isdecimal()):
        raise InvalidEntryNumberError(digits, "invalid digit found in string")
    value = int(digits)
    if value > MAX_ENTRY_ID:
        raise InvalidEntryNumberError(digits, "number too large to fit in target type")
    return value


def read_entries_sorted(paths: Iterable[Path]) -> list[Entry]:
    """Read the given fragment files, ordered by ascending entry id.

    Entries sharing an id keep the order in which their paths were given.
    """
    entries = [Entry.read_from_file(path) for path in paths]
    return sorted(entries, key=lambda entry: entry.id)


def as_list_item(details: str, bullet: BulletStyle) -> str:
    """Return the entry text with its list marker set to ``bullet``."""
    for marker in LIST_MARKERS:
        if details.startswith(marker):
            return f"{bullet} {details[len(marker):]}"
    return f"{bullet} {details}"


def indent_entry(entry: Entry, bullet: BulletStyle, indent: int, overflow_indent: int) -> list[str]:
    """Render one entry as list item lines.

    Continuation lines are re-indented to line up with the item's content.
    """
    first, *rest = as_list_item(entry.details, bullet).split("\n")
    lines = [" " * indent + first.rstrip()]
    if rest:
        continuation = textwrap.dedent("\n".join(rest))
        for line in continuation.split("\n"):
            lines.append(" " * overflow_indent + line if line.strip() else "")
    return lines


def indent_entries(
    entries: Iterable[Entry], bullet: BulletStyle, indent: int, overflow_indent: int
) -> list[str]:
    lines: list[str] = []
    for entry in entries:
        lines.extend(indent_entry(entry, bullet, indent, overflow_indent))
    return lines
