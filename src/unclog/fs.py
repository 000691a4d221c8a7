"""Directory scanning primitives shared by the changelog readers."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable, Optional

from .config import Config
from .errors import CannotObtainNameError, ExpectedDirError, IoError

DirEntryFilter = Callable[["os.DirEntry[str]"], bool]


def read_and_partition_dir(path: Path, *filters: DirEntryFilter) -> list[list[Path]]:
    """List ``path`` once and sort its children into one bucket per filter.

    A child goes into the bucket of the first filter that accepts it, and
    children no filter accepts are dropped. Buckets keep the filesystem
    enumeration order. Any error raised while listing the directory or
    reading a child's metadata aborts the scan.
    """
    try:
        with os.scandir(path) as iterator:
            children = list(iterator)
    except NotADirectoryError as exc:
        raise ExpectedDirError(path) from exc
    except OSError as exc:
        raise IoError(path, exc) from exc

    buckets: list[list[Path]] = [[] for _ in filters]
    for child in children:
        for bucket, keep in zip(buckets, filters):
            try:
                accepted = keep(child)
            except OSError as exc:
                raise IoError(Path(child.path), exc) from exc
            if accepted:
                bucket.append(Path(child.path))
                break
    return buckets


def read_and_filter_dir(path: Path, keep: DirEntryFilter) -> list[Path]:
    """Return the immediate children of ``path`` accepted by ``keep``."""
    [selected] = read_and_partition_dir(path, keep)
    return selected


def is_visible_dir_entry(entry: "os.DirEntry[str]") -> bool:
    return not entry.name.startswith(".") and entry.is_dir()


def entry_file_filter(config: Config) -> DirEntryFilter:
    """Return a filter accepting only files that look like changelog entries."""
    suffix = f".{config.change_sets.entry_ext}"
    summary_filename = config.change_sets.summary_filename

    def _keep(entry: "os.DirEntry[str]") -> bool:
        name = entry.name
        if name.startswith(".") or name == summary_filename:
            return False
        if not name.endswith(suffix):
            return False
        return entry.is_file()

    return _keep


def ensure_dir(path: Path) -> None:
    """Raise unless ``path`` exists and is a directory."""
    try:
        mode = path.stat().st_mode
    except OSError as exc:
        raise IoError(path, exc) from exc
    if not stat.S_ISDIR(mode):
        raise ExpectedDirError(path)


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(path, exc) from exc


def read_text_opt(path: Path) -> Optional[str]:
    """Read a UTF-8 file, returning None when it does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(path, exc) from exc


def entry_name(path: Path) -> str:
    """Return the final component of ``path`` as valid UTF-8 text."""
    name = path.name
    if not name or name in {".", ".."}:
        raise CannotObtainNameError(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CannotObtainNameError(path) from exc
    return name
