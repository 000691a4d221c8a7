"""Release directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from packaging.version import InvalidVersion, Version

from .change_set import ChangeSet
from .config import Config
from .errors import CannotExtractVersionError, UnexpectedReleaseDirPrefixError
from .fs import entry_name
from .utils import log_debug

RELEASE_DIR_PREFIX = "v"


def parse_release_version(name: str) -> Version:
    """Return the version encoded in a release directory name like ``v1.2.0``."""
    if not name.startswith(RELEASE_DIR_PREFIX):
        raise UnexpectedReleaseDirPrefixError(name)
    try:
        return Version(name[len(RELEASE_DIR_PREFIX) :])
    except InvalidVersion as exc:
        raise CannotExtractVersionError(name) from exc


@dataclass(frozen=True)
class Release:
    """The changes that went into a single released version."""

    id: str
    version: Version
    changes: ChangeSet

    @classmethod
    def read_from_dir(cls, config: Config, path: Path) -> "Release":
        release_id = entry_name(path)
        version = parse_release_version(release_id)
        log_debug(f"loading release {version} from {path}")
        return cls(id=release_id, version=version, changes=ChangeSet.read_from_dir(config, path))

    def render(self, config: Config) -> str:
        heading = f"## {self.id}"
        if self.changes.is_empty():
            return heading
        return f"{heading}\n\n{self.changes.render(config)}"
