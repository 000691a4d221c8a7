"""The complete changelog: unreleased changes, releases and an epilogue."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .change_set import ChangeSet
from .config import Config
from .errors import NoUnreleasedEntriesError
from .fs import ensure_dir, is_visible_dir_entry, read_and_filter_dir, read_text_opt
from .releases import Release
from .utils import log_debug


@dataclass(frozen=True)
class Changelog:
    """Everything found in a changelog directory.

    Releases are ordered from the newest version to the oldest.
    """

    maybe_unreleased: Optional[ChangeSet] = None
    releases: tuple[Release, ...] = ()
    maybe_epilogue: Optional[str] = None

    def has_unreleased(self) -> bool:
        return self.maybe_unreleased is not None and not self.maybe_unreleased.is_empty()

    def is_empty(self) -> bool:
        return not self.has_unreleased() and not self.releases and not self.maybe_epilogue

    @classmethod
    def read_from_dir(cls, config: Config, path: Path) -> "Changelog":
        """Read the whole changelog rooted at ``path``."""
        log_debug(f"loading changelog from {path}")
        ensure_dir(path)
        unreleased_folder = config.unreleased.folder
        unreleased = ChangeSet.read_from_dir_opt(config, path / unreleased_folder)
        release_dirs = [
            release_dir
            for release_dir in read_and_filter_dir(path, is_visible_dir_entry)
            if release_dir.name != unreleased_folder
        ]
        releases = [Release.read_from_dir(config, release_dir) for release_dir in release_dirs]
        releases.sort(key=lambda release: release.version, reverse=True)
        raw_epilogue = read_text_opt(path / config.epilogue_filename)
        epilogue = raw_epilogue.strip() if raw_epilogue is not None else None
        return cls(
            maybe_unreleased=unreleased,
            releases=tuple(releases),
            maybe_epilogue=epilogue or None,
        )

    def _unreleased_paragraphs(self, config: Config) -> list[str]:
        if self.maybe_unreleased is None or self.maybe_unreleased.is_empty():
            return []
        return [config.unreleased.heading, self.maybe_unreleased.render(config)]

    def _released_paragraphs(self, config: Config) -> list[str]:
        paragraphs = [release.render(config) for release in self.releases]
        if self.maybe_epilogue:
            paragraphs.append(self.maybe_epilogue)
        return paragraphs

    def render(self, config: Config) -> str:
        paragraphs = [config.heading]
        if self.is_empty():
            paragraphs.append(config.empty_msg)
        else:
            paragraphs.extend(self._unreleased_paragraphs(config))
            paragraphs.extend(self._released_paragraphs(config))
        return "\n\n".join(paragraphs) + "\n"

    def render_unreleased(self, config: Config) -> str:
        """Render only the unreleased changes."""
        paragraphs = self._unreleased_paragraphs(config)
        if not paragraphs:
            raise NoUnreleasedEntriesError()
        return "\n\n".join(paragraphs) + "\n"

    def render_released(self, config: Config) -> str:
        """Render the changelog without its unreleased changes."""
        paragraphs = [config.heading]
        released = self._released_paragraphs(config)
        paragraphs.extend(released or [config.empty_msg])
        return "\n\n".join(paragraphs) + "\n"
