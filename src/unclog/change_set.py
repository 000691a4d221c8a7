"""Change sets: the unreleased pool, or the contents of one release."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .change_set_section import ChangeSetSection
from .config import Config
from .fs import ensure_dir, is_visible_dir_entry, read_and_filter_dir, read_text_opt
from .utils import log_debug


@dataclass(frozen=True)
class ChangeSet:
    """A set of changes, either associated with a release or not."""

    maybe_summary: Optional[str] = None
    sections: tuple[ChangeSetSection, ...] = ()

    def is_empty(self) -> bool:
        """Return True when there is no summary and every section is empty."""
        return not self.maybe_summary and self.are_sections_empty()

    def are_sections_empty(self) -> bool:
        return all(section.is_empty() for section in self.sections)

    @classmethod
    def read_from_dir(cls, config: Config, path: Path) -> "ChangeSet":
        """Read a single change set from the given directory."""
        log_debug(f"loading change set from {path}")
        ensure_dir(path)
        raw_summary = read_text_opt(path / config.change_sets.summary_filename)
        summary = raw_summary.strip() if raw_summary is not None else None
        section_dirs = read_and_filter_dir(path, is_visible_dir_entry)
        sections = [
            ChangeSetSection.read_from_dir(config, section_dir) for section_dir in section_dirs
        ]
        sections.sort(key=lambda section: section.title)
        return cls(maybe_summary=summary or None, sections=tuple(sections))

    @classmethod
    def read_from_dir_opt(cls, config: Config, path: Path) -> Optional["ChangeSet"]:
        """Like ``read_from_dir``, but return None if ``path`` does not exist."""
        if not path.exists():
            log_debug(f"no change set at {path}")
            return None
        return cls.read_from_dir(config, path)

    def render(self, config: Config) -> str:
        paragraphs: list[str] = []
        if self.maybe_summary:
            paragraphs.append(self.maybe_summary)
        paragraphs.extend(
            section.render(config) for section in self.sections if not section.is_empty()
        )
        return "\n\n".join(paragraphs)
