"""A named group of entries within a change set."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .component_section import ComponentSection
from .config import Config
from .entries import Entry, indent_entries, read_entries_sorted
from .fs import entry_file_filter, entry_name, is_visible_dir_entry, read_and_partition_dir
from .utils import log_debug


def section_title(section_id: str) -> str:
    """Return the heading text for a section directory name."""
    return section_id.replace("-", " ").replace("_", " ").upper()


@dataclass(frozen=True)
class ChangeSetSection:
    """A section of a change set, e.g. "Features" or "Bug fixes".

    Entries may sit directly in the section directory, or be grouped in one
    sub-directory per configured component. Loose entries in a section that
    also has components are listed under the general entries title.
    """

    id: str
    title: str
    entries: tuple[Entry, ...] = ()
    component_sections: tuple[ComponentSection, ...] = ()

    def is_empty(self) -> bool:
        return not self.entries and all(cs.is_empty() for cs in self.component_sections)

    @classmethod
    def read_from_dir(cls, config: Config, path: Path) -> "ChangeSetSection":
        section_id = entry_name(path)
        log_debug(f"loading section {section_id} from {path}")
        entry_files, component_dirs = read_and_partition_dir(
            path, entry_file_filter(config), is_visible_dir_entry
        )
        entries = read_entries_sorted(entry_files)
        component_sections = [
            ComponentSection.read_from_dir(config, component_dir)
            for component_dir in component_dirs
        ]
        component_sections.sort(key=lambda cs: cs.id)
        return cls(
            id=section_id,
            title=section_title(section_id),
            entries=tuple(entries),
            component_sections=tuple(component_sections),
        )

    def render(self, config: Config) -> str:
        bullet = config.bullet_style
        heading = "#" * config.change_set_sections.heading_level + " " + self.title
        components = [cs for cs in self.component_sections if not cs.is_empty()]
        lines: list[str] = []
        if not components:
            indent = config.change_set_sections.entry_indent
            lines.extend(indent_entries(self.entries, bullet, indent, indent + 2))
        else:
            if self.entries:
                indent = config.components.entry_indent
                lines.append(f"{bullet} {config.components.general_entries_title}")
                lines.extend(indent_entries(self.entries, bullet, indent, indent + 2))
            lines.extend(cs.render(config) for cs in components)
        return f"{heading}\n\n" + "\n".join(lines)
