"""Entries grouped under a single configured component."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import Config
from .entries import Entry, indent_entries, read_entries_sorted
from .errors import ComponentNotDefinedError
from .fs import entry_file_filter, entry_name, read_and_filter_dir
from .utils import log_debug, log_warning


@dataclass(frozen=True)
class ComponentSection:
    """A section of entries related to a specific component/package.

    The display name and path are copied out of the configuration when the
    section is read, so a section renders the same way for any config that
    shares its bullet style and indentation.
    """

    id: str
    name: str
    maybe_path: Optional[str]
    entries: tuple[Entry, ...] = ()

    def is_empty(self) -> bool:
        return not self.entries

    @classmethod
    def read_from_dir(cls, config: Config, path: Path) -> "ComponentSection":
        """Load the component section stored in ``path``."""
        component_id = entry_name(path)
        log_debug(f"looking up component with ID: {component_id}")
        component = config.components.all.get(component_id)
        if component is None:
            raise ComponentNotDefinedError(component_id)
        if component.path is not None:
            log_debug(
                f'found component "{component_id}" with name "{component.name}" '
                f"in: {component.path}"
            )
        else:
            log_warning(f'no path for component "{component_id}"')
        entry_files = read_and_filter_dir(path, entry_file_filter(config))
        entries = read_entries_sorted(entry_files)
        return cls(
            id=component_id,
            name=component.name,
            maybe_path=component.path,
            entries=tuple(entries),
        )

    def render(self, config: Config) -> str:
        indent = config.components.entry_indent
        if self.maybe_path is not None:
            title = f"[{self.name}]({self.maybe_path})"
        else:
            title = self.name
        lines = [f"{config.bullet_style} {title}"]
        lines.extend(indent_entries(self.entries, config.bullet_style, indent, indent + 2))
        return "\n".join(lines)
