"""Core package exports for unclog."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as metadata_version

from .change_set import ChangeSet
from .change_set_section import ChangeSetSection
from .changelog import Changelog
from .component_section import ComponentSection
from .config import Component, Config, load_config, load_project_config
from .entries import Entry
from .errors import ChangelogError
from .releases import Release

__all__ = [
    "__version__",
    "ChangeSet",
    "ChangeSetSection",
    "Changelog",
    "ChangelogError",
    "Component",
    "ComponentSection",
    "Config",
    "Entry",
    "Release",
    "load_config",
    "load_project_config",
]

try:
    __version__ = metadata_version("unclog")
except PackageNotFoundError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
