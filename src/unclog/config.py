"""Configuration helpers for unclog."""

from __future__ import annotations

from collections.abc import Iterable as IterableABC
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Literal, Mapping, MutableMapping, Optional, cast

import yaml

from .errors import InvalidBulletStyleError
from .utils import log_debug

BulletStyle = Literal["*", "-"]
CONFIG_RELATIVE_PATH = Path("config.yaml")
CHANGELOG_DIRECTORY_NAME = ".changelog"

BULLET_STYLE_ASTERISK: BulletStyle = "*"
BULLET_STYLE_DASH: BulletStyle = "-"
BULLET_STYLE_CHOICES: tuple[BulletStyle, ...] = (
    BULLET_STYLE_ASTERISK,
    BULLET_STYLE_DASH,
)

DEFAULT_HEADING = "# CHANGELOG"
DEFAULT_EMPTY_MSG = "Nothing to see here! Add some entries to get started."
DEFAULT_EPILOGUE_FILENAME = "epilogue.md"


def default_config_path(changelog_root: Path) -> Path:
    """Return the default config path for a changelog directory."""
    return changelog_root / CONFIG_RELATIVE_PATH


@dataclass
class Component:
    """A sub-project whose changes are grouped together within a section."""

    name: str
    path: Optional[str] = None


@dataclass
class UnreleasedConfig:
    folder: str = "unreleased"
    heading: str = "## Unreleased"


@dataclass
class ChangeSetsConfig:
    summary_filename: str = "summary.md"
    entry_ext: str = "md"


@dataclass
class ChangeSetSectionsConfig:
    entry_indent: int = 0
    heading_level: int = 3


@dataclass
class ComponentsConfig:
    general_entries_title: str = "General"
    entry_indent: int = 2
    all: dict[str, Component] = field(default_factory=dict)


@dataclass
class Config:
    """Structured representation of the changelog config."""

    heading: str = DEFAULT_HEADING
    empty_msg: str = DEFAULT_EMPTY_MSG
    bullet_style: BulletStyle = BULLET_STYLE_DASH
    epilogue_filename: str = DEFAULT_EPILOGUE_FILENAME
    unreleased: UnreleasedConfig = field(default_factory=UnreleasedConfig)
    change_sets: ChangeSetsConfig = field(default_factory=ChangeSetsConfig)
    change_set_sections: ChangeSetSectionsConfig = field(default_factory=ChangeSetSectionsConfig)
    components: ComponentsConfig = field(default_factory=ComponentsConfig)


def parse_bullet_style(value: object) -> BulletStyle:
    """Return a validated bullet style."""
    if not isinstance(value, str):
        raise InvalidBulletStyleError(value)
    normalized = value.strip()
    if normalized not in BULLET_STYLE_CHOICES:
        raise InvalidBulletStyleError(value)
    return cast(BulletStyle, normalized)


def parse_components(values: object | None) -> dict[str, Component]:
    """Parse the component registry from config.

    Accepts:
      - A mapping of ids to tables: {cli: {name: "CLI", path: "./cli"}}
      - A mapping of ids to display names: {cli: "CLI"}
      - A list of ids: ["cli", "python"] (display name is the id)
      - None: -> {}
    """
    if values is None:
        return {}
    if isinstance(values, Mapping):
        result: dict[str, Component] = {}
        for key, value in values.items():
            component_id = str(key).strip()
            if not component_id:
                continue
            if isinstance(value, Mapping):
                name = str(value.get("name") or component_id).strip()
                path_raw = value.get("path")
                path = str(path_raw).strip() if path_raw else None
                result[component_id] = Component(name=name, path=path or None)
            else:
                name = str(value).strip() if value else ""
                result[component_id] = Component(name=name or component_id)
        return result
    if isinstance(values, str):
        candidates: Iterable[object] = [values]
    elif isinstance(values, IterableABC):
        candidates = cast(Iterable[object], values)
    else:
        raise ValueError("Config option 'components.all' must be a mapping or a list.")
    components: dict[str, Component] = {}
    for item in candidates:
        component_id = str(item).strip()
        if component_id and component_id not in components:
            components[component_id] = Component(name=component_id)
    return components


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"Config option '{key}' must be a mapping.")
    return value


def _string_option(raw: Mapping[str, Any], key: str, default: str, *, label: str) -> str:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"Config option '{label}' must be a string.")
    return value


def _indent_option(raw: Mapping[str, Any], key: str, default: int, *, label: str) -> int:
    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Config option '{label}' must be a non-negative integer.")
    return value


def config_from_mapping(raw: Mapping[str, Any]) -> Config:
    """Build a Config from an already parsed mapping, applying defaults."""
    defaults = Config()

    bullet_style = defaults.bullet_style
    if raw.get("bullet_style") is not None:
        bullet_style = parse_bullet_style(raw["bullet_style"])

    unreleased_raw = _section(raw, "unreleased")
    unreleased = UnreleasedConfig(
        folder=_string_option(
            unreleased_raw, "folder", defaults.unreleased.folder, label="unreleased.folder"
        ),
        heading=_string_option(
            unreleased_raw, "heading", defaults.unreleased.heading, label="unreleased.heading"
        ),
    )

    change_sets_raw = _section(raw, "change_sets")
    change_sets = ChangeSetsConfig(
        summary_filename=_string_option(
            change_sets_raw,
            "summary_filename",
            defaults.change_sets.summary_filename,
            label="change_sets.summary_filename",
        ),
        entry_ext=_string_option(
            change_sets_raw,
            "entry_ext",
            defaults.change_sets.entry_ext,
            label="change_sets.entry_ext",
        ).lstrip("."),
    )

    sections_raw = _section(raw, "change_set_sections")
    change_set_sections = ChangeSetSectionsConfig(
        entry_indent=_indent_option(
            sections_raw,
            "entry_indent",
            defaults.change_set_sections.entry_indent,
            label="change_set_sections.entry_indent",
        ),
        heading_level=_indent_option(
            sections_raw,
            "heading_level",
            defaults.change_set_sections.heading_level,
            label="change_set_sections.heading_level",
        ),
    )
    if change_set_sections.heading_level < 1:
        raise ValueError("Config option 'change_set_sections.heading_level' must be at least 1.")

    components_raw = _section(raw, "components")
    components = ComponentsConfig(
        general_entries_title=_string_option(
            components_raw,
            "general_entries_title",
            defaults.components.general_entries_title,
            label="components.general_entries_title",
        ),
        entry_indent=_indent_option(
            components_raw,
            "entry_indent",
            defaults.components.entry_indent,
            label="components.entry_indent",
        ),
        all=parse_components(components_raw.get("all")),
    )

    return Config(
        heading=_string_option(raw, "heading", defaults.heading, label="heading"),
        empty_msg=_string_option(raw, "empty_msg", defaults.empty_msg, label="empty_msg"),
        bullet_style=bullet_style,
        epilogue_filename=_string_option(
            raw, "epilogue_filename", defaults.epilogue_filename, label="epilogue_filename"
        ),
        unreleased=unreleased,
        change_sets=change_sets,
        change_set_sections=change_set_sections,
        components=components,
    )


def load_config(path: Path) -> Config:
    """Load the configuration from disk."""
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, MutableMapping):
        raise ValueError("Config root must be a mapping")
    return config_from_mapping(raw)


def load_project_config(changelog_root: Path, config_path: Path | None = None) -> Config:
    """Load the config for a changelog directory, falling back to defaults."""

    path = config_path if config_path is not None else default_config_path(changelog_root)
    if path.exists():
        log_debug(f"loading configuration from {path}")
        return load_config(path)
    log_debug(f"no configuration at {path}, using defaults")
    return Config()


def _dump_section(current: Any, default: Any) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(current).items()
        if key != "all" and value != getattr(default, key)
    }


def dump_config(config: Config) -> dict[str, Any]:
    """Convert a Config into a plain dictionary, omitting default values."""
    defaults = Config()
    data: dict[str, Any] = {}
    for key in ("heading", "empty_msg", "bullet_style", "epilogue_filename"):
        value = getattr(config, key)
        if value != getattr(defaults, key):
            data[key] = value
    for key in ("unreleased", "change_sets", "change_set_sections", "components"):
        section = _dump_section(getattr(config, key), getattr(defaults, key))
        if section:
            data[key] = section
    if config.components.all:
        registry: dict[str, Any] = {}
        for component_id, component in config.components.all.items():
            payload: dict[str, str] = {"name": component.name}
            if component.path:
                payload["path"] = component.path
            registry[component_id] = payload
        data.setdefault("components", {})["all"] = registry
    return data
