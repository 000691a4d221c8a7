"""Core CLI infrastructure: context, root resolution, and the entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from .. import __version__ as package_version
from ..changelog import Changelog
from ..config import (
    CHANGELOG_DIRECTORY_NAME,
    Config,
    default_config_path,
    load_project_config,
)
from ..errors import ChangelogError
from ..utils import configure_logging, log_debug, log_error

__all__ = [
    "CLIContext",
    "create_cli_context",
    "_create_cli_group",
    "main",
]

VERSION_FLAGS = {"--version", "-V"}


@dataclass
class CLIContext:
    """Shared command context."""

    changelog_root: Path
    config_path: Path
    _config: Optional[Config] = None

    def ensure_config(self) -> Config:
        if self._config is None:
            try:
                self._config = load_project_config(self.changelog_root, self.config_path)
            except ValueError as error:
                raise click.ClickException(str(error)) from error
        return self._config

    def load_changelog(self) -> Changelog:
        """Read the changelog from disk, reporting failures as CLI errors."""
        config = self.ensure_config()
        try:
            return Changelog.read_from_dir(config, self.changelog_root)
        except ChangelogError as error:
            raise click.ClickException(str(error)) from error


def _resolve_changelog_root(start: Path) -> Path:
    """Return the nearest changelog directory at or above ``start``."""
    resolved = start.resolve()
    if resolved.name == CHANGELOG_DIRECTORY_NAME and resolved.is_dir():
        return resolved
    for candidate in [resolved] + list(resolved.parents):
        changelog_dir = candidate / CHANGELOG_DIRECTORY_NAME
        if changelog_dir.is_dir():
            return changelog_dir
    return resolved / CHANGELOG_DIRECTORY_NAME


def create_cli_context(
    *,
    root: Path | None = None,
    config: Optional[Path] = None,
    debug: bool = False,
) -> CLIContext:
    """Return a CLIContext using the same resolution logic as the CLI entry point."""

    configure_logging(debug)
    changelog_root = root.resolve() if root is not None else _resolve_changelog_root(Path("."))
    config_path = config.resolve() if config else default_config_path(changelog_root)
    log_debug(f"resolved changelog root: {changelog_root}")
    log_debug(f"using config path: {config_path}")
    return CLIContext(changelog_root=changelog_root, config_path=config_path)


def _create_cli_group() -> click.Group:
    """Create the main CLI group."""

    @click.group(context_settings={"help_option_names": ["-h", "--help"]})
    @click.option(
        "--root",
        type=click.Path(path_type=Path, exists=True, file_okay=False),
        help="Changelog directory containing unreleased changes and releases.",
    )
    @click.option(
        "--config",
        type=click.Path(path_type=Path, dir_okay=False),
        help="Path to an explicit changelog config YAML file.",
    )
    @click.option(
        "--debug",
        "-d",
        is_flag=True,
        help="Enable debug logging.",
    )
    @click.pass_context
    def _cli(
        ctx: click.Context,
        root: Path | None,
        config: Optional[Path],
        debug: bool,
    ) -> None:
        """Build changelogs from per-change entry files."""

        ctx.obj = create_cli_context(root=root, config=config, debug=debug)

    return click.version_option(version=package_version)(_cli)


def main(argv: list[str] | None = None) -> int:
    """Entry point for console_scripts."""
    from . import cli

    args = list(argv) if argv is not None else list(sys.argv[1:])

    if any(flag in args for flag in VERSION_FLAGS):
        click.echo(package_version)
        return 0

    try:
        cli.main(args=args, prog_name="unclog", standalone_mode=False)
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        exit_code = getattr(exc, "exit_code", 1)
        return exit_code if isinstance(exit_code, int) else 1
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.exceptions.Abort:
        log_error("operation cancelled by user.")
        return 130
    return 0
