"""Stats and config commands."""

from __future__ import annotations

import click
import yaml
from rich.table import Table

from ..change_set import ChangeSet
from ..config import dump_config
from ..utils import console, emit_output, log_info
from ._core import CLIContext

__all__ = ["stats_cmd", "config_cmd"]


def _count_change_set(changes: ChangeSet) -> tuple[int, int, int]:
    """Return the non-empty section, component, and entry counts."""
    sections = [section for section in changes.sections if not section.is_empty()]
    components = sum(
        1 for section in sections for cs in section.component_sections if not cs.is_empty()
    )
    entries = sum(
        len(section.entries) + sum(len(cs.entries) for cs in section.component_sections)
        for section in sections
    )
    return len(sections), components, entries


@click.command("stats")
@click.pass_obj
def stats_cmd(ctx: CLIContext) -> None:
    """Show how many entries each change set contains."""

    changelog = ctx.load_changelog()
    rows: list[tuple[str, ChangeSet]] = []
    if changelog.maybe_unreleased is not None:
        rows.append(("Unreleased", changelog.maybe_unreleased))
    rows.extend((release.id, release.changes) for release in changelog.releases)
    if not rows:
        log_info(f"no change sets found in {ctx.changelog_root}")
        return

    table = Table(box=None, padding=(0, 2, 0, 0), show_header=True)
    table.add_column("CHANGE SET", style="cyan")
    table.add_column("SECTIONS", justify="right")
    table.add_column("COMPONENTS", justify="right")
    table.add_column("ENTRIES", justify="right")
    table.add_column("SUMMARY", justify="center")

    for label, changes in rows:
        sections, components, entries = _count_change_set(changes)
        table.add_row(
            label,
            str(sections),
            str(components),
            str(entries),
            "yes" if changes.maybe_summary else "no",
        )

    console.print(table)


@click.command("config")
@click.pass_obj
def config_cmd(ctx: CLIContext) -> None:
    """Print the options that differ from the defaults as YAML."""

    payload = dump_config(ctx.ensure_config())
    if not payload:
        log_info("using the default configuration.")
        return
    emit_output(yaml.safe_dump(payload, sort_keys=False), newline=False)
