"""Build command rendering the changelog as Markdown."""

from __future__ import annotations

import click

from ..errors import NoUnreleasedEntriesError
from ..utils import emit_output
from ._core import CLIContext

__all__ = ["build_cmd"]


@click.command("build")
@click.option(
    "--unreleased",
    "-u",
    "unreleased_only",
    is_flag=True,
    help="Only render unreleased changes.",
)
@click.option(
    "--released-only",
    is_flag=True,
    help="Render released changes only, skipping unreleased ones.",
)
@click.pass_obj
def build_cmd(ctx: CLIContext, unreleased_only: bool, released_only: bool) -> None:
    """Render the changelog to stdout."""

    if unreleased_only and released_only:
        raise click.UsageError("Use only one of --unreleased or --released-only, not both.")
    config = ctx.ensure_config()
    changelog = ctx.load_changelog()
    if unreleased_only:
        try:
            rendered = changelog.render_unreleased(config)
        except NoUnreleasedEntriesError as error:
            raise click.ClickException(str(error)) from error
    elif released_only:
        rendered = changelog.render_released(config)
    else:
        rendered = changelog.render(config)
    emit_output(rendered, newline=False)
