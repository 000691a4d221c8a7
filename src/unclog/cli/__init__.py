"""CLI package for unclog.

- _core.py: CLIContext, root resolution, main entry point
- _build.py: build command rendering the changelog as Markdown
- _stats.py: stats and config commands
"""

from __future__ import annotations

from ._build import build_cmd
from ._core import CLIContext, create_cli_context, _create_cli_group, main
from ._stats import config_cmd, stats_cmd

cli = _create_cli_group()

cli.add_command(build_cmd)
cli.add_command(stats_cmd)
cli.add_command(config_cmd)

__all__ = [
    "cli",
    "main",
    "CLIContext",
    "create_cli_context",
    "build_cmd",
    "stats_cmd",
    "config_cmd",
]
