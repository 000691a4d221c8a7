"""Integration-style tests for the unclog CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
import yaml
from click.testing import CliRunner

from unclog import __version__
from unclog.cli import cli, main

WriteFile = Callable[[Path, str], Path]


def _bootstrap_changelog(root: Path, write_file: WriteFile) -> Path:
    changelog_dir = root / ".changelog"
    write_file(
        changelog_dir / "config.yaml",
        yaml.safe_dump({"components": {"all": {"cli": {"name": "CLI", "path": "./cli"}}}}),
    )
    write_file(changelog_dir / "unreleased" / "features" / "cli" / "2-flag.md", "- Add a flag\n")
    write_file(changelog_dir / "v0.1.0" / "summary.md", "Initial release.\n")
    write_file(changelog_dir / "v0.1.0" / "features" / "1-start.md", "- Get started\n")
    return changelog_dir


def test_cli_version_option(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--version"])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.strip() == __version__


def test_build_renders_full_changelog(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    runner = CliRunner()

    result = runner.invoke(cli, ["--root", str(changelog_dir), "build"])

    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "# CHANGELOG\n\n"
        "## Unreleased\n\n"
        "### FEATURES\n\n"
        "- [CLI](./cli)\n"
        "  - Add a flag\n\n"
        "## v0.1.0\n\n"
        "Initial release.\n\n"
        "### FEATURES\n\n"
        "- Get started\n"
    )


def test_build_unreleased_only(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    runner = CliRunner()

    result = runner.invoke(cli, ["--root", str(changelog_dir), "build", "--unreleased"])

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("## Unreleased\n")
    assert "v0.1.0" not in result.stdout


def test_build_released_only(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    runner = CliRunner()

    result = runner.invoke(cli, ["--root", str(changelog_dir), "build", "--released-only"])

    assert result.exit_code == 0, result.output
    assert "Unreleased" not in result.stdout
    assert "## v0.1.0" in result.stdout


def test_build_rejects_conflicting_flags(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    runner = CliRunner()

    result = runner.invoke(
        cli, ["--root", str(changelog_dir), "build", "--unreleased", "--released-only"]
    )

    assert result.exit_code == 2


def test_build_reports_undefined_component(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    write_file(changelog_dir / "unreleased" / "features" / "docs" / "3-docs.md", "- Docs")

    exit_code = main(["--root", str(changelog_dir), "build"])

    assert exit_code == 1


def test_build_reports_invalid_config(
    tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    write_file(changelog_dir / "config.yaml", "bullet_style: '+'\n")

    exit_code = main(["--root", str(changelog_dir), "build"])

    assert exit_code == 1
    assert "invalid bullet style" in capsys.readouterr().err


def test_build_without_unreleased_entries_fails(tmp_path: Path) -> None:
    changelog_dir = tmp_path / ".changelog"
    changelog_dir.mkdir()
    runner = CliRunner()

    result = runner.invoke(cli, ["--root", str(changelog_dir), "build", "-u"])

    assert result.exit_code == 1


def test_build_finds_changelog_in_parent_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, write_file: WriteFile
) -> None:
    _bootstrap_changelog(tmp_path, write_file)
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    runner = CliRunner()

    result = runner.invoke(cli, ["build", "--released-only"])

    assert result.exit_code == 0, result.output
    assert "Initial release." in result.stdout


def test_stats_lists_change_sets(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    runner = CliRunner()

    result = runner.invoke(cli, ["--root", str(changelog_dir), "stats"])

    assert result.exit_code == 0, result.output
    assert "Unreleased" in result.output
    assert "v0.1.0" in result.output


def test_config_prints_non_default_options(tmp_path: Path, write_file: WriteFile) -> None:
    changelog_dir = _bootstrap_changelog(tmp_path, write_file)
    runner = CliRunner()

    result = runner.invoke(cli, ["--root", str(changelog_dir), "config"])

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.stdout) == {
        "components": {"all": {"cli": {"name": "CLI", "path": "./cli"}}}
    }
