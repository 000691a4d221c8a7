"""Errors raised while reading and rendering a changelog."""

from __future__ import annotations

from pathlib import Path


class ChangelogError(Exception):
    """Base class for all errors produced by unclog."""


class IoError(ChangelogError):
    """A filesystem read or metadata lookup failed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"I/O error at {path}: {cause}")
        self.path = path
        self.cause = cause


class ExpectedDirError(ChangelogError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"expected path to be a directory: {path}")
        self.path = path


class CannotObtainNameError(ChangelogError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f'cannot obtain (or invalid) last component of path: "{path}"')
        self.path = path


class ComponentNotDefinedError(ChangelogError):
    def __init__(self, component_id: str) -> None:
        super().__init__(f'component "{component_id}" is not defined in changelog config.yaml file')
        self.component_id = component_id


class InvalidEntryIdError(ChangelogError):
    def __init__(self, filename: str) -> None:
        super().__init__(f'expected entry ID to start with a number, but got: "{filename}"')
        self.filename = filename


class InvalidEntryNumberError(ChangelogError):
    def __init__(self, digits: str, reason: str) -> None:
        super().__init__(f'failed to parse entry ID "{digits}" as a number: {reason}')
        self.digits = digits
        self.reason = reason


class InvalidBulletStyleError(ChangelogError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f'invalid bullet style {value!r} - can only be "*" or "-"')
        self.value = value


class UnexpectedReleaseDirPrefixError(ChangelogError):
    def __init__(self, name: str) -> None:
        super().__init__(f'unexpected release directory name prefix: "{name}"')
        self.name = name


class CannotExtractVersionError(ChangelogError):
    def __init__(self, name: str) -> None:
        super().__init__(f'cannot extract version from release directory name: "{name}"')
        self.name = name


class NoUnreleasedEntriesError(ChangelogError):
    def __init__(self) -> None:
        super().__init__("no unreleased entries yet")
