from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from unclog.config import Component, ComponentsConfig, Config

WriteFile = Callable[[Path, str], Path]


def _write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write_file() -> WriteFile:
    """Return a helper that writes a file, creating parent directories."""
    return _write_file


@pytest.fixture
def component_config() -> Config:
    return Config(
        components=ComponentsConfig(
            all={
                "a": Component(name="Component A", path="./a/"),
                "b": Component(name="Component B"),
            }
        )
    )


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging so tests stay isolated."""
    yield
    logger = logging.getLogger("unclog")
    while logger.handlers:
        logger.handlers.pop().close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
