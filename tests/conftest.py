"""Shared test fixtures for calcsum."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from calcsum.mcp.server import create_server

if TYPE_CHECKING:
    from pathlib import Path

    from mcp.server import Server


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user and project config files out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CALCSUM_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def calcsum_logger() -> logging.Logger:  # type: ignore[misc]
    """The package logger, with handlers restored afterwards."""
    logger = logging.getLogger("calcsum")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def server() -> Server:
    """MCP server with default configuration."""
    return create_server()
