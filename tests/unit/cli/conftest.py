"""Shared fixtures for CLI command tests."""

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from clausegloss.lib.logging_config import ROOT_LOGGER_NAME


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_cli_logging() -> Generator[None, None, None]:
    """Drop handlers the commands attach to the runner's stderr."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers = handlers
