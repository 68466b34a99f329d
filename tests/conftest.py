from __future__ import annotations

import logging
import pathlib
from typing import TYPE_CHECKING

import click.testing
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

    from pytest_mock import MockerFixture


@pytest.fixture
def runner() -> click.testing.CliRunner:
    """Create a CLI runner for testing."""
    return click.testing.CliRunner()


@pytest.fixture
def global_config_path(mocker: MockerFixture, tmp_path: pathlib.Path) -> pathlib.Path:
    """Point the global config location at a temp file that does not exist yet."""
    path = tmp_path / "home" / ".config" / "textwrapper" / "config.yaml"
    mocker.patch("textwrapper.config.io.get_global_config_path", return_value=path)
    return path


@pytest.fixture(autouse=True)
def reset_logging_state(global_config_path: pathlib.Path) -> Generator[None, None, None]:
    """Reset global state between tests.

    The CLI reconfigures the root logger with handlers bound to CliRunner's
    streams, which are closed once the invocation ends. Depending on
    global_config_path keeps the developer's own config file out of every test.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
