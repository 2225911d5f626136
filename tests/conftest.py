"""Pytest configuration and shared fixtures for the grab test suite."""

import io
import logging
from pathlib import Path

import pytest


@pytest.fixture
def sample_lines() -> list[str]:
    """Four short lines with matches on the second and third."""
    return ["a", "b", "c b", "d"]


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a small log file with a few matching lines."""
    path = tmp_path / "server.log"
    path.write_text(
        "starting server\n"
        "error: disk full\n"
        "retrying\n"
        "ERROR: disk still full\n"
        "shutting down\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def output() -> io.StringIO:
    """In-memory text stream used as the render target."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep configuration discovery away from the developer's real files."""
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    workdir = tmp_path / "work"
    workdir.mkdir(exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("GRAB_CONFIG", raising=False)
    monkeypatch.chdir(workdir)
    yield workdir


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")
    config.addinivalue_line("markers", "cli: Tests of the command-line interface")
