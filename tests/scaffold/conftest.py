"""Shared fixtures for scaffold tests."""

import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_console import FakeConsole  # noqa: E402
from fake_process_launcher import FakeProcessLauncher  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "scaffold" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def launcher():
    return FakeProcessLauncher()


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
