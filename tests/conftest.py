"""Pytest configuration and shared fixtures for category logger tests."""

import logging
from typing import List, Tuple

import pytest

from category_logging import AttributeStore, Logger, set_default_sink
from category_logging.attributes import LOGGING_ATTRIBUTE, get_attribute_store
from category_logging.output import ROOT_LOGGER_NAME

LOG_ENV_VARS = [
    "LOGGING_ENABLED",
    "LOG_OUTPUT",
    "LOG_FILE_PATH",
    "LOG_FILE_MAX_SIZE",
    "LOG_FILE_BACKUP_COUNT",
    "LOG_CONSOLE_FORMAT",
    "LOG_FATAL_ERRORS",
]


class RecordingSink:
    """Output sink double that keeps every line per channel."""

    def __init__(self):
        self.records: List[Tuple[str, str, str]] = []

    def write(self, category: str, line: str):
        self.records.append(("write", category, line))

    def warn(self, category: str, line: str):
        self.records.append(("warn", category, line))

    def fatal(self, category: str, line: str):
        self.records.append(("fatal", category, line))

    def lines(self, channel: str) -> List[str]:
        return [line for kind, _, line in self.records if kind == channel]


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def advance(self, ms: int):
        self.now += ms

    def __call__(self) -> int:
        return self.now


# ============================================================================
# Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def reset_globals():
    """Each test starts with an unset global flag and no default sink."""
    get_attribute_store().clear(LOGGING_ATTRIBUTE)
    set_default_sink(None)
    yield
    get_attribute_store().clear(LOGGING_ATTRIBUTE)
    set_default_sink(None)
    parent = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(parent.handlers):
        parent.removeHandler(handler)
        handler.close()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove logger settings from the environment and run from an empty dir."""
    for name in LOG_ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


# ============================================================================
# Logger Fixtures
# ============================================================================


@pytest.fixture
def attributes():
    """Private attribute store so tests never share the Logging flag."""
    return AttributeStore()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_logger(sink, attributes, clock):
    """Factory for loggers wired to the recording sink and fake clock."""
    def _make(category="Test"):
        return Logger(category, sink=sink, attributes=attributes, clock=clock)

    return _make
