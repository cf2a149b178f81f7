"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from rpc_reload.config import runtime
from tests.helpers.fake_process_table import FakeProcessLookup, RecordingSignalSender


@pytest.fixture(autouse=True)
def isolated_runtime_config(monkeypatch):
    """Keep real .env files and the caller's environment out of every test."""
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    monkeypatch.delenv(runtime.DEBUG_ENV, raising=False)
    monkeypatch.delenv(runtime.QUIET_ENV, raising=False)
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Drop console handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def fake_lookup() -> FakeProcessLookup:
    """Provide an empty fake process table."""
    return FakeProcessLookup()


@pytest.fixture
def recording_sender() -> RecordingSignalSender:
    """Provide a signal sender that records deliveries instead of sending them."""
    return RecordingSignalSender()
