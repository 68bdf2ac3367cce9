"""
Shared test fixtures for termutil tests.
Patches the config module so tests never depend on a local .env or terminal.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from termutil import config, system

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "DEFAULT_WIDTH", 80)
    monkeypatch.setattr(config, "DEFAULT_HEIGHT", 25)
    monkeypatch.setattr(config, "PRETTY_ENABLED", True)
    monkeypatch.setattr(config, "COLOR_SYSTEM", "256")
    monkeypatch.setattr(config, "UNICODE_BORDERS", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(system, "_max_pipe", None)
    # rich honours NO_COLOR even when output is forced to a terminal
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def plain():
    """Strip ANSI escapes from a string or from each string in a list."""
    from termutil.ansi import strip_ansi

    def _plain(value):
        if isinstance(value, list):
            return [strip_ansi(v) for v in value]
        return strip_ansi(value)

    return _plain
