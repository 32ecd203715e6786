"""Tests for taskboard.config.Config defaults and environment overrides."""

from __future__ import annotations

import pytest

from taskboard.config import Config, VERSION
from taskboard import __version__


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("TASKBOARD_ALT_SCREEN", "TASKBOARD_INVERT_ROWS", "TASKBOARD_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Defaults with a clean environment."""
    cfg = Config()
    assert cfg.demo_tasks is True
    assert cfg.alt_screen is True
    assert cfg.invert_rows is False
    assert cfg.verbose is False


def test_version_exported():
    assert __version__ == VERSION


@pytest.mark.parametrize("value", ["0", "false", "No", "off", ""])
def test_alt_screen_env_disables(monkeypatch, value):
    """Falsy values of TASKBOARD_ALT_SCREEN turn the alternate screen off."""
    monkeypatch.setenv("TASKBOARD_ALT_SCREEN", value)
    assert Config().alt_screen is False


def test_alt_screen_flag_wins_over_env(monkeypatch):
    """--no-alt-screen is not overridden by the environment."""
    monkeypatch.setenv("TASKBOARD_ALT_SCREEN", "1")
    assert Config(alt_screen=False).alt_screen is False


def test_invert_rows_env(monkeypatch):
    """TASKBOARD_INVERT_ROWS enables the inverted j/k mapping."""
    monkeypatch.setenv("TASKBOARD_INVERT_ROWS", "yes")
    assert Config().invert_rows is True


def test_verbose_env(monkeypatch):
    monkeypatch.setenv("TASKBOARD_VERBOSE", "1")
    assert Config().verbose is True
