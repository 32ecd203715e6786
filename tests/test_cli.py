"""CLI tests: flags parse, config reaches the runner, the loop is not entered for --help."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from taskboard.board.model import Status
from taskboard.cli import build_state, main
from taskboard.config import Config
from taskboard.errors import InvalidOperationError


@pytest.fixture
def cli_runner():
    """Click CliRunner for invoking the CLI in-process."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("TASKBOARD_ALT_SCREEN", "TASKBOARD_INVERT_ROWS", "TASKBOARD_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


class TestCliHelpAndVersion:
    """Tests for --help, --version and flag parsing."""

    def test_help_long(self, cli_runner):
        """--help describes the board and its flags."""
        r = cli_runner.invoke(main, ["--help"])
        assert r.exit_code == 0
        assert "kanban board" in r.output
        assert "--empty" in r.output

    def test_help_short(self, cli_runner):
        """-h is an alias for --help."""
        r = cli_runner.invoke(main, ["-h"])
        assert r.exit_code == 0

    def test_version(self, cli_runner):
        """--version prints the program name."""
        r = cli_runner.invoke(main, ["--version"])
        assert r.exit_code == 0
        assert "taskboard" in r.output.lower()

    def test_unknown_flag(self, cli_runner):
        r = cli_runner.invoke(main, ["--nope"])
        assert r.exit_code != 0


class TestCliRun:
    """Tests that flags reach the state and the runner."""

    def _invoke(self, cli_runner, args):
        seen = {}

        def fake_run(state, *, alt_screen=True, **kwargs):
            seen["state"] = state
            seen["alt_screen"] = alt_screen
            return "Goodbye."

        with patch("taskboard.runner.run", side_effect=fake_run):
            r = cli_runner.invoke(main, args)
        return r, seen

    def test_default_starts_with_demo_tasks(self, cli_runner):
        """No flags: demo tasks and the alternate screen."""
        r, seen = self._invoke(cli_runner, [])
        assert r.exit_code == 0, r.output
        assert "Goodbye." in r.output
        assert len(seen["state"].board) == 2
        assert seen["alt_screen"] is True

    def test_empty_flag(self, cli_runner):
        """--empty starts with no tasks and no selection."""
        r, seen = self._invoke(cli_runner, ["--empty"])
        assert r.exit_code == 0
        assert seen["state"].board.is_empty()
        assert seen["state"].cursor is None

    def test_no_alt_screen(self, cli_runner):
        _, seen = self._invoke(cli_runner, ["--no-alt-screen"])
        assert seen["alt_screen"] is False

    def test_invert_rows(self, cli_runner):
        _, seen = self._invoke(cli_runner, ["--invert-rows"])
        assert seen["state"].invert_rows is True

    def test_non_tty_warning(self, cli_runner):
        """CliRunner stdin is not a TTY, so a warning is shown."""
        r, _ = self._invoke(cli_runner, [])
        assert "stdin is not a terminal" in r.output

    def test_state_machine_error_propagates(self, cli_runner):
        """A controller error is logged and exits non-zero."""
        with patch("taskboard.runner.run", side_effect=InvalidOperationError("boom")):
            r = cli_runner.invoke(main, [])
        assert isinstance(r.exception, InvalidOperationError)
        assert r.exit_code == 1


def test_build_state_demo():
    """Demo config selects Task 1."""
    state = build_state(Config())
    assert [t.title for t in state.board.column(Status.TODO)] == ["Task 1"]
    assert state.cursor is not None


def test_build_state_empty():
    state = build_state(Config(demo_tasks=False))
    assert state.board.is_empty()
