"""Shared fixtures for taskboard tests.

Boards are built from plain Task lists so each test states exactly which
columns hold what.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from taskboard import log
from taskboard.board.model import Board, Status, Task
from taskboard.controller import AppState

FIXED_DUE = datetime(2024, 5, 17, 9, 30).astimezone()


def _make_task(
    title: str = "",
    status: Status = Status.TODO,
    description: str = "",
    due: datetime | None = None,
) -> Task:
    return Task(
        title=title or f"{status.value} task",
        description=description,
        due=due or FIXED_DUE,
        status=status,
    )


def _make_board(layout: dict[Status, int] | None = None) -> Board:
    """Board with ``layout[status]`` tasks titled ``"<Status> <n>"``."""
    board = Board()
    for status, count in (layout or {}).items():
        for n in range(count):
            board.append(_make_task(f"{status.value} {n}", status))
    return board


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task


@pytest.fixture
def make_board():
    """Factory fixture that creates Board instances from a column layout."""
    return _make_board


@pytest.fixture
def demo_state() -> AppState:
    """AppState over the two demo tasks (Todo, Partial), cursor on Task 1."""
    return AppState(board=Board.with_demo_tasks())


@pytest.fixture
def empty_state() -> AppState:
    return AppState(board=Board())


@pytest.fixture(autouse=True)
def _quiet_log():
    log.set_verbose(False)
    yield
    log.set_verbose(False)
