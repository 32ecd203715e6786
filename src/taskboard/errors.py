"""Exceptions raised when the board state machine is driven incorrectly."""

from __future__ import annotations


class BoardError(RuntimeError):
    """Base class for taskboard contract violations."""


class InvalidOperationError(BoardError):
    """Raised when a transition is invoked in a state that does not allow it.

    These are programming errors: the key dispatcher never routes an event
    to a transition whose guard fails.
    """


class TaskNotFoundError(BoardError, KeyError):
    """Raised when a task id is not present in the expected column."""

    def __init__(self, task_id: str, status: object = None) -> None:
        self.task_id = task_id
        self.status = status
        where = f" in {status}" if status is not None else ""
        super().__init__(f"Task {task_id} not found{where}")

    def __str__(self) -> str:
        return self.args[0]
