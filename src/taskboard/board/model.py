"""Task, Status and Board data models shared by navigation, editing and UI."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from taskboard.errors import TaskNotFoundError


class Status(str, Enum):
    TODO = "Todo"
    PARTIAL = "Partial"
    DOING = "Doing"
    DONE = "Done"
    BLOCKED = "Blocked"

    def next(self) -> Status:
        order = list(Status)
        return order[(order.index(self) + 1) % len(order)]

    def prev(self) -> Status:
        order = list(Status)
        return order[(order.index(self) - 1) % len(order)]

    def __str__(self) -> str:
        return self.value


def _now() -> datetime:
    return datetime.now().astimezone().replace(second=0, microsecond=0)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Task:
    """A single unit of work.

    ``id`` is assigned once and identifies the task for every board lookup;
    two tasks with identical fields are still different tasks.
    """

    title: str = ""
    description: str = ""
    due: datetime = field(default_factory=_now)
    status: Status = Status.TODO
    id: str = field(default_factory=_new_id)


class Board:
    """Ordered mapping of every Status to the tasks currently in it.

    Usage::

        board = Board()
        board.append(Task(title="Write report"))      # lands in Todo
        status, idx = board.locate(task.id)
        board.replace(edited, original_status)         # relocates if status changed
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._columns: dict[Status, list[Task]] = {s: [] for s in Status}
        for task in tasks or []:
            self.append(task)

    @classmethod
    def with_demo_tasks(cls) -> Board:
        return cls([
            Task(title="Task 1", description="This is a task", status=Status.TODO),
            Task(title="Task 2", description="This is another task", status=Status.PARTIAL),
        ])

    # ── queries ──────────────────────────────────────────────────

    def column(self, status: Status) -> list[Task]:
        return self._columns[status]

    def columns(self) -> list[tuple[Status, list[Task]]]:
        return [(s, self._columns[s]) for s in Status]

    def get(self, status: Status, index: int) -> Task | None:
        tasks = self._columns[status]
        if 0 <= index < len(tasks):
            return tasks[index]
        return None

    def locate(self, task_id: str) -> tuple[Status, int] | None:
        for status, tasks in self._columns.items():
            for idx, task in enumerate(tasks):
                if task.id == task_id:
                    return status, idx
        return None

    def all_tasks(self) -> list[Task]:
        return [t for s in Status for t in self._columns[s]]

    def is_empty(self) -> bool:
        return not any(self._columns.values())

    def __len__(self) -> int:
        return sum(len(tasks) for tasks in self._columns.values())

    # ── mutation ─────────────────────────────────────────────────

    def append(self, task: Task) -> int:
        """Append *task* to the column of its status and return its index."""
        tasks = self._columns[task.status]
        tasks.append(task)
        return len(tasks) - 1

    def replace(self, task: Task, original_status: Status) -> tuple[Status, int]:
        """Replace the task with ``task.id`` stored under *original_status*.

        When the status changed the old entry is removed and *task* is
        appended to its new column. Returns the task's new location.
        """
        old = self._columns[original_status]
        for idx, existing in enumerate(old):
            if existing.id == task.id:
                break
        else:
            raise TaskNotFoundError(task.id, original_status)

        if task.status == original_status:
            old[idx] = task
            return original_status, idx

        del old[idx]
        return task.status, self.append(task)

    def __repr__(self) -> str:
        counts = ", ".join(f"{s.value}={len(t)}" for s, t in self._columns.items())
        return f"Board({counts})"
