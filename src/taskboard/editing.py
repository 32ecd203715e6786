"""Edit sessions: a draft copy of one task plus the state of the editor panel."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from taskboard.board.model import Status, Task

DUE_FORMAT = "%Y-%m-%d %H:%M"

_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
)

_RELATIVE_RE = re.compile(r"^([+-])(\d{1,4})d?$")


class Field(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    DUE = "due"

    @property
    def is_text(self) -> bool:
        return self is not Field.DUE

    def next(self) -> Field:
        order = list(Field)
        return order[(order.index(self) + 1) % len(order)]

    def prev(self) -> Field:
        order = list(Field)
        return order[(order.index(self) - 1) % len(order)]


class Mode(str, Enum):
    NAVIGATION = "navigation"
    TEXT_ENTRY = "text_entry"


def format_due(due: datetime) -> str:
    return due.strftime(DUE_FORMAT)


def parse_due(text: str, reference: datetime) -> datetime:
    """Parse a typed due date relative to *reference*.

    Accepts ``YYYY-MM-DD`` (keeps the reference time of day),
    ``YYYY-MM-DD HH:MM``, ISO ``T``-separated forms, ``today``,
    ``tomorrow`` and ``+N``/``-N`` day offsets. Raises ``ValueError``,
    also for results outside the range ``datetime`` can hold.
    """
    try:
        return _parse_due(text, reference)
    except OverflowError as exc:
        raise ValueError(f"date out of range: {text!r}") from exc


def _parse_due(text: str, reference: datetime) -> datetime:
    raw = text.strip().lower()
    if not raw:
        raise ValueError("empty date")

    if raw == "today":
        return _local(_now().replace(
            hour=reference.hour, minute=reference.minute, second=0, microsecond=0,
        ))
    if raw == "tomorrow":
        return _parse_due("today", reference) + timedelta(days=1)

    m = _RELATIVE_RE.match(raw)
    if m:
        days = int(m.group(2))
        return reference + timedelta(days=days if m.group(1) == "+" else -days)

    for fmt in _DATE_FORMATS:
        try:
            parsed = datetime.strptime(raw.upper(), fmt)
        except ValueError:
            continue
        if fmt == "%Y-%m-%d":
            parsed = parsed.replace(hour=reference.hour, minute=reference.minute)
        return _local(parsed)

    raise ValueError(f"unrecognised date: {text!r}")


def _now() -> datetime:
    return datetime.now()


def _local(dt: datetime) -> datetime:
    return dt.astimezone() if dt.tzinfo is None else dt


@dataclass
class EditSession:
    """Transient editor state; exists only while the Editing screen is up.

    ``draft`` is a private copy, so the stored task is untouched until save.
    """

    draft: Task
    original_status: Status
    is_new_task: bool = False
    active_field: Field = Field.TITLE
    mode: Mode = Mode.NAVIGATION
    dirty: bool = False
    due_input: str = ""

    @classmethod
    def for_task(cls, task: Task) -> EditSession:
        return cls(draft=replace(task), original_status=task.status)

    @classmethod
    def for_new_task(cls) -> EditSession:
        draft = Task()
        return cls(draft=draft, original_status=draft.status, is_new_task=True)

    # ── field cycling ────────────────────────────────────────────

    def next_field(self) -> None:
        self.active_field = self.active_field.next()

    def prev_field(self) -> None:
        self.active_field = self.active_field.prev()

    # ── text entry ───────────────────────────────────────────────

    def field_text(self, which: Field | None = None) -> str:
        which = which or self.active_field
        if which is Field.TITLE:
            return self.draft.title
        if which is Field.DESCRIPTION:
            return self.draft.description
        return format_due(self.draft.due)

    def _set_text(self, value: str) -> None:
        if self.active_field is Field.TITLE:
            self.draft.title = value
        else:
            self.draft.description = value

    def insert_char(self, ch: str) -> None:
        if self.active_field.is_text:
            self._set_text(self.field_text() + ch)
            self.dirty = True
        else:
            self.due_input += ch

    def backspace(self) -> None:
        if not self.active_field.is_text:
            self.due_input = self.due_input[:-1]
            return
        text = self.field_text()
        if text:
            self._set_text(text[:-1])
            self.dirty = True

    # ── due date ─────────────────────────────────────────────────

    def commit_due_input(self) -> bool:
        """Apply the typed due date. Returns False when it did not parse.

        An empty buffer is not an error. The buffer is cleared either way.
        """
        raw, self.due_input = self.due_input, ""
        if not raw.strip():
            return True
        try:
            due = parse_due(raw, self.draft.due)
        except ValueError:
            return False
        self.set_due(due)
        return True

    def set_due(self, due: datetime) -> None:
        if due != self.draft.due:
            self.draft.due = due
            self.dirty = True

    def shift_due(self, days: int) -> bool:
        """Move the due date by *days*. Returns False, changing nothing, past the calendar's ends."""
        try:
            due = self.draft.due + timedelta(days=days)
        except OverflowError:
            return False
        self.set_due(due)
        return True

    def due_today(self) -> None:
        """Move the due date to today, keeping its time of day in the local offset."""
        today = _now()
        self.set_due(_local(self.draft.due.replace(
            tzinfo=None, year=today.year, month=today.month, day=today.day,
        )))

    # ── status ───────────────────────────────────────────────────

    def cycle_status(self, forward: bool = True) -> None:
        current = self.draft.status
        self.draft.status = current.next() if forward else current.prev()
        self.dirty = True
