"""Cursor movement across the board's columns and rows.

Every function here is total: empty columns and an empty board produce
"no selection" (``None``) or leave the cursor where it was, never an
out-of-range position.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from taskboard.board.model import Board, Status, Task


class Direction(str, Enum):
    PREV_COLUMN = "prev_column"
    NEXT_COLUMN = "next_column"
    PREV_ROW = "prev_row"
    NEXT_ROW = "next_row"


@dataclass(frozen=True)
class Cursor:
    status: Status
    position: int


def selected_task(board: Board, cursor: Cursor | None) -> Task | None:
    if cursor is None:
        return None
    return board.get(cursor.status, cursor.position)


def first_selection(board: Board, start: Status = Status.TODO, backwards: bool = False) -> Cursor | None:
    """Return the first task of the first non-empty column from *start*."""
    status = start
    for _ in Status:
        if board.column(status):
            return Cursor(status, 0)
        status = status.prev() if backwards else status.next()
    return None


def clamp(board: Board, cursor: Cursor | None) -> Cursor | None:
    """Pull *cursor* back inside the board after a mutation."""
    if cursor is None:
        return first_selection(board)
    size = len(board.column(cursor.status))
    if size == 0:
        return first_selection(board, cursor.status)
    if 0 <= cursor.position < size:
        return cursor
    return Cursor(cursor.status, min(max(cursor.position, 0), size - 1))


def move(board: Board, cursor: Cursor | None, direction: Direction) -> Cursor | None:
    if cursor is None:
        return _move_from_nothing(board, direction)

    match direction:
        case Direction.PREV_COLUMN:
            return _move_column(board, cursor, cursor.status.prev())
        case Direction.NEXT_COLUMN:
            return _move_column(board, cursor, cursor.status.next())
        case Direction.PREV_ROW:
            return _move_row(board, cursor, -1)
        case Direction.NEXT_ROW:
            return _move_row(board, cursor, 1)
    raise ValueError(f"Unknown direction: {direction}")


def _move_column(board: Board, cursor: Cursor, target: Status) -> Cursor | None:
    size = len(board.column(target))
    if size == 0:
        return None
    return Cursor(target, min(cursor.position, size - 1))


def _move_row(board: Board, cursor: Cursor, step: int) -> Cursor:
    size = len(board.column(cursor.status))
    if size == 0:
        return cursor
    return Cursor(cursor.status, (cursor.position + step) % size)


def _move_from_nothing(board: Board, direction: Direction) -> Cursor | None:
    # Column moves walk away from Todo in the direction of travel.
    match direction:
        case Direction.PREV_COLUMN:
            return first_selection(board, Status.TODO.prev(), backwards=True)
        case Direction.NEXT_COLUMN:
            return first_selection(board, Status.TODO)
        case _:
            return first_selection(board)
