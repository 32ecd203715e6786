"""Board controller: the screen state machine that interprets key presses.

All mutation of the board, the cursor and the edit session goes through the
transition functions in this module, each taking the single ``AppState``.

Usage::

    state = AppState(board=Board.with_demo_tasks())
    handle_key(state, "i")      # main -> editing over the selected task
    handle_key(state, "w")      # save
    handle_key(state, "q")      # editing -> main
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from taskboard import log
from taskboard.board.model import Board
from taskboard.editing import EditSession, Field, Mode
from taskboard.errors import InvalidOperationError
from taskboard.navigation import Cursor, Direction, clamp, move, selected_task

UNSAVED_CHANGES_MSG = "You have unsaved changes. Use 'w' to save or 'x' to discard."
NO_SESSION_MSG = "No task is currently being edited."
SAVED_MSG = "Saved."
DISCARDED_MSG = "Changes discarded."
INVALID_DATE_MSG = "Invalid date '{text}'. Use YYYY-MM-DD or YYYY-MM-DD HH:MM."
DUE_OUT_OF_RANGE_MSG = "Due date can't move any further."


class Screen(str, Enum):
    MAIN = "main"
    EDITING = "editing"


@dataclass
class AppState:
    board: Board = field(default_factory=Board)
    cursor: Cursor | None = None
    screen: Screen = Screen.MAIN
    session: EditSession | None = None
    message: str = ""
    exit: bool = False
    invert_rows: bool = False

    def __post_init__(self) -> None:
        self.cursor = clamp(self.board, self.cursor)


def _set_screen(state: AppState, screen: Screen) -> None:
    log.transition("screen", state.screen.value, screen.value)
    state.screen = screen


def _require_session(state: AppState) -> EditSession:
    if state.screen is not Screen.EDITING or state.session is None:
        raise InvalidOperationError(NO_SESSION_MSG)
    return state.session


# ── main screen ──────────────────────────────────────────────────


def quit_app(state: AppState) -> None:
    state.exit = True


def navigate(state: AppState, direction: Direction) -> None:
    state.cursor = move(state.board, state.cursor, direction)


def begin_edit(state: AppState, new_task: bool = False) -> None:
    """Open an edit session over the selected task, or a blank one."""
    task = None if new_task else selected_task(state.board, state.cursor)
    if task is None:
        state.session = EditSession.for_new_task()
        log.debug("edit: new task")
    else:
        state.session = EditSession.for_task(task)
        log.debug(f"edit: task {task.id} ({task.status})")
    _set_screen(state, Screen.EDITING)


# ── editing screen ───────────────────────────────────────────────


def save_task(state: AppState) -> None:
    """Commit the draft into the board and keep the session open."""
    session = _require_session(state)
    draft = session.draft
    # The board gets its own copy; further edits stay in the session.
    stored = replace(draft)

    if session.is_new_task:
        position = state.board.append(stored)
        status = stored.status
        session.is_new_task = False
    else:
        status, position = state.board.replace(stored, session.original_status)

    session.original_status = status
    session.dirty = False
    state.cursor = Cursor(status, position)
    state.message = SAVED_MSG
    log.transition("save", draft.id, f"{status}[{position}]")


def quit_editing(state: AppState) -> None:
    session = _require_session(state)
    if session.dirty:
        state.message = UNSAVED_CHANGES_MSG
        return
    _close_session(state)


def force_quit_editing(state: AppState) -> None:
    session = _require_session(state)
    if session.dirty:
        state.message = DISCARDED_MSG
    _close_session(state)


def _close_session(state: AppState) -> None:
    state.session = None
    _set_screen(state, Screen.MAIN)


def next_field(state: AppState) -> None:
    _require_session(state).next_field()


def prev_field(state: AppState) -> None:
    _require_session(state).prev_field()


def enter_text_entry(state: AppState) -> None:
    session = _require_session(state)
    session.mode = Mode.TEXT_ENTRY
    session.due_input = ""


def exit_text_entry(state: AppState) -> None:
    session = _require_session(state)
    raw = session.due_input
    if not session.active_field.is_text and not session.commit_due_input():
        state.message = INVALID_DATE_MSG.format(text=raw.strip())
    session.mode = Mode.NAVIGATION


def insert_char(state: AppState, ch: str) -> None:
    _require_session(state).insert_char(ch)


def backspace(state: AppState) -> None:
    _require_session(state).backspace()


def cycle_status(state: AppState, forward: bool = True) -> None:
    _require_session(state).cycle_status(forward)


def shift_due(state: AppState, days: int) -> None:
    session = _require_session(state)
    if session.active_field is Field.DUE and not session.shift_due(days):
        state.message = DUE_OUT_OF_RANGE_MSG


def due_today(state: AppState) -> None:
    session = _require_session(state)
    if session.active_field is Field.DUE:
        session.due_today()


# ── dispatch ─────────────────────────────────────────────────────

_MAIN_MOVES: dict[str, Direction] = {
    "h": Direction.PREV_COLUMN,
    "left": Direction.PREV_COLUMN,
    "l": Direction.NEXT_COLUMN,
    "right": Direction.NEXT_COLUMN,
    "k": Direction.PREV_ROW,
    "up": Direction.PREV_ROW,
    "j": Direction.NEXT_ROW,
    "down": Direction.NEXT_ROW,
}

_INVERTED_ROWS: dict[str, Direction] = {
    "j": Direction.PREV_ROW,
    "k": Direction.NEXT_ROW,
}


def handle_key(state: AppState, key: str) -> None:
    """Apply one decoded key press to *state*."""
    if not key:
        return
    state.message = ""
    if state.screen is Screen.MAIN:
        _handle_main(state, key)
    elif _require_session(state).mode is Mode.NAVIGATION:
        _handle_navigation_mode(state, key)
    else:
        _handle_text_entry_mode(state, key)


def _handle_main(state: AppState, key: str) -> None:
    moves = {**_MAIN_MOVES, **_INVERTED_ROWS} if state.invert_rows else _MAIN_MOVES
    if key in moves:
        navigate(state, moves[key])
        return
    match key:
        case "q":
            quit_app(state)
        case "i" | "e" | "enter":
            begin_edit(state)
        case "a":
            begin_edit(state, new_task=True)


def _handle_navigation_mode(state: AppState, key: str) -> None:
    match key:
        case "i":
            enter_text_entry(state)
        case "w":
            save_task(state)
        case "q" | "esc":
            quit_editing(state)
        case "x":
            force_quit_editing(state)
        case "tab":
            next_field(state)
        case "backtab":
            prev_field(state)
        case ">":
            cycle_status(state, forward=True)
        case "<":
            cycle_status(state, forward=False)
        case "+":
            shift_due(state, 1)
        case "-":
            shift_due(state, -1)
        case "t":
            due_today(state)


def _handle_text_entry_mode(state: AppState, key: str) -> None:
    match key:
        case "esc" | "enter":
            exit_text_entry(state)
        case "backspace":
            backspace(state)
        case _ if len(key) == 1 and key.isprintable():
            insert_char(state, key)
