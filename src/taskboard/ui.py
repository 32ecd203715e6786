"""Rich renderables for the board, the footer and the task editor."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskboard.board.model import Status
from taskboard.controller import AppState, Screen
from taskboard.editing import EditSession, Field, Mode, format_due
from taskboard.navigation import selected_task

ACTIVE_STYLE = "black on bright_yellow"
MESSAGE_STYLE = "yellow"

STATUS_STYLE: dict[Status, str] = {
    Status.TODO: "cyan",
    Status.PARTIAL: "magenta",
    Status.DOING: "yellow",
    Status.DONE: "green",
    Status.BLOCKED: "red",
}

MAIN_HINTS: tuple[tuple[str, str], ...] = (
    ("q", "quit"),
    ("i", "edit task"),
    ("a", "add task"),
    ("h/j/k/l", "move"),
)

NAVIGATION_HINTS: tuple[tuple[str, str], ...] = (
    ("i", "insert"),
    ("w", "save"),
    ("q", "quit"),
    ("x", "discard"),
    ("tab", "next field"),
    ("</>", "status"),
    ("+/-/t", "due"),
)

TEXT_ENTRY_HINTS: tuple[tuple[str, str], ...] = (
    ("esc", "done"),
    ("backspace", "delete"),
)

_FIELD_LABELS: dict[Field, str] = {
    Field.TITLE: "Title",
    Field.DESCRIPTION: "Description",
    Field.DUE: "Due",
}


def render(state: AppState) -> RenderableType:
    """Build the full screen for *state*. Never mutates it."""
    parts: list[RenderableType] = [
        Panel(Text("taskboard", style="bold")),
        render_board(state),
        render_footer(state),
    ]
    if state.message:
        parts.append(Text(state.message, style=MESSAGE_STYLE))
    if state.screen is Screen.EDITING and state.session is not None:
        parts.append(render_editor(state.session))
    return Group(*parts)


def render_board(state: AppState) -> RenderableType:
    grid = Table.grid(expand=True, padding=(0, 1))
    for _ in Status:
        grid.add_column(ratio=1)

    current = selected_task(state.board, state.cursor)
    panels: list[Panel] = []
    for status, tasks in state.board.columns():
        lines = Text()
        for idx, task in enumerate(tasks):
            if idx:
                lines.append("\n")
            title = task.title or "<untitled>"
            style = ACTIVE_STYLE if current is not None and task.id == current.id else ""
            lines.append(title, style=style)
        if not tasks:
            lines.append("(empty)", style="dim")
        panels.append(Panel(
            lines,
            title=f"{status.value} ({len(tasks)})",
            border_style=STATUS_STYLE[status],
        ))
    grid.add_row(*panels)
    return grid


def render_footer(state: AppState) -> RenderableType:
    task = selected_task(state.board, state.cursor)
    if task is not None:
        nav_text = f"{task.title} | Due: {task.due.strftime('%Y-%m-%d')}"
    else:
        nav_text = "No task selected."

    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(ratio=1)
    grid.add_row(Panel(Text(nav_text)), Panel(_hints(state)))
    return grid


def _hints(state: AppState) -> Text:
    if state.screen is Screen.MAIN or state.session is None:
        hints = MAIN_HINTS
    elif state.session.mode is Mode.NAVIGATION:
        hints = NAVIGATION_HINTS
    else:
        hints = TEXT_ENTRY_HINTS
    text = Text()
    for i, (key, label) in enumerate(hints):
        if i:
            text.append(" | ")
        text.append(f"({key}) ", style="bold")
        text.append(label)
    return text


def render_editor(session: EditSession) -> RenderableType:
    title = "New task" if session.is_new_task else "Editing task"
    if session.dirty:
        title += " *"
    mode = "INSERT" if session.mode is Mode.TEXT_ENTRY else "NORMAL"

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold", no_wrap=True)
    grid.add_column(ratio=1)
    for fld in Field:
        value = session.field_text(fld)
        if fld is Field.DUE and session.mode is Mode.TEXT_ENTRY and session.active_field is Field.DUE:
            value = f"{format_due(session.draft.due)}  > {session.due_input}_"
        style = ACTIVE_STYLE if fld is session.active_field else ""
        grid.add_row(Text(_FIELD_LABELS[fld], style=style), Text(value, style=style))
    grid.add_row(
        Text("Status"),
        Text(session.draft.status.value, style=STATUS_STYLE[session.draft.status]),
    )
    return Panel(grid, title=title, subtitle=mode, border_style="bright_white")
