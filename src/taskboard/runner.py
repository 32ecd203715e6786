"""Runner: the synchronous draw / read key / dispatch loop."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Callable

from rich.console import Console

from taskboard import log
from taskboard.controller import AppState, handle_key
from taskboard.keys import read_key
from taskboard.ui import render

KeyReader = Callable[[], str]


def draw(console: Console, state: AppState) -> None:
    console.clear()
    console.print(render(state))


def run(
    state: AppState,
    *,
    console: Console | None = None,
    reader: KeyReader = read_key,
    alt_screen: bool = True,
) -> str:
    """Run until the state asks to exit. Returns a farewell message.

    Ctrl-C and end of input stop the loop the same way quitting does.
    """
    console = console or log.console
    screen = console.screen() if alt_screen and console.is_terminal else nullcontext()
    farewell = "Goodbye."
    with screen:
        try:
            while not state.exit:
                draw(console, state)
                handle_key(state, reader())
        except (KeyboardInterrupt, EOFError):
            farewell = "Interrupted. Goodbye."
    log.debug(f"exit with {len(state.board)} task(s) on the board")
    return farewell
