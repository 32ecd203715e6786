"""taskboard CLI.

Installed as ``taskboard`` console_script via pipx / pip.
"""

from __future__ import annotations

import sys

import click

from taskboard import __version__
from taskboard.board.model import Board
from taskboard.config import Config
from taskboard.controller import AppState


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def build_state(cfg: Config) -> AppState:
    board = Board.with_demo_tasks() if cfg.demo_tasks else Board()
    return AppState(board=board, invert_rows=cfg.invert_rows)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--empty", is_flag=True, help="Start with an empty board (no demo tasks)")
@click.option("--no-alt-screen", is_flag=True, help="Draw in the normal screen buffer")
@click.option("--invert-rows", is_flag=True, help="Make j move up and k move down")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output on stderr")
@click.version_option(__version__, prog_name="taskboard")
def main(empty: bool, no_alt_screen: bool, invert_rows: bool, verbose: bool) -> None:
    """taskboard: a kanban board in your terminal.

    Tasks live in memory only and are gone when you quit.

    \b
    KEYS (board):
      h/l, left/right   previous/next column
      k/j, up/down      previous/next task
      i, e, enter       edit selected task (new task on an empty board)
      a                 add a task
      q                 quit

    \b
    KEYS (editor):
      i                 insert text into the active field (esc to stop)
      tab / shift-tab   next / previous field
      < / >             previous / next status
      + / - / t         due date: +1 day, -1 day, today
      w                 save
      q, esc            close (refused while there are unsaved changes)
      x                 close and discard changes
    """
    from taskboard import log as tlog
    from taskboard.errors import BoardError
    from taskboard.runner import run

    cfg = Config(
        demo_tasks=not empty,
        alt_screen=not no_alt_screen,
        invert_rows=invert_rows,
        verbose=verbose,
    )
    tlog.set_verbose(cfg.verbose)

    if not sys.stdin.isatty():
        tlog.warn("stdin is not a terminal; key presses may not be read one at a time.")

    state = build_state(cfg)
    tlog.debug(f"starting with {len(state.board)} task(s)")
    try:
        farewell = run(state, alt_screen=cfg.alt_screen)
    except BoardError as exc:
        tlog.error(f"Board state machine error: {exc}")
        raise
    tlog.console.print(farewell)
