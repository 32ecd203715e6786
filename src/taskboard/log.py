"""Rich console output for taskboard.

The board owns stdout and is redrawn after every key press, so anything that
may show up mid-session (errors, debug traces) is written to stderr.
"""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False)
_err_console = Console(highlight=False, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def warn(msg: str) -> None:
    console.print(f"[yellow]\\[WARN][/yellow] {msg}")


def error(msg: str) -> None:
    _err_console.print(f"[red]\\[ERROR][/red] {msg}")


def debug(msg: str) -> None:
    if _verbose:
        _err_console.print(f"[dim]\\[DEBUG] {msg}[/dim]")


def transition(kind: str, before: object, after: object) -> None:
    """Trace a state change as ``kind: before -> after`` (verbose only)."""
    debug(f"{kind}: {before} -> {after}")
