"""Decode raw terminal key presses from ``click.getchar()`` into key names."""

from __future__ import annotations

import click

# ANSI / xterm sequences (POSIX terminals, Windows Terminal with VT input).
_ESCAPE_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[3~": "delete",
    "\x1b[Z": "backtab",
}

# Windows console scan codes, delivered after a "\xe0" or "\x00" prefix.
_SCAN_CODES: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
    "G": "home",
    "O": "end",
    "S": "delete",
    "\x0f": "backtab",
}

_CONTROL_KEYS: dict[str, str] = {
    "\x1b": "esc",
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def decode(raw: str) -> str:
    """Map one ``getchar`` result to a key name.

    Printable characters are returned unchanged; unknown control input
    decodes to ``""`` and is ignored by the controller.
    """
    if not raw:
        return ""
    if raw in _CONTROL_KEYS:
        return _CONTROL_KEYS[raw]
    if raw in _ESCAPE_SEQUENCES:
        return _ESCAPE_SEQUENCES[raw]
    if len(raw) == 2 and raw[0] in ("\xe0", "\x00"):
        return _SCAN_CODES.get(raw[1], "")
    if len(raw) == 1 and raw.isprintable():
        return raw
    return ""


def read_key() -> str:
    """Block until a key is pressed and return its decoded name."""
    return decode(click.getchar())
