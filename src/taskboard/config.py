"""Configuration defaults, env vars, and runtime options for taskboard."""

from __future__ import annotations

import os
from dataclasses import dataclass


VERSION = "0.3.0"

_FALSY = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSY


@dataclass
class Config:
    """Runtime configuration, built from CLI flags and environment."""

    # Board
    demo_tasks: bool = True

    # Terminal
    alt_screen: bool = True

    # Keys: when set, ``j`` moves up a row and ``k`` moves down.
    invert_rows: bool = False

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.alt_screen:
            self.alt_screen = _env_flag("TASKBOARD_ALT_SCREEN", True)
        if not self.invert_rows:
            self.invert_rows = _env_flag("TASKBOARD_INVERT_ROWS", False)
        if not self.verbose:
            self.verbose = _env_flag("TASKBOARD_VERBOSE", False)
