"""taskboard: a terminal kanban board."""

from taskboard.config import VERSION

__version__ = VERSION
