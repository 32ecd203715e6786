"""Allow ``python -m taskboard``."""

from taskboard.cli import main

main()
