"""Logging configuration for the backend process.

Uses the standard library only. ``configure_logging`` is called by the app
factory and is idempotent, so creating several apps (as the tests do) never
stacks duplicate handlers.
"""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "selectshop-console"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach a console handler to the root logger and set its level."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # uvicorn's access log already reports every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
