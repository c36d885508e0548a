"""Logging setup — a Rich handler on the ``commitcheck`` logger."""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Attach a RichHandler (stderr) to the package logger and set its level.

    Calling it again replaces the previous handler instead of stacking one.
    """
    logger = logging.getLogger("commitcheck")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
