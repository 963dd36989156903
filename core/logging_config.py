"""Standard logging setup for the calculator app."""
from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "PROFIT_CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging once; later calls only adjust the level.

    *level* defaults to ``$PROFIT_CALC_LOG_LEVEL`` and then ``INFO``.
    """

    resolved = level if level is not None else os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, stream=sys.stdout, level=resolved)
    root.setLevel(resolved)


__all__ = ["LOG_LEVEL_ENV", "setup_logging"]
