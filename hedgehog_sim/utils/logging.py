"""Logging setup for the two ways a game runs.

``api/app.py`` calls ``setup_logging`` from the server lifespan and
``__main__`` calls it before a headless autoplay. In both cases module loggers
(deaths, wins, restarts at INFO; moves and ticks at DEBUG) go to stdout in
one column layout, and the CLI's final JSON state is printed after them.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-32s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Send every ``hedgehog_sim`` logger to stdout at *level*.

    Unknown level names fall back to INFO. Calling this twice replaces the
    handler instead of stacking a second one, so a server restarted inside
    one process does not double its output.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
