"""
Logging setup for the console apps.

Library modules only create `logging.getLogger(__name__)`; handlers are
attached here, once, by whichever entry point runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, logfile: str | Path | None = None,
                      *, console: bool = True) -> logging.Logger:
    """
    Attach handlers to the `wordgame` logger and return it.

    Console output goes to stderr at `level`; the optional log file always
    records DEBUG and above. Calling this again replaces earlier handlers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("wordgame")
    logger.setLevel(logging.DEBUG)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    if logfile is not None:
        p = Path(logfile)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    logger.propagate = False
    return logger
