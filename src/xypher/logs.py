from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "xypher"

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Attach a Rich stderr handler (and optionally a plain file handler) to the
    ``xypher`` logger. Safe to call more than once; old handlers are replaced.
    """
    lvl = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(lvl)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        rich_tracebacks=True,
    )
    console.setLevel(lvl)
    logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(lvl)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
        logger.addHandler(fh)

    return logger
