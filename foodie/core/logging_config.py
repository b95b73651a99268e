"""
Logging configuration for the console shell.

Core modules only create module loggers and emit records; they never
attach handlers. ``setup_logging`` is called once by the entry point to
attach a console handler and, optionally, a file handler to the root
logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Does nothing if the root logger already has handlers, so repeated
    calls (tests, embedding) keep the first configuration.

    Args:
        level: Logging level name, case insensitive
        logfile: Path of a file to also log to
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
