"""
Logging configuration for the music library service.

``setup_logging`` gives the root logger a console handler the first
time it runs and, when a log file is configured, a file handler.  The
file handler is attached even if something else (uvicorn, pytest, an
embedding process) already installed console output, and the same
file is never attached twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler)
        and Path(handler.baseFilename) == log_path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Only applied when this call installs the console
        handler, so an already configured host keeps its level.
    logfile : Optional[str]
        Path to a file to log messages to, resolved relative to the
        current working directory.  If omitted, no file handler is
        added.
    """
    root = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
