"""
Logging setup for the Civic Pulse API.

Application modules log through ``logging.getLogger(__name__)``, so
every record from this project sits under the ``civic_pulse_api``
logger.  ``setup_logging`` sets that logger to the configured level,
turns down chatty library loggers (per-request access lines from
uvicorn, connection chatter from httpx in tests) unless debugging, and
attaches console and file handlers to the root logger the first time
it runs.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

APP_LOGGER = "civic_pulse_api"
LIBRARY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = LIBRARY_LOGGERS,
) -> None:
    """Configure logging for the application.

    Parameters
    ----------
    level : str
        Level name for the application's loggers (case insensitive).
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, written in addition to the console.
    quiet : Iterable[str]
        Library loggers raised to ``WARNING`` unless ``level`` is
        ``DEBUG``.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.getLogger(APP_LOGGER).setLevel(numeric_level)
    if numeric_level > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        # Handlers already installed (a second create_app, or pytest).
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
