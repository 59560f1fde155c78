"""
Logging setup for the Voting API.

``setup_logging`` attaches the application's console handler (and an
optional file handler) to the root logger and applies the configured
level to the root, the ``voting_api`` package and the ``uvicorn``
loggers, so request logs and service logs share one threshold.
Handlers are tagged by name; calling it again, e.g. for every
``create_app`` in the test suite, only updates the levels.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "voting_api.console"
FILE_HANDLER_NAME = "voting_api.file"

# Loggers that follow the application level.
APP_LOGGERS = ("voting_api", "uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(settings: Settings) -> int:
    """Configure logging from ``settings`` and return the numeric level.

    Unknown level names fall back to ``INFO``.
    """
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if settings.log_file and not _has_handler(root, FILE_HANDLER_NAME):
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return level
