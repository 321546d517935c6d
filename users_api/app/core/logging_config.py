"""
Logging configuration for the API process.

``setup_logging`` turns ``Settings`` into handlers on the root logger:
a console handler always, a file handler when ``LOG_FILE`` is set, and
``DEBUG`` level whenever ``DEBUG`` is on regardless of ``LOG_LEVEL``.
Uvicorn's own loggers are stripped of their handlers and left to
propagate, so server and application lines share one format.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed here carry this name so a second call can spot them.
HANDLER_NAME = "users_api"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(settings: Settings) -> int:
    """Numeric level for ``settings``; unknown names fall back to INFO."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logging(settings: Settings, root: Optional[logging.Logger] = None) -> None:
    """Configure ``root`` (the process root logger by default) from settings.

    Calling it again, e.g. from a second ``create_app()`` in tests, only
    re-applies the level.
    """
    root = root or logging.getLogger()
    root.setLevel(resolve_level(settings))

    if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
