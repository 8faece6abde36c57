"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "todopad"
_LOG_FILE = "todopad.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_configured_handler: logging.Handler | None = None

# Silent until setup_logging() attaches the file handler.
logging.getLogger(_APP_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger or one of its children.

    Module names inside the package ("todopad.services.x") are used as-is;
    anything else becomes a child of the application logger.
    """
    if not name or name == _APP_NAME:
        return logging.getLogger(_APP_NAME)
    if name.startswith(f"{_APP_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_APP_NAME}.{name}")


def setup_logging(level: str = "INFO", log_dir: str | Path | None = None) -> logging.Logger:
    """Attach the rotating file handler to the application logger, once.

    Later calls only adjust the level.
    """
    global _configured_handler

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(level)
    if _configured_handler is not None:
        return logger

    log_path = Path(log_dir) if log_dir is not None else Path(user_log_dir(_APP_NAME))
    log_path.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False

    _configured_handler = handler
    return logger
