"""Logging configuration for the JobNet API and scripts."""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# werkzeug logs every request line; sqlalchemy logs every statement at INFO
QUIET_LOGGERS = ("werkzeug", "sqlalchemy", "urllib3", "flask_cors")

LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _file_handler(path: str, formatter: logging.Formatter) -> logging.Handler:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Args:
        level: Log level name; defaults to ``settings.log_level``. Unknown
            names fall back to INFO.
        log_file: Rotating log file path; defaults to ``settings.log_file``
    """
    root = logging.getLogger()

    # The Flask reloader imports the app twice
    if root.handlers:
        return

    level = level or settings.log_level
    log_file = log_file or settings.log_file

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        root.addHandler(_file_handler(log_file, formatter))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
