import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "kmp.log"
DEFAULT_LEVEL = "INFO"

# loggers owned by this project; everything else is left alone
PROJECT_LOGGERS = ("algorithms", "api", "utils", "app", "bench")

logger = logging.getLogger(__name__)


def _resolve_level(level: Optional[str]):
    """Returns (level name, rejected value or None); unknown names fall back to INFO."""
    name = (level or os.getenv("KMP_LOG_LEVEL", DEFAULT_LEVEL)).upper()
    if isinstance(logging.getLevelName(name), int):
        return name, None
    return DEFAULT_LEVEL, name


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None):
    """Sets up console (and optionally file) logging for the project loggers."""
    level, rejected = _resolve_level(level)
    log_dir = log_dir or os.getenv("KMP_LOG_DIR")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # the same handler is shared by every project logger, close each one once
    stale = set()
    for name in PROJECT_LOGGERS:
        project_logger = logging.getLogger(name)
        project_logger.setLevel(logging.DEBUG if log_dir else level)
        for handler in list(project_logger.handlers):
            project_logger.removeHandler(handler)
            stale.add(handler)
        for handler in handlers:
            project_logger.addHandler(handler)
        project_logger.propagate = False
    for handler in stale:
        handler.close()

    if rejected:
        logger.warning("unknown KMP_LOG_LEVEL %r, using %s", rejected, DEFAULT_LEVEL)
