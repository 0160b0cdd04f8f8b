"""
Logging setup for the chroma_convert logger hierarchy.
Library modules log through logging.getLogger(__name__), which sits under it.

Usage:
    from logging_config import setup_logging, get_logger
    setup_logging(level="INFO", log_format="text")
    logger = get_logger("api")
"""

import json
import logging
from datetime import datetime

ROOT_LOGGER = "chroma_convert"


class JSONFormatter(logging.Formatter):
    """JSON log formatter"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_initialized = False


def setup_logging(level: str = "INFO", log_format: str = "text") -> None:
    """Configure the chroma_convert logger once.

    Args:
        level: log level name (DEBUG, INFO, WARNING, ERROR)
        log_format: "text" or "json"
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the chroma_convert hierarchy"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def reset_logging() -> None:
    """Remove installed handlers (for tests)"""
    global _initialized
    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.NOTSET)
    _initialized = False
