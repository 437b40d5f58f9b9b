import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from okefin.core.config import settings

# Function name is part of every record so request traces can be followed per service call
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s"
LOG_LEVEL = logging.INFO
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5


def _rotating_handler(filename: str, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        settings.LOG_DIR / filename,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level or LOG_LEVEL)

    # Modules are re-imported by the test runner and uvicorn reloader
    logger.handlers = []
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    base_name = name.replace(".", "_")
    logger.addHandler(_rotating_handler(f"{base_name}.log", logging.DEBUG, formatter))
    logger.addHandler(_rotating_handler(f"{base_name}_error.log", logging.ERROR, formatter))

    return logger
