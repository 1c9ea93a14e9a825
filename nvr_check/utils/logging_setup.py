import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import LoggingConfig

LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
)


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure root logging for the command line tool."""
    config = config or LoggingConfig()
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]
    if config.log_file:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                config.log_file,
                maxBytes=config.max_log_size,
                backupCount=config.backup_count,
            )
        )

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    logging.getLogger("httpx").setLevel(logging.WARNING)
