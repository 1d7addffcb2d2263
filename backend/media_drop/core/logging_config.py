import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
ACCESS_LOGGER_NAME = 'media_drop.access'


def configure_logging(log_level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging; ``log_level`` may be a name such as ``'DEBUG'``."""
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
    logging.basicConfig(level=log_level, format=LOG_FORMAT)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else __name__)


def get_access_logger() -> logging.Logger:
    """Logger receiving one ``method=..., uri=..., status=...`` line per request."""
    return logging.getLogger(ACCESS_LOGGER_NAME)
