"""
Logging setup based on loguru
"""
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_configured_level: Optional[str] = None


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with the application sink.

    Calling again with the same level is a no-op so that every entry point
    can call it safely.
    """
    global _configured_level
    level = level.upper()
    if _configured_level == level:
        return
    logger.remove()
    logger.configure(extra={"name": "venue"})
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    _configured_level = level


def get_logger(name: Optional[str] = None):
    """Get the application logger, bound to a component name when given."""
    if name:
        return logger.bind(name=name)
    return logger
