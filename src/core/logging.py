import sys
from loguru import logger
from .config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level> | {extra}"
)


def setup_logging(level: str | None = None):
    """Configure loguru with a single stderr sink and return the logger."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper(), format=LOG_FORMAT)
    return logger
