import sys

from loguru import logger


def configure_logger(level: str = "INFO"):
    """Route loguru output to stderr at ``level``."""
    logger.remove()  # drop the default handler
    logger.add(sys.stderr, level=level.upper())
    return logger
