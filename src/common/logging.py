import sys

from loguru import logger

from common.config import config

# Loguru config
logger.remove()
logger.add(sys.stderr, format=config.log_format, level=config.log_level, colorize=True)


def get_logger(name: str | None = None):
    return logger.bind(name=name) if name else logger


def mask_secret(value: str, visible: int = 4) -> str:
    """Hide all but the last few characters of a credential before it reaches a log line."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
