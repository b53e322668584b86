# festival_bot/logging_cfg.py
import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """
    Route loguru output to stderr at the given level.

    Args:
      level (str): Minimum level to emit, e.g. "DEBUG" or "INFO".
    """
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=level,
        backtrace=False,
        diagnose=False,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name} | {message}",
    )
