"""Log sinks for momentum, configured from ``LoggingConfig``."""

import sys
from typing import Optional

from loguru import logger

from momentum.config.schema import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(config: Optional[LoggingConfig] = None, verbose: bool = False) -> None:
    """
    Replace loguru's default sink with momentum's console and file sinks.

    Args:
        config: Sink settings. Defaults to ``LoggingConfig()``.
        verbose: If True, the console shows DEBUG and above.
    """
    config = config or LoggingConfig()
    logger.remove()

    console_level = "DEBUG" if verbose else config.level
    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)

    if not config.file_enabled:
        logger.debug(f"Logging initialized. Console level: {console_level}, no file sink")
        return

    log_path = config.log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_path),
        level=config.file_level,
        format=FILE_FORMAT,
        rotation=config.rotation,
        retention=config.retention,
        compression="zip",
    )
    logger.debug(f"Logging initialized. Console level: {console_level}, File: {log_path}")
