"""
Logging Setup

loguru configuration for scripts and examples. Library modules only emit
records through `loguru.logger`; installing sinks is left to the caller.
"""

import sys

from loguru import logger


def setup_logger(level: str = "INFO", log_file: str | None = None, enable_colors: bool = True) -> None:
    """
    Install a console sink (and optionally a file sink) for evocgp records.

    Parameters:
        level:         Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file:      Path of a log file to write as well; None for console only
        enable_colors: Whether to enable colored console output
    """
    # Remove any existing handlers to avoid duplicates
    logger.remove()

    colorize = enable_colors and sys.stdout.isatty()
    if colorize:
        console_format = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
    else:
        console_format = "{time:HH:mm:ss} | {level: <8} | {message}"

    logger.add(sys.stdout, level=level, format=console_format, colorize=colorize)

    # File handler (no colors in file)
    if log_file is not None:
        logger.add(log_file,
                   level=level,
                   format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
                   encoding="utf-8")
