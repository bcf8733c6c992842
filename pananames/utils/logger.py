"""
Centralized logging configuration with colored output
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog


LOGS_DIR = Path("logs")


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (saved in logs/ directory)
        console: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if console:
        console_handler = colorlog.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper()))

        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            secondary_log_colors={},
            style='%'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_file:
        LOGS_DIR.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(LOGS_DIR / log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with default configuration.

    File output is opt-in: pass log_file (or set LOG_FILE and go through
    configure_logging) to also write records under logs/.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level
        log_file: Optional log file name

    Returns:
        Configured logger instance
    """
    return setup_logger(
        name=name,
        level=level,
        log_file=log_file,
        console=True
    )


def configure_logging(level: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Re-level every pananames logger created so far and return the package logger.

    Args:
        level: Logging level applied to all pananames.* loggers
        log_file: Optional log file name added to the package logger
    """
    for name in list(logging.root.manager.loggerDict):
        if name == "pananames" or name.startswith("pananames."):
            logger = logging.getLogger(name)
            logger.setLevel(getattr(logging, level.upper()))
            for handler in logger.handlers:
                if not isinstance(handler, logging.FileHandler):
                    handler.setLevel(getattr(logging, level.upper()))

    # Child loggers print on their own handlers; the package logger only
    # collects propagated records into the file.
    return setup_logger("pananames", level=level, log_file=log_file or None, console=False)
