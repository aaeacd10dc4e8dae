"""
Timeline Logging

Logging wrapper for the timeline visualizer.

By default messages go to a standard library logger named ``timeline_visualizer``
with a colorized console handler. If you have an existing logging system, you
can redirect timeline logs:

    from timeline_visualizer.logging import TimelineLog
    TimelineLog.set_handler(my_log_function)

Or disable logging entirely:

    TimelineLog.enabled = False
"""

import logging
import sys
from typing import Callable, Optional

from colorama import Fore, Style, init

init(autoreset=True)

LOGGER_NAME = "timeline_visualizer"


class ColorFormatter(logging.Formatter):
    """
    A formatter that colorizes log level names using colorama.
    """
    color_map = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.LIGHTRED_EX,
    }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        # Copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def init_logger(name: str = LOGGER_NAME, level: int = logging.DEBUG) -> logging.Logger:
    """
    Get the timeline logger, attaching a colored console handler on first use.

    :param name: The logger's name.
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :return: A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Don't stack handlers if init_logger is called multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColorFormatter(
            fmt="%(asctime)s | %(levelname)s | [Timeline] %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

    return logger


class TimelineLog:
    """
    Simple logging wrapper for the timeline visualizer.

    By default, logs through the ``timeline_visualizer`` logger.
    Can be customized or disabled.
    """

    # Enable/disable all logging
    enabled: bool = True

    # Log levels (same values as the logging module)
    DEBUG: int = logging.DEBUG
    INFO: int = logging.INFO
    WARNING: int = logging.WARNING
    ERROR: int = logging.ERROR

    # Current log level (DEBUG and above)
    level: int = DEBUG

    # Custom handler (if set, overrides default behavior)
    _handler: Optional[Callable[[int, str], None]] = None

    _logger: Optional[logging.Logger] = None

    @classmethod
    def set_handler(cls, handler: Optional[Callable[[int, str], None]]) -> None:
        """
        Set a custom log handler.

        Args:
            handler: Function that takes (level: int, message: str), or None
                     to restore the default logger
        """
        cls._handler = handler

    @classmethod
    def _log(cls, level: int, message: str) -> None:
        """Internal log method"""
        if not cls.enabled or level < cls.level:
            return

        if cls._handler:
            cls._handler(level, message)
            return

        if cls._logger is None:
            cls._logger = init_logger()
        cls._logger.log(level, message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log debug message"""
        cls._log(cls.DEBUG, message)

    @classmethod
    def info(cls, message: str) -> None:
        """Log info message"""
        cls._log(cls.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        """Log warning message"""
        cls._log(cls.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log error message"""
        cls._log(cls.ERROR, message)


# Convenience alias
Log = TimelineLog
