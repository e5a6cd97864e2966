"""Colored console logging for utilkit.

Thin helpers over the standard ``logging`` module. Messages go to a logger
named ``utilkit`` so host applications can reconfigure or silence it; the
optional ``color`` argument wraps the message in an ANSI escape sequence.
"""

import logging
import sys

from ...config.defaults import get_log_level

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
ITALIC = "\033[3m"

RED = "\033[31m"
ORANGE = "\033[38;5;208m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BLUE = "\033[34m"
PURPLE = "\033[35m"

RESET_COLOR = "\033[0m"

LOGGER_NAME = "utilkit"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the package logger, attaching a stderr handler on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(get_log_level())
        logger.propagate = False
    return logger


def _colorize(message: str, color: str | None) -> str:
    return f"{color}{message}{RESET_COLOR}" if color else message


def debug(message: str, color: str | None = None) -> None:
    get_logger().debug(_colorize(message, color))


def info(message: str, color: str | None = None) -> None:
    get_logger().info(_colorize(message, color))


def warning(message: str, color: str | None = YELLOW) -> None:
    get_logger().warning(_colorize(message, color))


def error(message: str, color: str | None = RED) -> None:
    get_logger().error(_colorize(message, color))
