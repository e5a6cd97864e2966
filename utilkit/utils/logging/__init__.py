"""Logging utilities for utilkit."""

from .log import (
    BOLD, UNDERLINE, ITALIC,
    RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE,
    RESET_COLOR,
    get_logger,
    debug, info, warning, error,
)

__all__ = [
    "BOLD", "UNDERLINE", "ITALIC",
    "RED", "ORANGE", "YELLOW", "GREEN", "BLUE", "PURPLE",
    "RESET_COLOR",
    "get_logger",
    "debug", "info", "warning", "error",
]
