"""Configuration module for utilkit.

Provides the default values shared by the utility modules and the
environment overrides read at import time.
"""

from .defaults import (
    DEFAULT_BYTE_BASE,
    DEFAULT_CURRENCY_LOCALE,
    DEFAULT_CURRENCY,
    DEFAULT_FRACTION_DIGITS,
    RANDOM_NUMBER_MAX_LENGTH,
    RANDOM_STRING_ALPHABET,
    get_log_level,
)

__all__ = [
    "DEFAULT_BYTE_BASE",
    "DEFAULT_CURRENCY_LOCALE",
    "DEFAULT_CURRENCY",
    "DEFAULT_FRACTION_DIGITS",
    "RANDOM_NUMBER_MAX_LENGTH",
    "RANDOM_STRING_ALPHABET",
    "get_log_level",
]
