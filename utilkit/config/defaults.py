import os
import string

# Byte conversion
DEFAULT_BYTE_BASE = 1024

# Currency formatting
DEFAULT_CURRENCY_LOCALE = "en-US"
DEFAULT_CURRENCY = "USD"
DEFAULT_FRACTION_DIGITS = 2

# Random generation, 15 digits is the largest length that always fits a double
RANDOM_NUMBER_MAX_LENGTH = 15
RANDOM_STRING_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

LOG_LEVEL_ENV_VAR = "UTILKIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    """Read the package log level from the environment.

    Unknown values fall back to the default instead of failing at import.
    """
    level = os.getenv(LOG_LEVEL_ENV_VAR, default).strip().upper()
    return level if level in _LOG_LEVELS else default
