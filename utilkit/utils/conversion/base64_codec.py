"""Pure functions for base64 encoding, validation and variant conversion.

Covers the standard alphabet with ``=`` padding, payloads carrying a
``data:<mime-type>;base64,`` prefix, and the URL-safe alphabet
(``-``/``_`` instead of ``+``/``/``, usually unpadded).
"""

import base64
import binascii
import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

_PADDED_BODY = r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?"
_UNPADDED_BODY = r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}(?:==)?|[A-Za-z0-9+/]{3}=?)?"
_MIME_PREFIX = r"(?:data:[A-Za-z0-9_]+/[a-zA-Z+\-.]+;base64,)"


class Base64Options(BaseModel):
    """Options controlling what is_base64 accepts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_empty: bool = True
    mime_required: bool = False
    allow_mime: bool = False
    padding_required: bool = True


@lru_cache(maxsize=None)
def _build_pattern(mime_required: bool, allow_mime: bool, padding_required: bool) -> re.Pattern:
    body = _PADDED_BODY if padding_required else _UNPADDED_BODY
    if mime_required:
        prefix = _MIME_PREFIX
    elif allow_mime:
        prefix = _MIME_PREFIX + "?"
    else:
        prefix = ""
    return re.compile(prefix + body, re.IGNORECASE | re.ASCII)


def encode(value: str) -> str:
    """Encode text to standard base64 using its UTF-8 bytes.

    Examples:
        >>> encode("Hello，世界")
        'SGVsbG/vvIzkuJbnlYw='
    """
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def decode(value: str) -> str:
    """Decode standard base64 back to UTF-8 text.

    Missing padding is restored before decoding.

    Raises:
        ValueError: If value is not valid base64 or not UTF-8 text

    Examples:
        >>> decode("SGVsbG/vvIzkuJbnlYw=")
        'Hello，世界'
        >>> decode("SGVsbG8")
        'Hello'
    """
    try:
        raw = base64.b64decode(add_base64_padding(value.strip()), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot decode base64 value: {e}") from e


def is_base64(value: str, options: Base64Options | dict | None = None) -> bool:
    """Check if a string is valid base64.

    Args:
        value: String to check
        options: Base64Options (or a dict of its fields) controlling empty
            strings, the data-URI prefix and padding

    Returns:
        True if the whole string matches the base64 grammar

    Examples:
        >>> is_base64("uuLMhh==")
        True
        >>> is_base64("uuLMhh")
        False
        >>> is_base64("uuLMhh", {"padding_required": False})
        True
        >>> is_base64("data:image/png;base64,uuLMhh==", {"allow_mime": True})
        True
        >>> is_base64("", {"allow_empty": False})
        False
    """
    if options is None:
        options = Base64Options()
    elif isinstance(options, dict):
        options = Base64Options(**options)

    if value == "" and not options.allow_empty:
        return False

    pattern = _build_pattern(options.mime_required, options.allow_mime, options.padding_required)
    return pattern.fullmatch(value) is not None


def remove_base64_padding(value: str) -> str:
    """Strip trailing ``=`` padding.

    Examples:
        >>> remove_base64_padding("SGVsbG8=")
        'SGVsbG8'
    """
    return value.rstrip("=")


def add_base64_padding(value: str) -> str:
    """Pad with ``=`` up to a multiple of four characters.

    Examples:
        >>> add_base64_padding("SGVsbG8")
        'SGVsbG8='
        >>> add_base64_padding("SGVsbA")
        'SGVsbA=='
    """
    remainder = len(value) % 4
    return value + "=" * (4 - remainder) if remainder else value


def url_safe_to_base64(value: str) -> str:
    """Convert URL-safe base64 to the standard alphabet, restoring padding.

    Examples:
        >>> url_safe_to_base64("SGVsbG8-")
        'SGVsbG8+'
        >>> url_safe_to_base64("a_8")
        'a/8='
    """
    return add_base64_padding(value.replace("-", "+").replace("_", "/"))


def base64_to_url_safe(value: str) -> str:
    """Convert standard base64 to the URL-safe alphabet without padding.

    Examples:
        >>> base64_to_url_safe("SGVsbG8+")
        'SGVsbG8-'
        >>> base64_to_url_safe("a/8=")
        'a_8'
    """
    return value.replace("+", "-").replace("/", "_").rstrip("=")
