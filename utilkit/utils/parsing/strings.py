"""Pure functions for string manipulation and inspection.

This module groups the string helpers (case changes, whitespace handling,
numeric parsing, printf-style formatting and character statistics),
following functional programming principles with no side effects.
"""

import base64
import re
from collections import Counter
from typing import Any, Pattern
from urllib.parse import quote, unquote

_DIGITS = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s")
_PLACEHOLDER = re.compile(r"%[sdf%]")

# Characters encodeURIComponent leaves untouched besides letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def is_empty(value: str | None) -> bool:
    """Check if string is None or has zero length.

    Whitespace-only strings are not empty, see is_blank for that.

    Examples:
        >>> is_empty(None)
        True
        >>> is_empty("")
        True
        >>> is_empty(" ")
        False
    """
    return value is None or len(value) == 0


def is_blank(value: str | None) -> bool:
    """Check if string is None, empty or whitespace only.

    Examples:
        >>> is_blank(" ")
        True
        >>> is_blank("\\n\\t")
        True
        >>> is_blank("abc")
        False
    """
    return value is None or len(value.strip()) == 0


def capitalize_first_letter(value: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Examples:
        >>> capitalize_first_letter("hello world")
        'Hello world'
        >>> capitalize_first_letter("")
        ''
    """
    return value[:1].upper() + value[1:]


def uncapitalize_first_letter(value: str) -> str:
    """Lowercase the first character, leaving the rest untouched.

    Examples:
        >>> uncapitalize_first_letter("Hello World")
        'hello World'
    """
    return value[:1].lower() + value[1:]


def extract_string_by_regex(
    value: str, pattern: str | Pattern[str], return_original: bool = False
) -> str | None:
    """Extract a substring using the first regex match.

    Args:
        value: Input string to search
        pattern: Regex pattern string or compiled pattern
        return_original: Return the whole match instead of the first group

    Returns:
        Whole match if return_original, otherwise the first capture group.
        None when nothing matches or the pattern has no capture group.

    Examples:
        >>> extract_string_by_regex("sample_rate_0", r"^(.*)_\\d+$")
        'sample_rate'
        >>> extract_string_by_regex("sample_rate_0", r"^(.*)_\\d+$", True)
        'sample_rate_0'
        >>> extract_string_by_regex("sample_rate", r"^(.*)_\\d+$") is None
        True
    """
    match = re.search(pattern, value)
    if match is None:
        return None
    if return_original:
        return match.group(0)
    return match.group(1) if match.re.groups else None


def to_upper_case(value: str) -> str:
    return value.upper()


def to_lower_case(value: str) -> str:
    return value.lower()


def trim(value: str) -> str:
    return value.strip()


def repeat(value: str, count: int) -> str:
    """Repeat string count times.

    Raises:
        ValueError: If count is negative

    Examples:
        >>> repeat("abc", 3)
        'abcabcabc'
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return value * count


def base64_encode(value: str) -> str:
    """Percent-encode a string like encodeURIComponent, then base64 it.

    The output is the base64 of the URI-encoded form, not of the raw UTF-8
    bytes. Use base64_decode to reverse it.

    Examples:
        >>> base64_encode("hello world")
        'aGVsbG8lMjB3b3JsZA=='
    """
    encoded = quote(value, safe=_URI_COMPONENT_SAFE)
    return base64.b64encode(encoded.encode("ascii")).decode("ascii")


def base64_decode(value: str) -> str:
    """Reverse base64_encode.

    Raises:
        ValueError: If value is not valid base64

    Examples:
        >>> base64_decode("aGVsbG8lMjB3b3JsZA==")
        'hello world'
    """
    try:
        decoded = base64.b64decode(value, validate=True).decode("ascii")
    except (ValueError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid base64 input: {e}") from e
    return unquote(decoded)


def remove_middle_spaces(value: str, remove_ends: bool = False) -> str:
    """Remove every whitespace character from the string.

    The result is the same whichever value remove_ends has: leading and
    trailing whitespace is removed along with the rest.

    Examples:
        >>> remove_middle_spaces(" a b\\tc ")
        'abc'
    """
    if remove_ends:
        value = value.strip()
    return _WHITESPACE.sub("", value)


def remove_space(
    value: str,
    start: bool = False,
    end: bool = False,
    middle: bool = False,
    all: bool = False,
) -> str:
    """Selectively remove whitespace from a string.

    Args:
        value: Input string
        start: Strip leading whitespace
        end: Strip trailing whitespace
        middle: Remove whitespace between the first and last non-space characters
        all: Remove every whitespace character (overrides the other flags)

    Returns:
        String with the selected whitespace removed

    Examples:
        >>> remove_space("  hello world  ", start=True)
        'hello world  '
        >>> remove_space("  hello world  ", end=True)
        '  hello world'
        >>> remove_space("  hello world  ", middle=True)
        '  helloworld  '
        >>> remove_space("  hello world  ", all=True)
        'helloworld'
    """
    if all:
        return _WHITESPACE.sub("", value)

    core = value.strip()
    if not core:
        return "" if (start or end) else value

    lead_len = len(value) - len(value.lstrip())
    trail_len = len(value) - len(value.rstrip())
    leading = "" if start else value[:lead_len]
    trailing = "" if end else value[len(value) - trail_len:]
    if middle:
        core = _WHITESPACE.sub("", core)
    return leading + core + trailing


def format_string(template: str, *args: Any) -> str:
    """Printf-style substitution of %s, %d and %f placeholders.

    Placeholders are consumed left to right. A placeholder without a matching
    argument is left as is; surplus arguments are ignored. ``%%`` renders a
    literal percent sign.

    Raises:
        ValueError: If a %d or %f argument cannot be converted to a number

    Examples:
        >>> format_string("Hello, %s!", "world")
        'Hello, world!'
        >>> format_string("%d + %d = %d", 2, 3, 5)
        '2 + 3 = 5'
        >>> format_string("Price: %f", 9.99)
        'Price: 9.990000'
    """
    remaining = iter(args)

    def substitute(match: re.Match) -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        try:
            arg = next(remaining)
        except StopIteration:
            return token
        if token == "%d":
            return str(int(float(arg)))
        if token == "%f":
            return f"{float(arg):f}"
        return str(arg)

    return _PLACEHOLDER.sub(substitute, template)


def is_numeric(value: str) -> bool:
    """Check if string consists of ASCII digits only.

    Signs, decimal points and non-ASCII digits are rejected.

    Examples:
        >>> is_numeric("123")
        True
        >>> is_numeric("-1")
        False
        >>> is_numeric("")
        False
    """
    return _DIGITS.fullmatch(value) is not None


def string_to_number(value: str) -> int | float:
    """Convert a digit string to int, returning NaN for anything else.

    Examples:
        >>> string_to_number("123")
        123
        >>> import math
        >>> math.isnan(string_to_number("abc"))
        True
    """
    if not is_numeric(value):
        return float("nan")
    return int(value)


def string_to_big_int(value: str) -> int:
    """Convert a digit string of any length to int.

    Raises:
        ValueError: If the string is not a non-negative integer

    Examples:
        >>> string_to_big_int("12345678901234567890")
        12345678901234567890
    """
    if not is_numeric(value):
        raise ValueError("Invalid input: string must represent a non-negative integer.")
    return int(value)


def is_palindrome(value: str) -> bool:
    """Check if string reads the same backwards (case sensitive).

    Examples:
        >>> is_palindrome("racecar")
        True
        >>> is_palindrome("Racecar")
        False
    """
    return value == value[::-1]


def most_frequent_characters(value: str) -> list[str]:
    """Return every character tied for the highest count, in first-seen order.

    Examples:
        >>> most_frequent_characters("aabbcc")
        ['a', 'b', 'c']
        >>> most_frequent_characters("aaabb")
        ['a']
        >>> most_frequent_characters("")
        []
    """
    counts = Counter(value)
    if not counts:
        return []
    max_count = max(counts.values())
    return [char for char, count in counts.items() if count == max_count]


def unique_characters(value: str) -> list[str]:
    """Return the characters that occur exactly once, in first-seen order.

    Examples:
        >>> unique_characters("aabbcd")
        ['c', 'd']
    """
    counts = Counter(value)
    return [char for char, count in counts.items() if count == 1]
