"""Pure functions for numeric formatting and arithmetic.

Formatting helpers return strings; arithmetic helpers validate their input
and raise ValueError/TypeError instead of returning sentinel values.
"""

import math
import random
import string

_RADIX_DIGITS = string.digits + string.ascii_lowercase


def format_decimal(num: int | float, decimal_places: int) -> str:
    """Format number with a fixed number of decimal places.

    Examples:
        >>> format_decimal(3.14159, 2)
        '3.14'
        >>> format_decimal(3.1, 2)
        '3.10'
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")
    return f"{num:.{decimal_places}f}"


def format_with_commas(num: int | float) -> str:
    """Insert thousands separators into the integer part.

    Examples:
        >>> format_with_commas(1234567.89)
        '1,234,567.89'
        >>> format_with_commas(1000000)
        '1,000,000'
        >>> format_with_commas(-1234)
        '-1,234'
    """
    return f"{num:,}"


def round_to(num: int | float, precision: int) -> float:
    """Round to a number of decimal places, ties going up.

    Unlike the builtin round(), a tie at the scaled value always rounds
    towards positive infinity (2.5 -> 3, -2.5 -> -2).

    Examples:
        >>> round_to(3.14159, 2)
        3.14
        >>> round_to(3.14559, 2)
        3.15
        >>> round_to(2.5, 0)
        3.0
    """
    factor = 10 ** precision
    return math.floor(num * factor + 0.5) / factor


def is_in_range(num: int | float, minimum: int | float, maximum: int | float) -> bool:
    """Check if number lies in the inclusive range [minimum, maximum].

    Examples:
        >>> is_in_range(5, 1, 10)
        True
        >>> is_in_range(10, 1, 10)
        True
        >>> is_in_range(15, 1, 10)
        False
    """
    return minimum <= num <= maximum


def random_int(minimum: int, maximum: int) -> int:
    """Random integer in the inclusive range [minimum, maximum].

    Raises:
        ValueError: If minimum is greater than maximum
    """
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
    return random.randint(minimum, maximum)


def factorial(num: int | float) -> int:
    """Compute n! for a non-negative integer.

    Integral floats such as 5.0 are accepted.

    Raises:
        ValueError: If num is negative or not an integer

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
    """
    if isinstance(num, bool) or not isinstance(num, (int, float)):
        raise ValueError("Input must be a non-negative integer")
    if isinstance(num, float) and not num.is_integer():
        raise ValueError("Input must be a non-negative integer")
    if num < 0:
        raise ValueError("Input must be a non-negative integer")
    return math.factorial(int(num))


def to_percentage(num: int | float, decimal_places: int) -> str:
    """Format a ratio as a percentage string.

    Examples:
        >>> to_percentage(0.1234, 2)
        '12.34%'
        >>> to_percentage(1.5, 0)
        '150%'
    """
    return f"{num * 100:.{decimal_places}f}%"


def to_radix_string(num: int, radix: int) -> str:
    """Render an integer in the given base using lowercase digits.

    Raises:
        ValueError: If radix is outside 2..36
        TypeError: If num is not an integer

    Examples:
        >>> to_radix_string(255, 16)
        'ff'
        >>> to_radix_string(255, 2)
        '11111111'
        >>> to_radix_string(-35, 36)
        '-z'
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    if not isinstance(num, int):
        raise TypeError(f"num must be int, got {type(num).__name__}")

    if num == 0:
        return "0"
    sign = "-" if num < 0 else ""
    num = abs(num)
    digits = []
    while num:
        num, remainder = divmod(num, radix)
        digits.append(_RADIX_DIGITS[remainder])
    return sign + "".join(reversed(digits))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of the absolute values.

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(-48, 18)
        6
        >>> gcd(0, 5)
        5
    """
    return math.gcd(int(a), int(b))
