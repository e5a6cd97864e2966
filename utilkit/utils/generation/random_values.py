"""Random numbers and strings.

Uses the module-level ``random`` generator, so results are reproducible
after ``random.seed``. Not suitable for secrets; use the secrets module
for tokens and passwords.
"""

import math
import random

from ...config.defaults import RANDOM_NUMBER_MAX_LENGTH, RANDOM_STRING_ALPHABET


def generate_random_number(length: int) -> int:
    """Generate a random integer with exactly ``length`` digits.

    Args:
        length: Number of digits, 1 to 15

    Returns:
        Integer in [10**(length-1), 10**length - 1]

    Raises:
        ValueError: If length is outside 1..15

    Examples:
        >>> len(str(generate_random_number(6)))
        6
    """
    if not 1 <= length <= RANDOM_NUMBER_MAX_LENGTH:
        raise ValueError(
            f"length must be between 1 and {RANDOM_NUMBER_MAX_LENGTH}, got {length}"
        )
    return random.randint(10 ** (length - 1), 10 ** length - 1)


def generate_random_number_between(
    minimum: int | float,
    maximum: int | float,
    integer: bool = False,
    decimal_places: int | None = None,
) -> int | float:
    """Generate a random number in a range.

    Args:
        minimum: Lower bound (inclusive)
        maximum: Upper bound (inclusive for integers)
        integer: Return an integer drawn uniformly from [minimum, maximum]
        decimal_places: Round the result to this many decimal places

    Raises:
        ValueError: If minimum is greater than maximum, or no integer lies
            between them when integer is set

    Examples:
        >>> 1 <= generate_random_number_between(1, 10, integer=True) <= 10
        True
        >>> value = generate_random_number_between(1, 10, decimal_places=2)
        >>> value == round(value, 2)
        True
    """
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")

    if integer:
        low, high = math.ceil(minimum), math.floor(maximum)
        if low > high:
            raise ValueError(f"no integer between {minimum} and {maximum}")
        value = random.randint(low, high)
    else:
        value = random.uniform(minimum, maximum)

    if decimal_places is not None:
        return round(value, decimal_places)
    return value


def generate_random_string(length: int, alphabet: str = RANDOM_STRING_ALPHABET) -> str:
    """Generate a random string drawn from an alphabet (letters and digits by default).

    Raises:
        ValueError: If length is less than 1 or the alphabet is empty

    Examples:
        >>> len(generate_random_string(12))
        12
    """
    if length < 1:
        raise ValueError(f"length must be greater than 0, got {length}")
    if not alphabet:
        raise ValueError("alphabet cannot be empty")
    return "".join(random.choices(alphabet, k=length))
