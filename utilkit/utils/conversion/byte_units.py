"""Pure functions for converting and formatting byte quantities.

Units run from bit up to yottabyte. A bit is an eighth of a byte; every unit
above Byte is ``base`` times the previous one, where base is usually 1024
(binary, the default) or 1000 (decimal).
"""

from enum import Enum

from ...config.defaults import DEFAULT_BYTE_BASE


class ByteUnit(Enum):
    """Byte units ordered from smallest to largest."""

    BIT = "bit"
    BYTE = "B"
    KILOBYTE = "KB"
    MEGABYTE = "MB"
    GIGABYTE = "GB"
    TERABYTE = "TB"
    PETABYTE = "PB"
    EXABYTE = "EB"
    ZETTABYTE = "ZB"
    YOTTABYTE = "YB"


_UNITS = list(ByteUnit)
# Units that take a power of the base, i.e. everything from Byte upwards
_SCALED_UNITS = _UNITS[1:]


def _validate_base(base: int | float) -> None:
    if base <= 1:
        raise ValueError(f"base must be greater than 1, got {base}")


def get_multiplier(unit: ByteUnit, base: int | float = DEFAULT_BYTE_BASE) -> float:
    """Get the size of one unit expressed in bytes.

    Examples:
        >>> get_multiplier(ByteUnit.BIT)
        0.125
        >>> get_multiplier(ByteUnit.KILOBYTE)
        1024
        >>> get_multiplier(ByteUnit.MEGABYTE, 1000)
        1000000
    """
    if unit is ByteUnit.BIT:
        return 1 / 8
    return base ** _SCALED_UNITS.index(unit)


def convert(
    value: int | float,
    from_unit: ByteUnit,
    to_unit: ByteUnit,
    base: int | float = DEFAULT_BYTE_BASE,
) -> float:
    """Convert a quantity between byte units.

    Args:
        value: Quantity expressed in from_unit
        from_unit: Source unit
        to_unit: Target unit
        base: Ratio between adjacent units above Byte (default: 1024)

    Returns:
        Quantity expressed in to_unit

    Raises:
        ValueError: If base is not greater than 1

    Examples:
        >>> convert(1, ByteUnit.GIGABYTE, ByteUnit.MEGABYTE)
        1024.0
        >>> convert(1, ByteUnit.GIGABYTE, ByteUnit.MEGABYTE, base=1000)
        1000.0
        >>> convert(8, ByteUnit.BIT, ByteUnit.BYTE)
        1.0
    """
    _validate_base(base)
    return (value * get_multiplier(from_unit, base)) / get_multiplier(to_unit, base)


def format_bytes(
    num_bytes: int | float, decimals: int = 2, base: int | float = DEFAULT_BYTE_BASE
) -> str:
    """Format byte count into human-readable string with units.

    Quantities smaller than one byte are shown in bits. Quantities larger
    than the biggest unit are shown in yottabytes.

    Args:
        num_bytes: Number of bytes (may be negative or fractional)
        decimals: Number of decimal places (negative values act as 0)
        base: Ratio between adjacent units (default: 1024)

    Returns:
        Formatted string such as '1.15 GB' or '4.00 bits'

    Examples:
        >>> format_bytes(0)
        '0 B'
        >>> format_bytes(1024)
        '1.00 KB'
        >>> format_bytes(1234567890)
        '1.15 GB'
        >>> format_bytes(0.125)
        '1.00 bit'
        >>> format_bytes(1000000, base=1000)
        '1.00 MB'
    """
    _validate_base(base)
    if num_bytes == 0:
        return "0 B"

    places = max(decimals, 0)

    if abs(num_bytes) < 1:
        bits = num_bytes * 8
        suffix = "" if abs(bits) == 1 else "s"
        return f"{bits:.{places}f} {ByteUnit.BIT.value}{suffix}"

    # Compare against exact powers; log ratios misplace values such as 1000**3
    magnitude = abs(num_bytes)
    exponent = 0
    while exponent < len(_SCALED_UNITS) - 1 and magnitude >= base ** (exponent + 1):
        exponent += 1
    value = num_bytes / base ** exponent
    return f"{value:.{places}f} {_SCALED_UNITS[exponent].value}"
