"""
utilkit - small, independent helpers for everyday Python code.

Package structure:
    utilkit/
        utils/      - Pure utility functions grouped by domain
        config/     - Package defaults and environment overrides

Every helper lives in its own module and has no dependency on the others,
so callers import exactly what they need:

    from utilkit.utils.parsing.strings import capitalize_first_letter
    from utilkit.utils.conversion.byte_units import ByteUnit, convert
"""

__version__ = "1.0.0"
__all__ = ["utils", "config"]
