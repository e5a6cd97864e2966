"""
utilkit utility modules - small helpers organized by domain.

Most modules are pure functions over primitive inputs; the rate limiters
in timing/ are the exception and own a private cancellable timer.

Modules:
    parsing.strings: String inspection, casing, whitespace and templating
    conversion.base64_codec: Base64 encode/decode, validation, padding
    conversion.byte_units: Byte unit conversion and human-readable sizes
    conversion.currency: Locale-aware currency formatting
    math.core: Number formatting, rounding and integer helpers
    date_utils: Date arithmetic and token-based formatting
    web.urls: URL parsing and query string manipulation
    containers.arrays: Sequence helpers
    containers.objects: Mapping and attribute helpers
    containers.cloning: Shallow and deep copies
    generation.random_values: Random numbers and strings
    generation.uuids: UUID versions 1 to 6
    timing.debounce: Debounce wrapper
    timing.throttle: Throttle wrapper
    functional_utils: Error-as-value try/catch wrappers
    logging: Colored console logging
"""

__all__ = [
    "parsing",
    "conversion",
    "math",
    "date_utils",
    "web",
    "containers",
    "generation",
    "timing",
    "functional_utils",
    "logging",
]
