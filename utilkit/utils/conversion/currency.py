"""Locale-aware currency formatting.

Formatting rules (symbol placement, grouping and decimal separators) come
from the CLDR data shipped with Babel, so ``format_currency`` renders
amounts the way the target locale writes them.
"""

import copy
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, ConfigDict, Field

from ...config.defaults import (
    DEFAULT_CURRENCY,
    DEFAULT_CURRENCY_LOCALE,
    DEFAULT_FRACTION_DIGITS,
)
from ..logging import log

_NBSP = "\u00a0"


class CurrencyOptions(BaseModel):
    """Currency formatting options.

    Locales use BCP 47 tags ('en-US', 'zh-CN', 'de-DE'); underscores are
    accepted too. Currencies are ISO 4217 codes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str = DEFAULT_CURRENCY_LOCALE
    currency: str = DEFAULT_CURRENCY
    minimum_fraction_digits: int = Field(default=DEFAULT_FRACTION_DIGITS, ge=0, le=20)
    maximum_fraction_digits: int = Field(default=DEFAULT_FRACTION_DIGITS, ge=0, le=20)


def _resolve_options(options: CurrencyOptions | dict | None, overrides: dict[str, Any]) -> CurrencyOptions:
    if options is None:
        base = {}
    elif isinstance(options, CurrencyOptions):
        base = options.model_dump()
    else:
        base = dict(options)
    return CurrencyOptions(**{**base, **overrides})


def _parse_locale(tag: str) -> Locale:
    try:
        return Locale.parse(tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Unsupported locale '{tag}': {e}") from e


def format_currency(amount: int | float | Decimal, options: CurrencyOptions | dict | None = None, **overrides: Any) -> str:
    """Format a number as a currency string.

    Args:
        amount: Amount to format
        options: CurrencyOptions or a dict of its fields; missing fields use
            the defaults (en-US, USD, two fraction digits)
        **overrides: Individual option fields, applied on top of options

    Returns:
        Formatted currency string, with non-breaking spaces replaced by
        regular spaces

    Raises:
        ValueError: If the locale is unknown or an option is invalid

    Examples:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(1234.56, currency="EUR", locale="de-DE")
        '1.234,56 €'
        >>> format_currency(1234.5678, maximum_fraction_digits=3)
        '$1,234.568'
        >>> format_currency(-1234.56)
        '-$1,234.56'
    """
    resolved = _resolve_options(options, overrides)
    minimum = resolved.minimum_fraction_digits
    maximum = max(resolved.maximum_fraction_digits, minimum)

    locale = _parse_locale(resolved.locale)
    pattern = copy.copy(locale.currency_formats["standard"])
    pattern.frac_prec = (minimum, maximum)

    # Floats go through their shortest repr, halves round away from zero
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    with localcontext() as context:
        context.rounding = ROUND_HALF_UP
        formatted = pattern.apply(value, locale, currency=resolved.currency, currency_digits=False)
    log.debug(f"Formatted {amount!r} as {formatted!r} ({resolved.locale}, {resolved.currency})")
    return formatted.replace(_NBSP, " ")


def format_cny(amount: int | float | Decimal, options: CurrencyOptions | dict | None = None, **overrides: Any) -> str:
    """Format as Chinese yuan in the zh-CN locale.

    Examples:
        >>> format_cny(1234.56)
        '¥1,234.56'
    """
    return format_currency(amount, options, **{**overrides, "currency": "CNY", "locale": "zh-CN"})


def format_usd(amount: int | float | Decimal, options: CurrencyOptions | dict | None = None, **overrides: Any) -> str:
    """Format as US dollars, keeping the caller's locale.

    Examples:
        >>> format_usd(1234.56)
        '$1,234.56'
        >>> format_usd(1234.56, locale="en-GB")
        'US$1,234.56'
    """
    return format_currency(amount, options, **{**overrides, "currency": "USD"})


def format_eur(amount: int | float | Decimal, options: CurrencyOptions | dict | None = None, **overrides: Any) -> str:
    """Format as euros in the de-DE locale.

    Examples:
        >>> format_eur(1234.56)
        '1.234,56 €'
    """
    return format_currency(amount, options, **{**overrides, "currency": "EUR", "locale": "de-DE"})
