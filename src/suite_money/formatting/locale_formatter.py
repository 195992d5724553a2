"""Locale-aware rendering backed by Babel's CLDR data."""
from __future__ import annotations

from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from suite_money.utils.rounding import RoundingStrategy, round_decimal

DEFAULT_LOCALE = "en_US"


def parse_locale(locale: str | Locale) -> Locale:
    """Parse $locale given as "en_US", "en-US" or a Babel `Locale`.

    Raises:
        ValueError: If the locale is unknown or malformed.
    """
    if isinstance(locale, Locale):
        return locale

    if not isinstance(locale, str) or not locale.strip():
        raise ValueError(f"$locale must be a non-empty string or babel Locale, but provided value is: {locale!r}")

    try:
        return Locale.parse(locale.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Cannot parse $locale ('{locale}')") from e


def format_locale(amount: Decimal, decimal_places: int, currency_code: str, locale: str | Locale = DEFAULT_LOCALE) -> str:
    """Render $amount as a localized currency string.

    The amount is rounded half-to-even to $decimal_places first. Group and decimal
    separators, symbol placement and spacing follow the CLDR conventions of $locale,
    e.g. "€1,234,567.89" for en_US and "1.234.567,89\xa0€" for de_DE.

    Args:
        amount: Finite amount to render.
        decimal_places: Fractional digits to keep, normally the currency's minor units.
        currency_code: ISO currency code used to look up the localized symbol.
        locale: Target locale.

    Returns:
        Localized string.

    Raises:
        ValueError: If $locale is unknown or $amount is not finite.
    """
    parsed_locale = parse_locale(locale)
    rounded = round_decimal(amount, decimal_places, RoundingStrategy.HALF_EVEN)

    # Without quantization Babel keeps every digit of the already-rounded value
    return format_currency(rounded, currency_code, locale=parsed_locale, decimal_quantization=False)
