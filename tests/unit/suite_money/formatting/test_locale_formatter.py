from decimal import Decimal

import pytest
from babel import Locale

from suite_money.domain.monetary.currency_registry import EUR, JPY, USD
from suite_money.domain.monetary.money import Money
from suite_money.formatting.locale_formatter import format_locale, parse_locale


def test_format_locale_en_us():
    assert format_locale(Decimal("1234567.891"), 2, "EUR", "en_US") == "€1,234,567.89"
    assert format_locale(Decimal("1234567.891"), 2, "USD", "en_US") == "$1,234,567.89"


def test_format_locale_accepts_hyphenated_tag():
    assert format_locale(Decimal("1234567.891"), 2, "USD", "en-US") == "$1,234,567.89"


def test_format_locale_de_de():
    assert Money(Decimal("1099.98"), EUR).format_locale("de_DE") == "1.099,98\xa0€"


def test_money_format_locale_rounds_to_minor_units():
    assert Money(1, USD).format_locale() == "$1.00"
    assert Money(Decimal("1234.56"), JPY).format_locale("en_US") == "¥1,235"


def test_parse_locale():
    assert parse_locale("en-US") == Locale("en", "US")
    assert parse_locale(" de_DE ") == Locale("de", "DE")

    locale = Locale("fr", "FR")
    assert parse_locale(locale) is locale


@pytest.mark.parametrize("locale", ["xx_XX", "", "   ", None])
def test_parse_locale_rejects_unknown_locales(locale):
    with pytest.raises(ValueError):
        parse_locale(locale)


def test_format_locale_rejects_non_finite_amount():
    with pytest.raises(ValueError):
        format_locale(Decimal("NaN"), 2, "USD")
