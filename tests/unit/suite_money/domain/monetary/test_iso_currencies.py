from decimal import Decimal

from suite_money.domain.monetary.currency_registry import EUR, STATIC_CURRENCIES, USD, XAU
from suite_money.domain.monetary.iso_currencies import ISO_CURRENCY_TABLE, iso_currency_map
from suite_money.domain.monetary.money import Money


def test_iso_table_has_unique_codes_and_numeric_codes():
    codes = [row[0] for row in ISO_CURRENCY_TABLE]
    numeric_codes = [row[1] for row in ISO_CURRENCY_TABLE]
    assert len(codes) == len(set(codes))
    assert len(numeric_codes) == len(set(numeric_codes))


def test_iso_currency_map_lookups():
    currencies = iso_currency_map()
    assert len(currencies) == len(ISO_CURRENCY_TABLE)

    assert currencies["USD"] == USD
    assert currencies["USD"].numeric_code == 840
    assert currencies["JPY"].minor_units == 0
    assert currencies["BHD"].minor_units == 3
    assert currencies["CLF"].minor_units == 4
    assert currencies.get_by_numeric(978) == EUR


def test_iso_currency_map_is_owned_by_caller():
    first = iso_currency_map()
    second = iso_currency_map()
    assert first is not second
    assert first["USD"] is not second["USD"]


def test_static_currencies_agree_with_iso_table():
    currencies = iso_currency_map()
    for static_currency in STATIC_CURRENCIES:
        iso_currency = currencies.get(static_currency.code)
        if iso_currency is None:
            # Crypto units are not part of ISO 4217
            continue

        assert static_currency.minor_units == iso_currency.minor_units, static_currency.code
        assert static_currency.numeric_code == iso_currency.numeric_code, static_currency.code


def test_precious_metals_keep_fractional_ounces():
    currencies = iso_currency_map()
    assert currencies["XAU"].minor_units == XAU.minor_units == 4
    assert Money(Decimal("1.23456"), XAU).to_minor_units() == Money(Decimal("1.23456"), currencies["XAU"]).to_minor_units() == 12346
