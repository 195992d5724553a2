from decimal import Decimal

import pytest

from suite_money.domain.monetary.currency_registry import EUR, JPY, USD
from suite_money.domain.monetary.exchange import ExchangeRate, IncorrectExchangeRateError
from suite_money.domain.monetary.money import Money
from tests.helpers.helper_currency import create_currency_map

# Constants
CURRENCIES = create_currency_map()
USD_TO_EUR = ExchangeRate(USD, EUR, Decimal("0.85"))


def test_convert_static():
    converted = Money(1, USD).convert(USD_TO_EUR)
    assert converted == Money(Decimal("0.85"), EUR)
    assert converted.currency is EUR


def test_convert_dynamic():
    converted = Money(1, CURRENCIES["USD"]).convert(USD_TO_EUR)
    assert converted == Money(Decimal("0.85"), EUR)
    assert converted.currency is EUR


def test_convert_with_dynamic_rate():
    rate = ExchangeRate(CURRENCIES["USD"], CURRENCIES["JPY"], 150)
    converted = Money(Decimal("2.50"), USD).convert(rate)
    assert converted == Money(375, JPY)
    assert converted.currency is CURRENCIES["JPY"]


def test_convert_does_not_round():
    converted = Money(Decimal("1.11"), USD).convert(USD_TO_EUR)
    assert converted.amount == Decimal("0.9435")
    assert converted.round_to_currency_precision().amount == Decimal("0.94")


def test_convert_with_wrong_rate():
    with pytest.raises(IncorrectExchangeRateError) as exc_info:
        Money(1, CURRENCIES["JPY"]).convert(USD_TO_EUR)

    assert exc_info.value.expected_code == "USD"
    assert exc_info.value.actual_code == "JPY"

    with pytest.raises(IncorrectExchangeRateError):
        Money(1, JPY).convert(USD_TO_EUR)


def test_convert_requires_exchange_rate():
    with pytest.raises(TypeError):
        Money(1, USD).convert(Decimal("0.85"))


@pytest.mark.parametrize("rate", [0, -1, "abc", "NaN", "Infinity"])
def test_rate_must_be_positive_and_finite(rate):
    with pytest.raises(ValueError):
        ExchangeRate(USD, EUR, rate)


def test_rate_currencies_must_be_currency_operands():
    with pytest.raises(TypeError):
        ExchangeRate("USD", EUR, 1)
    with pytest.raises(TypeError):
        ExchangeRate(USD, None, 1)


def test_inverse():
    inverse = USD_TO_EUR.inverse()
    assert inverse.from_currency is EUR
    assert inverse.to_currency is USD
    assert inverse.rate.quantize(Decimal("0.000001")) == Decimal("1.176471")
    assert inverse.inverse().rate.quantize(Decimal("0.000001")) == Decimal("0.850000")


def test_inverse_keeps_precision_beyond_default_context():
    inverse = ExchangeRate(USD, EUR, 3).inverse()
    # 50 significant digits, independent of the global 28-digit context
    assert inverse.rate == Decimal("0." + "3" * 50)


def test_convert_is_exact_for_long_amounts():
    amount = Decimal("12345678901234567890123456789.01")
    converted = Money(amount, USD).convert(ExchangeRate(USD, EUR, "0.5"))
    assert converted.amount == Decimal("6172839450617283945061728394.505")


def test_equality_and_str():
    assert USD_TO_EUR == ExchangeRate(USD, CURRENCIES["EUR"], "0.85")
    assert USD_TO_EUR != ExchangeRate(USD, EUR, "0.86")
    assert str(USD_TO_EUR) == "1 USD = 0.85 EUR"
    assert repr(USD_TO_EUR) == "ExchangeRate(USD, EUR, 0.85)"
