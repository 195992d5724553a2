import pytest

from suite_money.domain.monetary.currency import Currency, CurrencyLike, StaticCurrency, is_currency_operand, is_static_currency
from suite_money.domain.monetary.currency_registry import JPY, STATIC_CURRENCIES, USD


def test_currency_normalizes_code_and_name():
    currency = Currency(" usd ", 2, 840, "$", " US Dollar ")
    assert currency.code == "USD"
    assert currency.minor_units == 2
    assert currency.numeric_code == 840
    assert currency.symbol == "$"
    assert currency.name == "US Dollar"
    assert str(currency) == "USD"


def test_currency_optional_fields_default_to_empty():
    currency = Currency("ABC", 3)
    assert currency.numeric_code is None
    assert currency.symbol == ""
    assert currency.name == ""


@pytest.mark.parametrize(
    "code, minor_units, numeric_code",
    [
        ("", 2, None),
        ("   ", 2, None),
        (None, 2, None),
        ("USD", -1, None),
        ("USD", 19, None),
        ("USD", 2.0, None),
        ("USD", True, None),
        ("USD", 2, 1000),
        ("USD", 2, -1),
    ],
)
def test_currency_rejects_invalid_values(code, minor_units, numeric_code):
    with pytest.raises(ValueError):
        Currency(code, minor_units, numeric_code)


def test_currency_rejects_non_string_symbol():
    with pytest.raises(TypeError):
        Currency("USD", 2, symbol=None)


def test_currencies_are_equal_by_code():
    first = Currency("USD", 2, 840, "$", "US Dollar")
    second = Currency("USD", 2)
    assert first == second
    assert hash(first) == hash(second)
    assert first != Currency("JPY", 0)
    assert first != "USD"


def test_static_currency_equals_dynamic_currency_with_same_code():
    handle = Currency("USD", 2)
    assert USD == handle
    assert handle == USD
    assert hash(USD) == hash(handle)
    assert JPY != handle
    assert USD != JPY
    assert len({USD, handle}) == 1


def test_static_currency_renders_as_code():
    assert str(USD) == "USD"
    assert repr(USD) == "<static currency USD>"


def test_static_currency_cannot_be_instantiated():
    with pytest.raises(TypeError):
        USD()


def test_static_currency_must_declare_code_and_minor_units():
    with pytest.raises(TypeError):

        class MissingMinorUnits(StaticCurrency):
            code = "MMU"


def test_static_currency_validates_and_normalizes_attributes():
    class Lowercase(StaticCurrency):
        code = " abc "
        minor_units = 1

    assert Lowercase.code == "ABC"

    with pytest.raises(ValueError):

        class TooPrecise(StaticCurrency):
            code = "TPR"
            minor_units = 30


def test_static_currency_as_dynamic():
    handle = USD.as_dynamic()
    assert isinstance(handle, Currency)
    assert handle.code == "USD"
    assert handle.minor_units == 2
    assert handle.numeric_code == 840
    assert handle.symbol == "$"
    assert handle.name == "US Dollar"


def test_currency_of_accepts_all_currency_shapes():
    handle = Currency("JPY", 0)
    assert Currency.of(handle) is handle
    assert Currency.of(JPY) == handle
    assert isinstance(Currency.of(JPY), Currency)

    class PlainCurrency:
        code = "PLC"
        minor_units = 2
        numeric_code = None
        symbol = "P"
        name = "Plain"

    converted = Currency.of(PlainCurrency())
    assert converted.code == "PLC"
    assert converted.symbol == "P"

    with pytest.raises(TypeError):
        Currency.of("USD")


def test_currency_operand_checks():
    assert is_static_currency(USD)
    assert not is_static_currency(StaticCurrency)
    assert not is_static_currency(Currency("USD", 2))
    assert is_currency_operand(USD)
    assert is_currency_operand(Currency("USD", 2))
    assert not is_currency_operand("USD")


def test_all_static_currencies_satisfy_currency_like():
    codes = [currency.code for currency in STATIC_CURRENCIES]
    assert len(codes) == len(set(codes))
    for currency in STATIC_CURRENCIES:
        assert isinstance(currency, CurrencyLike)
        assert is_static_currency(currency)
