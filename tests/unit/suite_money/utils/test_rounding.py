from decimal import Decimal, ROUND_HALF_EVEN

import pytest

from suite_money.utils.numeric_tools import INT64_MAX, INT64_MIN, as_decimal, fits_int64
from suite_money.utils.rounding import RoundingStrategy, round_decimal, shift_decimal


@pytest.mark.parametrize(
    "strategy, expected",
    [
        # Results for 2.5, -2.5, 2.9, 2.1, -2.1
        (RoundingStrategy.HALF_EVEN, ["2", "-2", "3", "2", "-2"]),
        (RoundingStrategy.HALF_TOWARD_ZERO, ["2", "-2", "3", "2", "-2"]),
        (RoundingStrategy.HALF_AWAY_FROM_ZERO, ["3", "-3", "3", "2", "-2"]),
        (RoundingStrategy.TOWARD_ZERO, ["2", "-2", "2", "2", "-2"]),
        (RoundingStrategy.AWAY_FROM_ZERO, ["3", "-3", "3", "3", "-3"]),
        (RoundingStrategy.TOWARD_NEGATIVE_INFINITY, ["2", "-3", "2", "2", "-3"]),
        (RoundingStrategy.TOWARD_POSITIVE_INFINITY, ["3", "-2", "3", "3", "-2"]),
    ],
)
def test_round_decimal_strategies(strategy, expected):
    values = ["2.5", "-2.5", "2.9", "2.1", "-2.1"]
    results = [round_decimal(Decimal(value), 0, strategy) for value in values]
    assert results == [Decimal(value) for value in expected]


def test_half_even_ties_go_to_even_digit():
    assert round_decimal(Decimal("3.5"), 0) == Decimal("4")
    assert round_decimal(Decimal("0.125"), 2) == Decimal("0.12")
    assert round_decimal(Decimal("0.135"), 2) == Decimal("0.14")


def test_round_decimal_has_fixed_scale():
    rounded = round_decimal(Decimal("1.5"), 2)
    assert str(rounded) == "1.50"
    assert str(round_decimal(Decimal("10"), 0)) == "10"
    assert str(round_decimal(Decimal("1E+2"), 1)) == "100.0"


def test_round_decimal_is_idempotent():
    once = round_decimal(Decimal("123.4567"), 2, RoundingStrategy.AWAY_FROM_ZERO)
    assert round_decimal(once, 2, RoundingStrategy.AWAY_FROM_ZERO) == once
    assert once == Decimal("123.46")


def test_round_decimal_beyond_default_context_precision():
    value = Decimal("123456789012345678901234567890123456789.987654321")
    assert str(round_decimal(value, 4)) == "123456789012345678901234567890123456789.9877"


@pytest.mark.parametrize("decimal_places", [-1, 1.5, True, "2"])
def test_round_decimal_rejects_invalid_decimal_places(decimal_places):
    with pytest.raises(ValueError):
        round_decimal(Decimal("1.5"), decimal_places)


def test_round_decimal_rejects_invalid_strategy_and_values():
    with pytest.raises(TypeError):
        round_decimal(Decimal("1.5"), 0, ROUND_HALF_EVEN)
    with pytest.raises(ValueError):
        round_decimal(Decimal("Infinity"), 0)
    with pytest.raises(ValueError):
        round_decimal(Decimal("NaN"), 0)


def test_decimal_rounding_constant():
    assert RoundingStrategy.HALF_EVEN.decimal_rounding == ROUND_HALF_EVEN


def test_shift_decimal():
    assert shift_decimal(Decimal("12.34"), 2) == Decimal(1234)
    assert shift_decimal(Decimal(1234), -2) == Decimal("12.34")
    assert shift_decimal(Decimal("123456789012345678901234567890.12"), 2) == Decimal("12345678901234567890123456789012")


def test_as_decimal_converts_floats_via_string():
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal("1.25") == Decimal("1.25")
    value = Decimal("3")
    assert as_decimal(value) is value


def test_fits_int64():
    assert fits_int64(INT64_MAX)
    assert fits_int64(INT64_MIN)
    assert not fits_int64(INT64_MAX + 1)
    assert not fits_int64(INT64_MIN - 1)
