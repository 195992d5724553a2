from __future__ import annotations

from decimal import (
    Decimal,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum

from suite_money.utils.numeric_tools import EXACT_CONTEXT


class RoundingStrategy(Enum):
    """Tie-breaking rules for rounding monetary amounts.

    Each member is backed by the matching `decimal` rounding mode, so results match
    standard decimal rounding on ties exactly.
    """

    HALF_EVEN = ROUND_HALF_EVEN  # banker's rounding, the default everywhere
    HALF_TOWARD_ZERO = ROUND_HALF_DOWN
    HALF_AWAY_FROM_ZERO = ROUND_HALF_UP
    TOWARD_ZERO = ROUND_DOWN
    AWAY_FROM_ZERO = ROUND_UP
    TOWARD_NEGATIVE_INFINITY = ROUND_FLOOR
    TOWARD_POSITIVE_INFINITY = ROUND_CEILING

    @property
    def decimal_rounding(self) -> str:
        """Get the `decimal` module rounding constant."""
        return self.value


def round_decimal(value: Decimal, decimal_places: int, strategy: RoundingStrategy = RoundingStrategy.HALF_EVEN) -> Decimal:
    """Round $value to exactly $decimal_places fractional digits.

    The result always carries exactly $decimal_places digits after the decimal point,
    so `Decimal("1.5")` rounded to 2 places becomes `Decimal("1.50")`.

    Args:
        value: Finite decimal to round.
        decimal_places: Number of fractional digits to keep (>= 0).
        strategy: Tie-breaking rule.

    Returns:
        Rounded decimal.

    Raises:
        ValueError: If $decimal_places is not a non-negative int or $value is not finite.
        TypeError: If $strategy is not a RoundingStrategy.
    """
    # Raise: $decimal_places must be a non-negative int
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places < 0:
        raise ValueError(f"Cannot call `round_decimal` because $decimal_places ({decimal_places}) is not a non-negative integer")

    # Raise: $strategy must be a RoundingStrategy
    if not isinstance(strategy, RoundingStrategy):
        raise TypeError(f"Cannot call `round_decimal` because $strategy ({strategy}) is not a RoundingStrategy")

    # Raise: only finite values can be rounded
    if not value.is_finite():
        raise ValueError(f"Cannot call `round_decimal` because $value ({value}) is not finite")

    exponent = Decimal(1).scaleb(-decimal_places, EXACT_CONTEXT)
    return value.quantize(exponent, rounding=strategy.decimal_rounding, context=EXACT_CONTEXT)


def shift_decimal(value: Decimal, places: int) -> Decimal:
    """Multiply $value by 10**$places without any precision loss."""
    return value.scaleb(places, EXACT_CONTEXT)
