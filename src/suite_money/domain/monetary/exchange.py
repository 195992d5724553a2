from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Generic, TypeVar

from suite_money.domain.monetary.currency import CurrencyOperand, is_currency_operand
from suite_money.utils.numeric_tools import DIVISION_CONTEXT, DecimalLike, as_decimal

F = TypeVar("F", bound=CurrencyOperand)
T = TypeVar("T", bound=CurrencyOperand)


class IncorrectExchangeRateError(ValueError):
    """Raised when an exchange rate is applied to money in a currency other than the rate's 'from' currency."""

    def __init__(self, expected_code: str, actual_code: str):
        self.expected_code = expected_code
        self.actual_code = actual_code
        super().__init__(f"The exchange rate's 'from' currency does not match the Money currency ({expected_code}, {actual_code})")


class ExchangeRate(Generic[F, T]):
    """Rate for converting amounts in $from_currency into amounts in $to_currency.

    One unit of $from_currency is worth $rate units of $to_currency. This is a single
    linear conversion; there is no rate management or triangulation.

    Attributes:
        from_currency: Currency of the amounts this rate converts.
        to_currency: Currency of the converted amounts.
        rate (Decimal): Multiplier applied to the amount.
    """

    __slots__ = ("_from_currency", "_to_currency", "_rate")

    def __init__(self, from_currency: F, to_currency: T, rate: DecimalLike):
        """Initialize an ExchangeRate.

        Raises:
            TypeError: If a currency is not a static currency class or `Currency` handle.
            ValueError: If $rate is not a positive finite number.
        """
        # Raise: both currencies must be usable as Money currencies
        if not is_currency_operand(from_currency):
            raise TypeError(f"$from_currency must be a static currency class or Currency instance, but provided value is: {from_currency!r}")
        if not is_currency_operand(to_currency):
            raise TypeError(f"$to_currency must be a static currency class or Currency instance, but provided value is: {to_currency!r}")

        # Raise: $rate must be convertible to Decimal
        try:
            decimal_rate = as_decimal(rate)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `ExchangeRate` because $rate ({rate}) cannot be converted to Decimal") from e

        # Raise: $rate must be positive and finite
        if not decimal_rate.is_finite() or decimal_rate <= 0:
            raise ValueError(f"Cannot init `ExchangeRate` because $rate ({decimal_rate}) is not a positive finite number")

        self._from_currency = from_currency
        self._to_currency = to_currency
        self._rate = decimal_rate

    @property
    def from_currency(self) -> F:
        return self._from_currency

    @property
    def to_currency(self) -> T:
        return self._to_currency

    @property
    def rate(self) -> Decimal:
        return self._rate

    def inverse(self) -> ExchangeRate[T, F]:
        """Return the rate converting back from $to_currency into $from_currency."""
        with localcontext(DIVISION_CONTEXT):
            inverse_rate = Decimal(1) / self._rate
        return ExchangeRate(self._to_currency, self._from_currency, inverse_rate)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return NotImplemented
        return self.from_currency == other.from_currency and self.to_currency == other.to_currency and self.rate == other.rate

    def __hash__(self) -> int:
        return hash((self.from_currency.code, self.to_currency.code, self.rate))

    def __str__(self) -> str:
        return f"1 {self.from_currency.code} = {self.rate} {self.to_currency.code}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.from_currency.code}, {self.to_currency.code}, {self.rate})"
