from __future__ import annotations

import logging
import operator
from decimal import Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING, Any, Callable, Generic, Mapping, Optional, TypeVar, overload

from suite_money.domain.monetary.currency import Currency, CurrencyOperand, is_currency_operand, is_static_currency
from suite_money.domain.monetary.exchange import ExchangeRate, IncorrectExchangeRateError
from suite_money.formatting.formatter import DEFAULT_FORMATTER, Formatter
from suite_money.formatting.locale_formatter import DEFAULT_LOCALE, format_locale
from suite_money.utils.numeric_tools import DIVISION_CONTEXT, EXACT_CONTEXT, INT64_DIGITS, DecimalLike, as_decimal, fits_int64
from suite_money.utils.rounding import RoundingStrategy, round_decimal, shift_decimal

if TYPE_CHECKING:
    from babel import Locale

    from suite_money.domain.monetary.currency_map import CurrencyMap

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=CurrencyOperand)
T = TypeVar("T", bound=CurrencyOperand)


class IncompatibleCurrenciesError(ValueError):
    """Raised when two Money values with different currency codes are combined or ordered.

    Only happens when at least one operand has a dynamic `Currency`; static currencies of
    different types are refused by the operators themselves (`TypeError`).
    """

    def __init__(self, left_code: str, right_code: str):
        self.left_code = left_code
        self.right_code = right_code
        super().__init__(f"The money instances have incompatible currencies ({left_code}, {right_code})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, IncompatibleCurrenciesError):
            return NotImplemented
        return (self.left_code, self.right_code) == (other.left_code, other.right_code)

    def __hash__(self) -> int:
        return hash((self.left_code, self.right_code))


class Money(Generic[C]):
    """Represents a monetary amount with currency.

    The currency is either a static currency class (`Money(1, USD)`) or a dynamic
    `Currency` handle (`Money(1, currencies["USD"])`).

    - Static and static: only the same class can be combined; anything else is refused
      with `TypeError` and is flagged by a type checker.
    - Any combination involving a dynamic handle compares currency codes and raises
      `IncompatibleCurrenciesError` when they differ.
    - Results keep the left operand's currency representation.

    Money is immutable. Every operation returns a new instance. The amount keeps whatever
    precision it was given until it is explicitly rounded.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: C):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar).
            currency: Static currency class or `Currency` handle.

        Raises:
            ValueError: If amount cannot be converted to a finite Decimal.
            TypeError: If currency is neither a static currency class nor a Currency instance.
        """
        # Raise: currency must be a static currency class or a Currency handle
        if not is_currency_operand(currency):
            raise TypeError(f"$currency must be a static currency class or Currency instance, but provided value is: {currency!r}")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) cannot be converted to Decimal") from e

        # Raise: NaN and infinities are not amounts of money
        if not decimal_amount.is_finite():
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) is not finite")

        self._amount = decimal_amount
        self._currency = currency

    @classmethod
    def from_minor_units(cls, minor_units: int, currency: C) -> Money[C]:
        """Construct Money from a count of currency minor units.

        100 USD minor units is 1 USD, but 100 JPY minor units is 100 JPY.

        Args:
            minor_units: Integer count of minor units.
            currency: Static currency class or `Currency` handle.

        Returns:
            Money: Amount equal to $minor_units × 10^-currency.minor_units.

        Raises:
            TypeError: If $minor_units is not an int.
        """
        # Raise: only whole minor units can be counted
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise TypeError(f"$minor_units must be an int, but provided value is: {minor_units!r}")

        if not is_currency_operand(currency):
            raise TypeError(f"$currency must be a static currency class or Currency instance, but provided value is: {currency!r}")

        return cls(shift_decimal(Decimal(minor_units), -currency.minor_units), currency)

    @classmethod
    def zero(cls, currency: C) -> Money[C]:
        """Construct a zero amount in $currency."""
        return cls(Decimal(0), currency)

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> C:
        """Get the currency (static currency class or `Currency` handle)."""
        return self._currency

    @property
    def is_static(self) -> bool:
        """True if the currency is a static currency class."""
        return is_static_currency(self._currency)

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        """True if the sign of the amount is positive (zero included)."""
        return not self._amount.is_signed()

    def is_negative(self) -> bool:
        """True if the sign of the amount is negative (negative zero included)."""
        return self._amount.is_signed()

    # endregion

    # region Currency compatibility

    def _is_static_mismatch(self, other: Money[Any]) -> bool:
        return is_static_currency(self._currency) and is_static_currency(other._currency) and self._currency is not other._currency

    def is_compatible_with(self, other: Money[Any]) -> bool:
        """Check if $other may be combined with this Money.

        Two static currencies are compatible only if they are the same class; any pair
        involving a dynamic handle is compatible when the codes match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")

        if self._is_static_mismatch(other):
            return False
        return self._currency.code == other._currency.code

    def _combine(self, other: Money[Any], operation: Callable[[Decimal, Decimal], Decimal]) -> Money[C]:
        """Apply $operation to both amounts after checking currency compatibility.

        Shared by every Money-with-Money operator so that all operand shapes behave the same.
        The caller has already refused mismatched static currencies.
        """
        left_code = self._currency.code
        right_code = other._currency.code
        if left_code != right_code:
            raise IncompatibleCurrenciesError(left_code, right_code)

        with localcontext(EXACT_CONTEXT):
            amount = operation(self._amount, other._amount)
        return Money(amount, self._currency)

    # endregion

    # region Comparison

    def __eq__(self, other) -> bool:
        """Check equality with another Money object.

        Static Money of the same class compares amounts. Any comparison involving a dynamic
        handle additionally requires the same currency code.
        """
        if not isinstance(other, Money):
            return NotImplemented
        if self._is_static_mismatch(other):
            return NotImplemented
        return self._amount == other._amount and self._currency.code == other._currency.code

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def partial_compare(self, other: Money[Any]) -> Optional[int]:
        """Order this Money against $other.

        Returns:
            -1, 0 or 1 when the currencies are compatible, None when they are not.
            There is no order across currencies.
        """
        if not self.is_compatible_with(other):
            return None
        if self._amount < other._amount:
            return -1
        if self._amount > other._amount:
            return 1
        return 0

    def _ordered(self, other) -> Optional[int]:
        if not isinstance(other, Money) or self._is_static_mismatch(other):
            return None

        result = self.partial_compare(other)
        if result is None:
            raise IncompatibleCurrenciesError(self._currency.code, other._currency.code)
        return result

    def __lt__(self, other) -> bool:
        result = self._ordered(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other) -> bool:
        result = self._ordered(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other) -> bool:
        result = self._ordered(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other) -> bool:
        result = self._ordered(other)
        return NotImplemented if result is None else result >= 0

    # endregion

    # region Arithmetic with Money

    @overload
    def __add__(self, other: Money[C]) -> Money[C]: ...

    @overload
    def __add__(self, other: Money[Currency]) -> Money[C]: ...

    @overload
    def __add__(self: Money[Currency], other: Money[Any]) -> Money[Currency]: ...

    def __add__(self, other):
        """Add two Money objects of the same currency."""
        if not isinstance(other, Money) or self._is_static_mismatch(other):
            return NotImplemented
        return self._combine(other, operator.add)

    @overload
    def __sub__(self, other: Money[C]) -> Money[C]: ...

    @overload
    def __sub__(self, other: Money[Currency]) -> Money[C]: ...

    @overload
    def __sub__(self: Money[Currency], other: Money[Any]) -> Money[Currency]: ...

    def __sub__(self, other):
        """Subtract two Money objects of the same currency."""
        if not isinstance(other, Money) or self._is_static_mismatch(other):
            return NotImplemented
        return self._combine(other, operator.sub)

    # endregion

    # region Arithmetic with scalars

    def _scalar(self, other) -> Optional[Decimal]:
        # Money × Money has no meaning ("dollars squared"); only bare numbers scale an amount
        if isinstance(other, (Money, bool)):
            return None
        try:
            return as_decimal(other)
        except (ValueError, TypeError, InvalidOperation):
            return None

    def __mul__(self, other) -> Money[C]:
        """Multiply Money by number (returns Money)."""
        factor = self._scalar(other)
        if factor is None:
            return NotImplemented
        with localcontext(EXACT_CONTEXT):
            amount = self._amount * factor
        return Money(amount, self._currency)

    def __rmul__(self, other) -> Money[C]:
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other) -> Money[C]:
        """Divide Money by number (returns Money)."""
        divisor = self._scalar(other)
        if divisor is None:
            return NotImplemented
        if divisor.is_zero():
            raise ZeroDivisionError("Cannot divide Money by zero")
        # Non-terminating quotients keep DIVISION_PRECISION significant digits
        with localcontext(DIVISION_CONTEXT):
            amount = self._amount / divisor
        return Money(amount, self._currency)

    def __mod__(self, other) -> Money[C]:
        """Remainder of Money divided by number; the sign follows the amount."""
        divisor = self._scalar(other)
        if divisor is None:
            return NotImplemented
        if divisor.is_zero():
            raise ZeroDivisionError("Cannot compute remainder of Money divided by zero")
        with localcontext(EXACT_CONTEXT):
            amount = self._amount % divisor
        return Money(amount, self._currency)

    def __neg__(self) -> Money[C]:
        return Money(self._amount.copy_negate(), self._currency)

    def __pos__(self) -> Money[C]:
        return Money(self._amount, self._currency)

    def __abs__(self) -> Money[C]:
        return Money(self._amount.copy_abs(), self._currency)

    # endregion

    # region Rounding and minor units

    def round(self, decimal_places: int, strategy: RoundingStrategy = RoundingStrategy.HALF_EVEN) -> Money[C]:
        """Return a new Money rounded to $decimal_places using $strategy.

        Raises:
            ValueError: If $decimal_places is not a non-negative int.
        """
        return Money(round_decimal(self._amount, decimal_places, strategy), self._currency)

    def round_to_currency_precision(self, strategy: RoundingStrategy = RoundingStrategy.HALF_EVEN) -> Money[C]:
        """Return a new Money rounded to the currency's number of minor units."""
        return self.round(self._currency.minor_units, strategy)

    def to_minor_units(self, strategy: RoundingStrategy = RoundingStrategy.HALF_EVEN) -> Optional[int]:
        """Return the amount as an integer count of currency minor units.

        The amount is first rounded to the currency's minor units with $strategy, so
        10.45 USD gives 1045 and 10.45 JPY gives 10. Suitable for payment processors.

        Returns:
            The count, or None if it does not fit in a signed 64-bit integer.
        """
        minor_units = self._currency.minor_units
        # Check: at least 10^19 minor units never fit, so skip building a huge integer
        if not self._amount.is_zero() and self._amount.adjusted() + minor_units >= INT64_DIGITS:
            return None

        count = int(shift_decimal(round_decimal(self._amount, minor_units, strategy), minor_units))
        if not fits_int64(count):
            return None
        return count

    # endregion

    # region Conversion

    def convert(self, exchange_rate: ExchangeRate[Any, T]) -> Money[T]:
        """Convert into the exchange rate's 'to' currency.

        Args:
            exchange_rate: Rate whose 'from' currency has the same code as this Money.

        Returns:
            Money: amount × rate in $exchange_rate.to_currency. The result is not rounded.

        Raises:
            IncorrectExchangeRateError: If the rate converts from a different currency.
        """
        if not isinstance(exchange_rate, ExchangeRate):
            raise TypeError(f"$exchange_rate must be an ExchangeRate instance, but provided value is: {exchange_rate!r}")

        expected_code = exchange_rate.from_currency.code
        if expected_code != self._currency.code:
            raise IncorrectExchangeRateError(expected_code, self._currency.code)

        with localcontext(EXACT_CONTEXT):
            converted_amount = self._amount * exchange_rate.rate
        result = Money(converted_amount, exchange_rate.to_currency)
        logger.debug(f"Converted {self} into {result} using rate {exchange_rate}")
        return result

    # endregion

    # region Formatting

    def format(self, formatter: Optional[Formatter] = None) -> str:
        """Render with $formatter (default: `DEFAULT_FORMATTER`), e.g. "$1,234.50".

        Raises:
            FormattingError: If the selected template is malformed.
        """
        return (formatter or DEFAULT_FORMATTER).format(self._amount, self._currency)

    def format_locale(self, locale: str | Locale = DEFAULT_LOCALE) -> str:
        """Render using CLDR conventions of $locale, rounded to the currency's minor units."""
        return format_locale(self._amount, self._currency.minor_units, self._currency.code, locale)

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion

    # region Serialization

    def to_dict(self) -> dict[str, str]:
        """Return `{"amount": "<canonical decimal>", "currency": "<code>"}`.

        The amount is a string so no precision is lost. To restore a value, resolve the code
        into a currency and call `Money(Decimal(amount), currency)`, or use `from_dict`.
        """
        return {"amount": str(self._amount), "currency": self._currency.code}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], currencies: CurrencyMap) -> Money[Currency]:
        """Rebuild Money from `to_dict` output, resolving the code through $currencies.

        Raises:
            ValueError: If a key is missing, the amount is invalid or the code is unknown.
        """
        try:
            amount = data["amount"]
            code = data["currency"]
        except KeyError as e:
            raise ValueError(f"Cannot call `from_dict` because key {e} is missing in $data ({dict(data)})") from e

        return cls(amount, cls._resolve_currency(code, currencies, "from_dict"))

    @classmethod
    def from_str(cls, value_str: str, currencies: CurrencyMap) -> Money[Currency]:
        """Parse Money from string like '1000.50 USD', resolving the code through $currencies.

        Raises:
            ValueError: If string format is invalid or the code is unknown.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        # Split by whitespace
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts

        try:
            amount = Decimal(amount_part)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        return cls(amount, cls._resolve_currency(currency_part, currencies, "from_str"))

    @staticmethod
    def _resolve_currency(code: Any, currencies: CurrencyMap, method_name: str) -> Currency:
        currency = currencies.get(code) if isinstance(code, str) else None
        if currency is None:
            raise ValueError(f"Cannot call `{method_name}` because currency code '{code}' was not found in $currencies")
        return currency

    # endregion
