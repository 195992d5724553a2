from __future__ import annotations

from typing import Any, ClassVar, Optional, Protocol, TypeAlias, Union, runtime_checkable

# Highest number of minor units (fractional digits) a currency may declare
MAX_MINOR_UNITS = 18


@runtime_checkable
class CurrencyLike(Protocol):
    """Minimal, read-only contract any currency representation must satisfy.

    Satisfied by `Currency` handles, by static currency classes themselves (through their
    class attributes) and by any object exposing these members.

    Attributes:
        code (str): Stable, short, upper-case code (e.g., "USD"). Sole identity of a currency.
        minor_units (int): Number of fractional digits customarily used (2 for USD, 0 for JPY).
        numeric_code (int | None): ISO 4217 numeric code, if the currency has one.
        symbol (str): Display symbol (e.g., "$"). May be empty.
        name (str): Long name (e.g., "US Dollar"). May be empty.
    """

    @property
    def code(self) -> str: ...

    @property
    def minor_units(self) -> int: ...

    @property
    def numeric_code(self) -> Optional[int]: ...

    @property
    def symbol(self) -> str: ...

    @property
    def name(self) -> str: ...


def _validate_currency_fields(code: Any, minor_units: Any, numeric_code: Any, symbol: Any, name: Any) -> str:
    """Validate currency attributes and return the normalized code."""
    # Raise: $code must be a non-empty string
    if not isinstance(code, str) or not code.strip():
        raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

    # Raise: $minor_units must be an integer in the supported range
    if isinstance(minor_units, bool) or not isinstance(minor_units, int) or minor_units < 0 or minor_units > MAX_MINOR_UNITS:
        raise ValueError(f"$minor_units must be an integer between 0 and {MAX_MINOR_UNITS}, but provided value is: {minor_units}")

    # Raise: $numeric_code is optional, but must be a 3-digit number when present
    if numeric_code is not None and (isinstance(numeric_code, bool) or not isinstance(numeric_code, int) or not 0 <= numeric_code <= 999):
        raise ValueError(f"$numeric_code must be None or an integer between 0 and 999, but provided value is: {numeric_code}")

    if not isinstance(symbol, str):
        raise TypeError(f"$symbol must be a string, but provided value is: {symbol!r}")

    if not isinstance(name, str):
        raise TypeError(f"$name must be a string, but provided value is: {name!r}")

    return code.strip().upper()


class Currency:
    """Dynamic currency handle, resolved at run time.

    Two handles are the same currency iff their codes match, regardless of object identity.
    A handle also equals a `StaticCurrency` class with the same code.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        minor_units (int): Number of fractional digits (0-18).
        numeric_code (int | None): ISO 4217 numeric code.
        symbol (str): Display symbol, may be empty.
        name (str): Full currency name, may be empty.
    """

    __slots__ = ("_code", "_minor_units", "_numeric_code", "_symbol", "_name")

    def __init__(self, code: str, minor_units: int, numeric_code: Optional[int] = None, symbol: str = "", name: str = ""):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC"). Normalized to upper case.
            minor_units (int): Number of fractional digits (0-18).
            numeric_code (int | None): ISO 4217 numeric code, if any.
            symbol (str): Display symbol, may be empty.
            name (str): Full currency name, may be empty.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $symbol or $name is not a string.
        """
        self._code = _validate_currency_fields(code, minor_units, numeric_code, symbol, name)
        self._minor_units = minor_units
        self._numeric_code = numeric_code
        self._symbol = symbol
        self._name = name.strip()

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def minor_units(self) -> int:
        """Get the number of minor units."""
        return self._minor_units

    @property
    def numeric_code(self) -> Optional[int]:
        """Get the ISO numeric code."""
        return self._numeric_code

    @property
    def symbol(self) -> str:
        """Get the display symbol."""
        return self._symbol

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @classmethod
    def of(cls, currency: CurrencyLike) -> Currency:
        """Convert any currency representation into a dynamic handle.

        Args:
            currency: A `Currency` handle, a `StaticCurrency` class, or any object
                satisfying `CurrencyLike`.

        Returns:
            Currency: The handle itself, or a new handle carrying the same values.

        Raises:
            TypeError: If $currency does not satisfy `CurrencyLike`.
        """
        if isinstance(currency, Currency):
            return currency

        if is_static_currency(currency):
            return currency.as_dynamic()

        if not isinstance(currency, CurrencyLike):
            raise TypeError(f"$currency must satisfy CurrencyLike, but provided value is: {currency!r}")

        return cls(currency.code, currency.minor_units, currency.numeric_code, currency.symbol, currency.name)

    def __eq__(self, other) -> bool:
        """Check equality with another Currency or StaticCurrency class by code."""
        if isinstance(other, Currency) or is_static_currency(other):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.minor_units}, {self.numeric_code}, '{self.symbol}', '{self.name}')"


class StaticCurrencyMeta(type):
    """Metaclass of static currencies.

    Makes a static currency class behave like a value: it renders as its code and
    compares equal to dynamic handles with the same code.
    """

    def __str__(cls) -> str:
        return getattr(cls, "code", None) or cls.__name__

    def __repr__(cls) -> str:
        code = getattr(cls, "code", None)
        if code is None:
            return super().__repr__()
        return f"<static currency {code}>"

    def __eq__(cls, other) -> bool:
        if cls is other:
            return True
        if isinstance(other, Currency):
            return getattr(cls, "code", None) == other.code
        return NotImplemented

    def __hash__(cls) -> int:
        return hash(getattr(cls, "code", cls.__name__))


class StaticCurrency(metaclass=StaticCurrencyMeta):
    """Base class for static currencies.

    Each subclass is a distinct, never-instantiated marker type whose class attributes
    satisfy `CurrencyLike`. The class itself is used as the currency operand:

        class USD(StaticCurrency):
            code = "USD"
            minor_units = 2
            numeric_code = 840
            symbol = "$"
            name = "US Dollar"

        Money(1, USD)

    Money values of different static currencies have different types, so a type checker
    rejects mixing them, and at run time the operators refuse them with `TypeError`.
    """

    code: ClassVar[str]
    minor_units: ClassVar[int]
    numeric_code: ClassVar[Optional[int]] = None
    symbol: ClassVar[str] = ""
    name: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Raise: static currencies must declare at least $code and $minor_units
        if "code" not in cls.__dict__ or "minor_units" not in cls.__dict__:
            raise TypeError(f"Static currency {cls.__name__} must declare class attributes $code and $minor_units")

        cls.code = _validate_currency_fields(cls.code, cls.minor_units, cls.numeric_code, cls.symbol, cls.name)

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"Static currency {cls.__name__} is a marker type; use the class itself, not an instance")

    @classmethod
    def as_dynamic(cls) -> Currency:
        """Erase this static currency into a dynamic `Currency` handle."""
        return Currency(cls.code, cls.minor_units, cls.numeric_code, cls.symbol, cls.name)


# A currency operand accepted by `Money`: a static currency class or a dynamic handle
CurrencyOperand: TypeAlias = Union[type[StaticCurrency], Currency]


def is_static_currency(obj: Any) -> bool:
    """Check if $obj is a concrete static currency class."""
    return isinstance(obj, type) and issubclass(obj, StaticCurrency) and obj is not StaticCurrency


def is_currency_operand(obj: Any) -> bool:
    """Check if $obj can be used as the currency of a `Money`."""
    return isinstance(obj, Currency) or is_static_currency(obj)
