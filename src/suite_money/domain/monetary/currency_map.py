from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from bidict import bidict

from suite_money.domain.monetary.currency import Currency, CurrencyLike

logger = logging.getLogger(__name__)


class CurrencyMap:
    """Caller-owned lookup from currency code to dynamic `Currency` handle.

    There is no process-wide registry: build a map with the currencies your application
    needs and pass it to whatever code resolves currency codes. Static currencies put in the
    map are erased to dynamic handles.

    Currencies that declare a numeric code are also indexed by it. The numeric index is a
    bidict, so two different currencies can never share one numeric code.
    """

    def __init__(self):
        self._currencies_by_code: dict[str, Currency] = {}
        self._codes_by_numeric_bidict: bidict[int, str] = bidict()

    @classmethod
    def from_collection(cls, currencies: Iterable[CurrencyLike]) -> CurrencyMap:
        """Build a map populated with all $currencies.

        Later entries replace earlier entries with the same code.

        Args:
            currencies: Dynamic handles and/or static currency classes.

        Returns:
            CurrencyMap: New map.
        """
        result = cls()
        for currency in currencies:
            result.insert(currency)
        return result

    def insert(self, currency: CurrencyLike) -> Optional[Currency]:
        """Insert $currency into the map.

        Args:
            currency: Dynamic handle or static currency class.

        Returns:
            The currency previously stored under the same code, or None.

        Raises:
            ValueError: If another currency already uses the same numeric code.
            TypeError: If $currency does not satisfy `CurrencyLike`.
        """
        handle = Currency.of(currency)
        code = handle.code
        numeric_code = handle.numeric_code

        # Raise: a numeric code identifies exactly one currency
        owner_code = self._codes_by_numeric_bidict.get(numeric_code) if numeric_code is not None else None
        if owner_code is not None and owner_code != code:
            raise ValueError(f"Cannot call `insert` because $numeric_code ({numeric_code}) of '{code}' is already used by '{owner_code}'")

        replaced = self._currencies_by_code.get(code)
        self._codes_by_numeric_bidict.inverse.pop(code, None)
        self._currencies_by_code[code] = handle
        if numeric_code is not None:
            self._codes_by_numeric_bidict.put(numeric_code, code)

        if replaced is None:
            logger.debug(f"CurrencyMap added currency '{code}'")
        else:
            logger.debug(f"CurrencyMap replaced currency '{code}'")
        return replaced

    def get(self, code: str) -> Optional[Currency]:
        """Get the currency for $code, or None if it is not in the map.

        Lookup is case-insensitive and ignores surrounding whitespace.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        return self._currencies_by_code.get(code.strip().upper())

    def get_by_numeric(self, numeric_code: int) -> Optional[Currency]:
        """Get the currency whose ISO numeric code is $numeric_code, or None."""
        code = self._codes_by_numeric_bidict.get(numeric_code)
        if code is None:
            return None
        return self._currencies_by_code[code]

    def numeric_code_for(self, code: str) -> Optional[int]:
        """Get the numeric code registered for $code, or None."""
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        return self._codes_by_numeric_bidict.inverse.get(code.strip().upper())

    def codes(self) -> list[str]:
        """Get all codes in the map, sorted."""
        return sorted(self._currencies_by_code)

    def __getitem__(self, code: str) -> Currency:
        currency = self.get(code)
        if currency is None:
            raise KeyError(f"Currency with code '{code}' not found in map. Available currencies: {self.codes()}")
        return currency

    def __contains__(self, code) -> bool:
        return isinstance(code, str) and self.get(code) is not None

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies_by_code.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.codes()})"
