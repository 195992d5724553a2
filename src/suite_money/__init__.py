__version__ = "0.1.0"

from suite_money.domain.monetary.currency import Currency, CurrencyLike, StaticCurrency
from suite_money.domain.monetary.currency_map import CurrencyMap
from suite_money.domain.monetary.exchange import ExchangeRate, IncorrectExchangeRateError
from suite_money.domain.monetary.money import IncompatibleCurrenciesError, Money
from suite_money.formatting.formatter import Formatter, FormattingError, InvalidTokenError, UnterminatedTokenError
from suite_money.utils.rounding import RoundingStrategy

__all__ = [
    "Currency",
    "CurrencyLike",
    "CurrencyMap",
    "ExchangeRate",
    "Formatter",
    "FormattingError",
    "IncompatibleCurrenciesError",
    "IncorrectExchangeRateError",
    "InvalidTokenError",
    "Money",
    "RoundingStrategy",
    "StaticCurrency",
    "UnterminatedTokenError",
]
