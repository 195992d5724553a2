"""Static currencies for commonly used monetary units.

Each class is its own type, so `Money(1, USD)` and `Money(1, JPY)` cannot be mixed.
Use `CurrencyMap` or `iso_currency_map()` when the currency is only known at run time.
"""
from suite_money.domain.monetary.currency import StaticCurrency


# region Fiat currencies


class USD(StaticCurrency):
    code = "USD"
    minor_units = 2
    numeric_code = 840
    symbol = "$"
    name = "US Dollar"


class EUR(StaticCurrency):
    code = "EUR"
    minor_units = 2
    numeric_code = 978
    symbol = "€"
    name = "Euro"


class GBP(StaticCurrency):
    code = "GBP"
    minor_units = 2
    numeric_code = 826
    symbol = "£"
    name = "Pound Sterling"


class JPY(StaticCurrency):
    code = "JPY"
    minor_units = 0
    numeric_code = 392
    symbol = "¥"
    name = "Yen"


class CHF(StaticCurrency):
    code = "CHF"
    minor_units = 2
    numeric_code = 756
    name = "Swiss Franc"


class CAD(StaticCurrency):
    code = "CAD"
    minor_units = 2
    numeric_code = 124
    symbol = "$"
    name = "Canadian Dollar"


class AUD(StaticCurrency):
    code = "AUD"
    minor_units = 2
    numeric_code = 36
    symbol = "$"
    name = "Australian Dollar"


class CNY(StaticCurrency):
    code = "CNY"
    minor_units = 2
    numeric_code = 156
    symbol = "¥"
    name = "Yuan Renminbi"


class INR(StaticCurrency):
    code = "INR"
    minor_units = 2
    numeric_code = 356
    symbol = "₹"
    name = "Indian Rupee"


class KRW(StaticCurrency):
    code = "KRW"
    minor_units = 0
    numeric_code = 410
    symbol = "₩"
    name = "Won"


class PLN(StaticCurrency):
    code = "PLN"
    minor_units = 2
    numeric_code = 985
    symbol = "zł"
    name = "Zloty"


class CZK(StaticCurrency):
    code = "CZK"
    minor_units = 2
    numeric_code = 203
    symbol = "Kč"
    name = "Czech Koruna"


class SEK(StaticCurrency):
    code = "SEK"
    minor_units = 2
    numeric_code = 752
    symbol = "kr"
    name = "Swedish Krona"


class NOK(StaticCurrency):
    code = "NOK"
    minor_units = 2
    numeric_code = 578
    symbol = "kr"
    name = "Norwegian Krone"


class DKK(StaticCurrency):
    code = "DKK"
    minor_units = 2
    numeric_code = 208
    symbol = "kr"
    name = "Danish Krone"


class BHD(StaticCurrency):
    code = "BHD"
    minor_units = 3
    numeric_code = 48
    name = "Bahraini Dinar"


class KWD(StaticCurrency):
    code = "KWD"
    minor_units = 3
    numeric_code = 414
    name = "Kuwaiti Dinar"


class XXX(StaticCurrency):
    """ISO 4217 code for transactions where no currency is involved."""

    code = "XXX"
    minor_units = 0
    numeric_code = 999
    name = "No currency"


# endregion

# region Crypto currencies (not part of ISO 4217)


class BTC(StaticCurrency):
    code = "BTC"
    minor_units = 8
    symbol = "₿"
    name = "Bitcoin"


class ETH(StaticCurrency):
    code = "ETH"
    minor_units = 18
    symbol = "Ξ"
    name = "Ethereum"


class USDT(StaticCurrency):
    code = "USDT"
    minor_units = 6
    name = "Tether"


# endregion

# region Commodities


class XAU(StaticCurrency):
    code = "XAU"
    minor_units = 4
    numeric_code = 959
    name = "Gold"


class XAG(StaticCurrency):
    code = "XAG"
    minor_units = 4
    numeric_code = 961
    name = "Silver"


# endregion

STATIC_CURRENCIES: tuple[type[StaticCurrency], ...] = (
    USD, EUR, GBP, JPY, CHF, CAD, AUD, CNY, INR, KRW, PLN, CZK, SEK, NOK, DKK, BHD, KWD, XXX,
    BTC, ETH, USDT,
    XAU, XAG,
)
