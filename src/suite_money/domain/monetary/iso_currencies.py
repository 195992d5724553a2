"""ISO 4217 currency table.

Data as published by the ISO 4217 maintenance agency on 2024-06-25. Symbols are the
commonly used display glyphs; currencies without a distinctive glyph have an empty symbol
and are rendered by code.
"""
from __future__ import annotations

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_map import CurrencyMap

# ISO 4217 assigns no minor unit to precious metals; amounts in troy ounces keep 4 fractional digits
PRECIOUS_METAL_MINOR_UNITS = 4

# (code, numeric code, minor units, symbol, name)
ISO_CURRENCY_TABLE: tuple[tuple[str, int, int, str, str], ...] = (
    ("AED", 784, 2, "", "UAE Dirham"),
    ("AFN", 971, 2, "؋", "Afghani"),
    ("ALL", 8, 2, "Lek", "Lek"),
    ("AMD", 51, 2, "", "Armenian Dram"),
    ("ANG", 532, 2, "ƒ", "Netherlands Antillean Guilder"),
    ("AOA", 973, 2, "", "Kwanza"),
    ("ARS", 32, 2, "$", "Argentine Peso"),
    ("AUD", 36, 2, "$", "Australian Dollar"),
    ("AWG", 533, 2, "ƒ", "Aruban Florin"),
    ("AZN", 944, 2, "₼", "Azerbaijan Manat"),
    ("BAM", 977, 2, "KM", "Convertible Mark"),
    ("BBD", 52, 2, "$", "Barbados Dollar"),
    ("BDT", 50, 2, "", "Taka"),
    ("BGN", 975, 2, "лв", "Bulgarian Lev"),
    ("BHD", 48, 3, "", "Bahraini Dinar"),
    ("BIF", 108, 0, "", "Burundi Franc"),
    ("BMD", 60, 2, "$", "Bermudian Dollar"),
    ("BND", 96, 2, "$", "Brunei Dollar"),
    ("BOB", 68, 2, "$b", "Boliviano"),
    ("BOV", 984, 2, "", "Mvdol"),
    ("BRL", 986, 2, "R$", "Brazilian Real"),
    ("BSD", 44, 2, "$", "Bahamian Dollar"),
    ("BTN", 64, 2, "", "Ngultrum"),
    ("BWP", 72, 2, "P", "Pula"),
    ("BYN", 933, 2, "Br", "Belarusian Ruble"),
    ("BZD", 84, 2, "BZ$", "Belize Dollar"),
    ("CAD", 124, 2, "$", "Canadian Dollar"),
    ("CDF", 976, 2, "", "Congolese Franc"),
    ("CHE", 947, 2, "", "WIR Euro"),
    ("CHF", 756, 2, "CHF", "Swiss Franc"),
    ("CHW", 948, 2, "", "WIR Franc"),
    ("CLF", 990, 4, "", "Unidad de Fomento"),
    ("CLP", 152, 0, "$", "Chilean Peso"),
    ("CNY", 156, 2, "¥", "Yuan Renminbi"),
    ("COP", 170, 2, "$", "Colombian Peso"),
    ("COU", 970, 2, "", "Unidad de Valor Real"),
    ("CRC", 188, 2, "₡", "Costa Rican Colon"),
    ("CUC", 931, 2, "", "Peso Convertible"),
    ("CUP", 192, 2, "₱", "Cuban Peso"),
    ("CVE", 132, 2, "", "Cabo Verde Escudo"),
    ("CZK", 203, 2, "Kč", "Czech Koruna"),
    ("DJF", 262, 0, "", "Djibouti Franc"),
    ("DKK", 208, 2, "kr", "Danish Krone"),
    ("DOP", 214, 2, "RD$", "Dominican Peso"),
    ("DZD", 12, 2, "", "Algerian Dinar"),
    ("EGP", 818, 2, "£", "Egyptian Pound"),
    ("ERN", 232, 2, "", "Nakfa"),
    ("ETB", 230, 2, "", "Ethiopian Birr"),
    ("EUR", 978, 2, "€", "Euro"),
    ("FJD", 242, 2, "$", "Fiji Dollar"),
    ("FKP", 238, 2, "£", "Falkland Islands Pound"),
    ("GBP", 826, 2, "£", "Pound Sterling"),
    ("GEL", 981, 2, "", "Lari"),
    ("GHS", 936, 2, "¢", "Ghana Cedi"),
    ("GIP", 292, 2, "£", "Gibraltar Pound"),
    ("GMD", 270, 2, "", "Dalasi"),
    ("GNF", 324, 0, "", "Guinean Franc"),
    ("GTQ", 320, 2, "Q", "Quetzal"),
    ("GYD", 328, 2, "$", "Guyana Dollar"),
    ("HKD", 344, 2, "$", "Hong Kong Dollar"),
    ("HNL", 340, 2, "L", "Lempira"),
    ("HTG", 332, 2, "", "Gourde"),
    ("HUF", 348, 2, "Ft", "Forint"),
    ("IDR", 360, 2, "Rp", "Rupiah"),
    ("ILS", 376, 2, "₪", "New Israeli Sheqel"),
    ("INR", 356, 2, "₹", "Indian Rupee"),
    ("IQD", 368, 3, "", "Iraqi Dinar"),
    ("IRR", 364, 2, "﷼", "Iranian Rial"),
    ("ISK", 352, 0, "kr", "Iceland Krona"),
    ("JMD", 388, 2, "J$", "Jamaican Dollar"),
    ("JOD", 400, 3, "", "Jordanian Dinar"),
    ("JPY", 392, 0, "¥", "Yen"),
    ("KES", 404, 2, "", "Kenyan Shilling"),
    ("KGS", 417, 2, "лв", "Som"),
    ("KHR", 116, 2, "៛", "Riel"),
    ("KMF", 174, 0, "", "Comorian Franc "),
    ("KPW", 408, 2, "₩", "North Korean Won"),
    ("KRW", 410, 0, "₩", "Won"),
    ("KWD", 414, 3, "", "Kuwaiti Dinar"),
    ("KYD", 136, 2, "$", "Cayman Islands Dollar"),
    ("KZT", 398, 2, "лв", "Tenge"),
    ("LAK", 418, 2, "₭", "Lao Kip"),
    ("LBP", 422, 2, "£", "Lebanese Pound"),
    ("LKR", 144, 2, "₨", "Sri Lanka Rupee"),
    ("LRD", 430, 2, "$", "Liberian Dollar"),
    ("LSL", 426, 2, "", "Loti"),
    ("LYD", 434, 3, "", "Libyan Dinar"),
    ("MAD", 504, 2, "", "Moroccan Dirham"),
    ("MDL", 498, 2, "", "Moldovan Leu"),
    ("MGA", 969, 2, "", "Malagasy Ariary"),
    ("MKD", 807, 2, "ден", "Denar"),
    ("MMK", 104, 2, "", "Kyat"),
    ("MNT", 496, 2, "₮", "Tugrik"),
    ("MOP", 446, 2, "", "Pataca"),
    ("MRU", 929, 2, "", "Ouguiya"),
    ("MUR", 480, 2, "₨", "Mauritius Rupee"),
    ("MVR", 462, 2, "", "Rufiyaa"),
    ("MWK", 454, 2, "", "Malawi Kwacha"),
    ("MXN", 484, 2, "$", "Mexican Peso"),
    ("MXV", 979, 2, "", "Mexican Unidad de Inversion (UDI)"),
    ("MYR", 458, 2, "RM", "Malaysian Ringgit"),
    ("MZN", 943, 2, "MT", "Mozambique Metical"),
    ("NAD", 516, 2, "$", "Namibia Dollar"),
    ("NGN", 566, 2, "₦", "Naira"),
    ("NIO", 558, 2, "C$", "Cordoba Oro"),
    ("NOK", 578, 2, "kr", "Norwegian Krone"),
    ("NPR", 524, 2, "₨", "Nepalese Rupee"),
    ("NZD", 554, 2, "$", "New Zealand Dollar"),
    ("OMR", 512, 3, "﷼", "Rial Omani"),
    ("PAB", 590, 2, "B/.", "Balboa"),
    ("PEN", 604, 2, "S/.", "Sol"),
    ("PGK", 598, 2, "", "Kina"),
    ("PHP", 608, 2, "₱", "Philippine Peso"),
    ("PKR", 586, 2, "₨", "Pakistan Rupee"),
    ("PLN", 985, 2, "zł", "Zloty"),
    ("PYG", 600, 0, "Gs", "Guarani"),
    ("QAR", 634, 2, "﷼", "Qatari Rial"),
    ("RON", 946, 2, "lei", "Romanian Leu"),
    ("RSD", 941, 2, "Дин.", "Serbian Dinar"),
    ("RUB", 643, 2, "₽", "Russian Ruble"),
    ("RWF", 646, 0, "", "Rwanda Franc"),
    ("SAR", 682, 2, "﷼", "Saudi Riyal"),
    ("SBD", 90, 2, "$", "Solomon Islands Dollar"),
    ("SCR", 690, 2, "₨", "Seychelles Rupee"),
    ("SDG", 938, 2, "", "Sudanese Pound"),
    ("SEK", 752, 2, "kr", "Swedish Krona"),
    ("SGD", 702, 2, "$", "Singapore Dollar"),
    ("SHP", 654, 2, "£", "Saint Helena Pound"),
    ("SLE", 925, 2, "", "Leone"),
    ("SOS", 706, 2, "S", "Somali Shilling"),
    ("SRD", 968, 2, "$", "Surinam Dollar"),
    ("SSP", 728, 2, "", "South Sudanese Pound"),
    ("STN", 930, 2, "", "Dobra"),
    ("SVC", 222, 2, "$", "El Salvador Colon"),
    ("SYP", 760, 2, "£", "Syrian Pound"),
    ("SZL", 748, 2, "", "Lilangeni"),
    ("THB", 764, 2, "฿", "Baht"),
    ("TJS", 972, 2, "", "Somoni"),
    ("TMT", 934, 2, "", "Turkmenistan New Manat"),
    ("TND", 788, 3, "", "Tunisian Dinar"),
    ("TOP", 776, 2, "", "Pa’anga"),
    ("TRY", 949, 2, "₺", "Turkish Lira"),
    ("TTD", 780, 2, "TT$", "Trinidad and Tobago Dollar"),
    ("TWD", 901, 2, "NT$", "New Taiwan Dollar"),
    ("TZS", 834, 2, "", "Tanzanian Shilling"),
    ("UAH", 980, 2, "₴", "Hryvnia"),
    ("UGX", 800, 0, "", "Uganda Shilling"),
    ("USD", 840, 2, "$", "US Dollar"),
    ("USN", 997, 2, "", "US Dollar (Next day)"),
    ("UYI", 940, 0, "", "Uruguay Peso en Unidades Indexadas (UI)"),
    ("UYU", 858, 2, "$U", "Peso Uruguayo"),
    ("UYW", 927, 4, "", "Unidad Previsional"),
    ("UZS", 860, 2, "лв", "Uzbekistan Sum"),
    ("VED", 926, 2, "", "Bolívar Soberano"),
    ("VES", 928, 2, "", "Bolívar Soberano"),
    ("VND", 704, 0, "₫", "Dong"),
    ("VUV", 548, 0, "", "Vatu"),
    ("WST", 882, 2, "", "Tala"),
    ("XAF", 950, 0, "", "CFA Franc BEAC"),
    ("XAG", 961, PRECIOUS_METAL_MINOR_UNITS, "", "Silver"),
    ("XAU", 959, PRECIOUS_METAL_MINOR_UNITS, "", "Gold"),
    ("XBA", 955, 0, "", "Bond Markets Unit European Composite Unit (EURCO)"),
    ("XBB", 956, 0, "", "Bond Markets Unit European Monetary Unit (E.M.U.-6)"),
    ("XBC", 957, 0, "", "Bond Markets Unit European Unit of Account 9 (E.U.A.-9)"),
    ("XBD", 958, 0, "", "Bond Markets Unit European Unit of Account 17 (E.U.A.-17)"),
    ("XCD", 951, 2, "$", "East Caribbean Dollar"),
    ("XDR", 960, 0, "", "SDR (Special Drawing Right)"),
    ("XOF", 952, 0, "", "CFA Franc BCEAO"),
    ("XPD", 964, PRECIOUS_METAL_MINOR_UNITS, "", "Palladium"),
    ("XPF", 953, 0, "", "CFP Franc"),
    ("XPT", 962, PRECIOUS_METAL_MINOR_UNITS, "", "Platinum"),
    ("XSU", 994, 0, "", "Sucre"),
    ("XTS", 963, 0, "", "Codes specifically reserved for testing purposes"),
    ("XUA", 965, 0, "", "ADB Unit of Account"),
    ("XXX", 999, 0, "", "The codes assigned for transactions where no currency is involved"),
    ("YER", 886, 2, "﷼", "Yemeni Rial"),
    ("ZAR", 710, 2, "R", "Rand"),
    ("ZMW", 967, 2, "", "Zambian Kwacha"),
    ("ZWG", 924, 2, "", "Zimbabwe Gold"),
    ("ZWL", 932, 2, "", "Zimbabwe Dollar"),
)


def iso_currencies() -> list[Currency]:
    """Build dynamic handles for every currency in the ISO 4217 table."""
    return [Currency(code, minor_units, numeric_code, symbol, name) for code, numeric_code, minor_units, symbol, name in ISO_CURRENCY_TABLE]


def iso_currency_map() -> CurrencyMap:
    """Build a new `CurrencyMap` holding every ISO 4217 currency.

    Each call returns a fresh map owned by the caller; build it once at startup and treat
    it as read-only when sharing it between threads.
    """
    return CurrencyMap.from_collection(iso_currencies())
