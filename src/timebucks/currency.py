"""
TimeBucks Currencies

Fixed currency codes and the symbol tables used by the notation grammar.
"""

from enum import Enum


class Currency(str, Enum):
    """Supported currency codes."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"
    CNY = "CNY"


# Symbol -> code, used when decoding notation
SYMBOL_TO_CURRENCY: dict[str, Currency] = {
    "$": Currency.USD,
    "€": Currency.EUR,
    "£": Currency.GBP,
    "¥": Currency.JPY,
    "C$": Currency.CAD,
    "A$": Currency.AUD,
    "CHF": Currency.CHF,
}

# Code -> symbol, used when encoding. CNY shares the yen sign.
CURRENCY_TO_SYMBOL: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.JPY: "¥",
    Currency.CAD: "C$",
    Currency.AUD: "A$",
    Currency.CHF: "CHF",
    Currency.CNY: "¥",
}

# Longest symbols first so "C$" and "A$" win over a lone "$"
SYMBOLS_LONGEST_FIRST: tuple[str, ...] = tuple(
    sorted(SYMBOL_TO_CURRENCY, key=len, reverse=True)
)


def symbol_for(currency: Currency | str) -> str:
    """Return the notation symbol for a currency code."""
    return CURRENCY_TO_SYMBOL[Currency(currency)]


def currency_for_symbol(symbol: str) -> Currency | None:
    """Return the currency code for a symbol, or None if unsupported."""
    return SYMBOL_TO_CURRENCY.get(symbol)
