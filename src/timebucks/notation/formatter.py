"""
Notation Formatter - TimeBucks value -> canonical string

    <symbol><amount>@<date>[<method>:<source date>]

Integral amounts are written without a decimal point, other amounts with
exactly two decimals; both use "," as the thousands separator.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import TYPE_CHECKING

from timebucks.currency import symbol_for
from timebucks.models import to_decimal

if TYPE_CHECKING:
    from timebucks.models import TimeBucks

CENTS = Decimal("0.01")


def format_amount(amount: Decimal | int | float | str) -> str:
    """
    Render an amount with thousands separators.

    >>> format_amount(Decimal("8000.00"))
    '8,000'
    >>> format_amount(Decimal("1234.5"))
    '1,234.50'
    """
    value = to_decimal(amount)
    if value == 0:
        return "0"
    if value == value.to_integral_value():
        return f"{value:,.0f}"
    rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0"
    if rounded == rounded.to_integral_value():
        return f"{rounded:,.0f}"
    return f"{rounded:,.2f}"


def format_date(year: int, month: int | None = None, day: int | None = None) -> str:
    """YYYY, YYYY-MM or YYYY-MM-DD; day is only written when month is present."""
    if month is not None and day is not None:
        return f"{year:04d}-{month:02d}-{day:02d}"
    if month is not None:
        return f"{year:04d}-{month:02d}"
    return f"{year:04d}"


def format_notation(value: "TimeBucks") -> str:
    """Canonical notation for a natural or calculated value."""
    text = (
        f"{symbol_for(value.currency)}{format_amount(value.amount)}"
        f"@{format_date(value.year, value.month, value.day)}"
    )
    if value.provenance is not None:
        source = value.provenance
        source_date = format_date(source.source_year, source.source_month, source.source_day)
        text += f"[{source.method}:{source_date}]"
    return text
