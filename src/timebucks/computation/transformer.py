"""
Index Transformations - Rescale an amount between two years

All built-in methods share one rule:

    amount_target = amount_source × index(target_year) / index(source_year)

rounded to 2 decimal places with ROUND_HALF_UP (half away from zero, so
negative amounts mirror positive ones exactly).
"""

from decimal import Decimal, ROUND_HALF_UP, getcontext

from timebucks.computation.data import CPI_DATA, GOLD_PRICE_DATA, WAGE_DATA
from timebucks.computation.index_table import IndexTable
from timebucks.models import TimeBucks

getcontext().prec = 28

CENTS = Decimal("0.01")


def round_amount(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class IndexTransformation:
    """
    Transformation backed by an IndexTable.

    Instances are callable with the transformation function signature
    (source, target_year, target_month, target_day) and can be registered
    directly in a TransformationRegistry.
    """

    def __init__(self, name: str, table: IndexTable, description: str = ""):
        self.name = name
        self.table = table
        self.description = description

    def __repr__(self) -> str:
        return f"IndexTransformation({self.name!r})"

    def rate(self, source_year: int, target_year: int) -> Decimal:
        """Ratio index(target_year) / index(source_year)."""
        source_rate = self.table.value_for_year(source_year)
        target_rate = self.table.value_for_year(target_year)
        return target_rate / source_rate

    def __call__(
        self,
        source: TimeBucks,
        target_year: int,
        target_month: int | None = None,
        target_day: int | None = None
    ) -> TimeBucks:
        """
        Rescale source to target_year.

        The target month and day are stamped on the result as given; they
        are not inherited from the source and do not affect the rate.
        The source date is recorded verbatim as provenance.
        """
        source_rate = self.table.value_for_year(source.year)
        target_rate = self.table.value_for_year(target_year)

        scaled = source.amount * (target_rate / source_rate)

        return TimeBucks.create_calculated(
            amount=round_amount(scaled),
            currency=source.currency,
            year=target_year,
            method=self.name,
            source_year=source.year,
            month=target_month,
            day=target_day,
            source_month=source.month,
            source_day=source.day
        )


# === Built-in methods ===

CPI_TABLE = IndexTable("CPI", CPI_DATA)
WAGE_TABLE = IndexTable("WAGE", WAGE_DATA)
GOLD_TABLE = IndexTable("GOLD", GOLD_PRICE_DATA)

CPITransformation = IndexTransformation(
    "CPI", CPI_TABLE, "Consumer price index (purchasing power)"
)
WageTransformation = IndexTransformation(
    "WAGE", WAGE_TABLE, "Average annual wage (labour value)"
)
GoldTransformation = IndexTransformation(
    "GOLD", GOLD_TABLE, "Gold price per troy ounce (commodity value)"
)

BUILTIN_TRANSFORMATIONS: tuple[IndexTransformation, ...] = (
    CPITransformation,
    WageTransformation,
    GoldTransformation,
)


def cpi_for_year(year: int) -> Decimal:
    return CPI_TABLE.value_for_year(year)


def wage_for_year(year: int) -> Decimal:
    return WAGE_TABLE.value_for_year(year)


def gold_price_for_year(year: int) -> Decimal:
    return GOLD_TABLE.value_for_year(year)
