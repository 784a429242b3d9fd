"""
TimeBucks Data Models

A TimeBucks value is an amount of money anchored to a date. It is either
natural (stated directly for its date) or calculated (derived from another
date by a named transformation method, carrying that provenance).

All amounts are stored as decimal.Decimal and never mutated in place.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from timebucks.currency import Currency

if TYPE_CHECKING:
    from timebucks.computation.registry import TransformationRegistry


def to_decimal(value: Any) -> Decimal:
    """Convert to exact Decimal, going through str for floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# === Provenance ===

class Provenance(BaseModel):
    """
    Derivation history of a calculated value.

    Method and source year are always present together; a value either
    carries a whole Provenance or none at all.
    """
    model_config = ConfigDict(frozen=True)

    method: str = Field(min_length=1, description="Transformation method name, e.g. CPI")
    source_year: int = Field(description="Year of the value this one was derived from")
    source_month: int | None = Field(default=None, ge=1, le=12)
    source_day: int | None = Field(default=None, ge=1, le=31)

    @model_validator(mode="after")
    def validate_source_date(self) -> "Provenance":
        if self.source_day is not None and self.source_month is None:
            raise ValueError("source_day requires source_month")
        return self


# === Temporal Currency Value ===

class TimeBucks(BaseModel):
    """
    Immutable temporal currency value.

    Natural:    $1,000@1970
    Calculated: $8,000@2024[CPI:1970]
    """
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    currency: Currency
    year: int
    month: int | None = Field(default=None, ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)
    provenance: Provenance | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @model_validator(mode="after")
    def validate_date(self) -> "TimeBucks":
        if self.day is not None and self.month is None:
            raise ValueError("day requires month")
        return self

    # --- Constructors ---

    @classmethod
    def create(
        cls,
        amount: Decimal | int | float | str,
        currency: Currency | str,
        year: int,
        month: int | None = None,
        day: int | None = None
    ) -> "TimeBucks":
        """Create a natural value."""
        return cls(amount=amount, currency=currency, year=year, month=month, day=day)

    @classmethod
    def create_calculated(
        cls,
        amount: Decimal | int | float | str,
        currency: Currency | str,
        year: int,
        method: str,
        source_year: int,
        month: int | None = None,
        day: int | None = None,
        source_month: int | None = None,
        source_day: int | None = None
    ) -> "TimeBucks":
        """Create a calculated value with full provenance."""
        return cls(
            amount=amount,
            currency=currency,
            year=year,
            month=month,
            day=day,
            provenance=Provenance(
                method=method,
                source_year=source_year,
                source_month=source_month,
                source_day=source_day
            )
        )

    # --- Provenance accessors ---

    @property
    def method(self) -> str | None:
        return self.provenance.method if self.provenance else None

    @property
    def source_year(self) -> int | None:
        return self.provenance.source_year if self.provenance else None

    @property
    def source_month(self) -> int | None:
        return self.provenance.source_month if self.provenance else None

    @property
    def source_day(self) -> int | None:
        return self.provenance.source_day if self.provenance else None

    def is_calculated(self) -> bool:
        return self.provenance is not None

    def is_natural(self) -> bool:
        return not self.is_calculated()

    # --- Derived values ---

    def with_amount(self, amount: Decimal | int | float | str) -> "TimeBucks":
        """Return a copy with a new amount; every other field, provenance included, is kept."""
        return self.model_copy(update={"amount": to_decimal(amount)})

    def to_temporal_currency(self) -> "TimeBucks":
        """Return the natural part of this value (provenance dropped)."""
        if self.provenance is None:
            return self
        return self.model_copy(update={"provenance": None})

    def to_calculated_temporal_currency(self) -> "TimeBucks | None":
        return self if self.is_calculated() else None

    def equals(self, other: object) -> bool:
        """Structural equality over all fields, optional ones included."""
        return isinstance(other, TimeBucks) and self == other

    def transform(
        self,
        method: str,
        target_year: int,
        target_month: int | None = None,
        target_day: int | None = None,
        registry: "TransformationRegistry | None" = None
    ) -> "TimeBucks":
        """
        Convert this value to another date using a registered method.

        Args:
            method: Registered method name (CPI, WAGE, GOLD or custom)
            target_year: Year to convert to
            target_month: Optional month stamped on the result
            target_day: Optional day stamped on the result
            registry: Registry to resolve the method in. Defaults to the
                shared built-in registry.

        Raises:
            UnknownMethodError: If no method is registered under that name
        """
        from timebucks.computation.registry import get_default_registry

        registry = registry if registry is not None else get_default_registry()
        return registry.transform(self, method, target_year, target_month, target_day)

    # --- Notation ---

    def format(self) -> str:
        """Render canonical notation, e.g. $8,000@2024[CPI:1970]."""
        from timebucks.notation.formatter import format_notation

        return format_notation(self)

    def __str__(self) -> str:
        return self.format()


def create_value(
    amount: Decimal | int | float | str,
    currency: Currency | str,
    year: int,
    month: int | None = None,
    day: int | None = None
) -> TimeBucks:
    return TimeBucks.create(amount, currency, year, month, day)


def create_calculated_value(
    amount: Decimal | int | float | str,
    currency: Currency | str,
    year: int,
    method: str,
    source_year: int,
    month: int | None = None,
    day: int | None = None,
    source_month: int | None = None,
    source_day: int | None = None
) -> TimeBucks:
    return TimeBucks.create_calculated(
        amount, currency, year, method, source_year, month, day, source_month, source_day
    )


# source, target_year, target_month, target_day -> calculated value
TransformationFunction = Callable[[TimeBucks, int, int | None, int | None], TimeBucks]


# === Parser / Engine outputs ===

class ParsedNotation(BaseModel):
    """Decoded notation fields, without value behaviour."""
    amount: Decimal
    currency: Currency
    year: int
    month: int | None = None
    day: int | None = None
    method: str | None = None
    source_year: int | None = None
    source_month: int | None = None
    source_day: int | None = None


class TransformationResult(BaseModel):
    """A transformation together with the ratio that was applied."""
    original: TimeBucks
    result: TimeBucks
    method: str
    rate: Decimal | None = Field(
        default=None,
        description="result.amount / original.amount; None when the original amount is zero"
    )


class MethodInfo(BaseModel):
    """Registered transformation method, for listings."""
    name: str
    description: str = ""
