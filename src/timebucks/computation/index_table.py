"""
Index Table - Sparse year -> index value lookup

Each transformation method is backed by one table of positive reference
values keyed by calendar year. Years missing from the table are linearly
interpolated between their tabulated neighbours; years outside the table
take the value of the nearest end (flat extrapolation).
"""

from bisect import bisect_left
from decimal import Decimal, getcontext
from types import MappingProxyType
from typing import Any, Mapping

from timebucks.exceptions import MissingDataError
from timebucks.models import to_decimal

getcontext().prec = 28


class IndexTable:
    """
    Immutable sparse mapping from year to index value.

    Example:
        >>> table = IndexTable("CPI", {1970: "38.8", 1980: "82.4"})
        >>> table.value_for_year(1975)
        Decimal('60.60')
    """

    def __init__(self, name: str, values: Mapping[int, Any]):
        self.name = name
        self._values: dict[int, Decimal] = {
            int(year): to_decimal(value) for year, value in values.items()
        }
        self._years: tuple[int, ...] = tuple(sorted(self._values))

    @property
    def values(self) -> Mapping[int, Decimal]:
        """Read-only view of the tabulated entries."""
        return MappingProxyType(self._values)

    @property
    def years(self) -> tuple[int, ...]:
        return self._years

    @property
    def first_year(self) -> int | None:
        return self._years[0] if self._years else None

    @property
    def last_year(self) -> int | None:
        return self._years[-1] if self._years else None

    def __contains__(self, year: object) -> bool:
        return year in self._values

    def __len__(self) -> int:
        return len(self._years)

    def __repr__(self) -> str:
        return f"IndexTable({self.name!r}, {len(self)} years)"

    def value_for_year(self, year: int) -> Decimal:
        """
        Index value for a year.

        Args:
            year: Calendar year. Month and day never take part in the lookup.

        Returns:
            Tabulated value, linear interpolation between the nearest
            tabulated years, or the nearest end value outside the table.

        Raises:
            MissingDataError: If the table has no entries at all
        """
        exact = self._values.get(year)
        if exact is not None:
            return exact

        if not self._years:
            raise MissingDataError(self.name, year)

        # year is not tabulated, so idx is the first tabulated year above it
        idx = bisect_left(self._years, year)
        before = self._years[idx - 1] if idx > 0 else None
        after = self._years[idx] if idx < len(self._years) else None

        if before is not None and after is not None:
            before_value = self._values[before]
            after_value = self._values[after]
            ratio = Decimal(year - before) / Decimal(after - before)
            return before_value + ratio * (after_value - before_value)

        if before is not None:
            return self._values[before]
        return self._values[after]
