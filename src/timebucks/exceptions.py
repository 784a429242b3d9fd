"""
TimeBucks Exceptions

All domain errors derive from TimeBucksError. Each one is terminal for the
operation that raised it: no partial result is ever returned.
"""

from typing import Any


class TimeBucksError(Exception):
    """Base exception for TimeBucks errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}


class InvalidNotationError(TimeBucksError):
    """Text does not match the canonical TimeBucks notation."""

    def __init__(self, notation: str, reason: str | None = None):
        super().__init__(
            f"Invalid TimeBucks notation: {notation}",
            error_type="INVALID_NOTATION",
            details={"reason": reason} if reason else None
        )
        self.notation = notation
        self.reason = reason


class UnknownMethodError(TimeBucksError):
    """No transformation is registered under the requested name."""

    def __init__(self, method: str):
        super().__init__(
            f"Transformation method '{method}' not found",
            error_type="UNKNOWN_METHOD",
            details={"method": method}
        )
        self.method = method


class MissingDataError(TimeBucksError):
    """An index table has no entry to interpolate or extrapolate from."""

    def __init__(self, table: str, year: int):
        super().__init__(
            f"No {table} data available for year {year}",
            error_type="MISSING_DATA",
            details={"table": table, "year": year}
        )
        self.table = table
        self.year = year
