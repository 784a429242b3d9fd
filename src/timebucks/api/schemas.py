"""
TimeBucks API Response Schemas

Amounts and rates are returned as decimal strings, never floats.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from timebucks.currency import Currency
from timebucks.models import MethodInfo


class ParseResponse(BaseModel):
    """Response schema for /api/v1/parse"""
    notation: str = Field(description="Canonical notation of the parsed value")
    amount: str = Field(description="Exact decimal amount", examples=["8000"])
    currency: Currency
    year: int
    month: int | None = None
    day: int | None = None
    is_calculated: bool
    method: str | None = None
    source_year: int | None = None
    source_month: int | None = None
    source_day: int | None = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "notation": "$8,000@2024[CPI:1970]",
                "amount": "8000",
                "currency": "USD",
                "year": 2024,
                "month": None,
                "day": None,
                "is_calculated": True,
                "method": "CPI",
                "source_year": 1970,
                "source_month": None,
                "source_day": None
            }
        }
    }


class ValidateResponse(BaseModel):
    """Response schema for /api/v1/validate"""
    notation: str
    valid: bool


class TransformRequest(BaseModel):
    """Request body for /api/v1/transform"""
    notation: str = Field(description="Source value in TimeBucks notation", examples=["$1,000@1970"])
    method: str | None = Field(
        default=None,
        description="Transformation method; the configured default when omitted"
    )
    target_year: int
    target_month: int | None = Field(default=None, ge=1, le=12)
    target_day: int | None = Field(default=None, ge=1, le=31)

    @model_validator(mode="after")
    def validate_target_date(self) -> "TransformRequest":
        if self.target_day is not None and self.target_month is None:
            raise ValueError("target_day requires target_month")
        return self


class TransformResponse(BaseModel):
    """Response schema for /api/v1/transform"""
    original: str = Field(description="Source value, canonical notation")
    result: str = Field(description="Converted value, canonical notation")
    method: str
    amount: str = Field(description="Converted amount as exact decimal")
    rate: str | None = Field(
        default=None,
        description="Applied ratio result/original; null when the source amount is zero"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "original": "$1,000@1970",
                "result": "$7,997.42@2024[CPI:1970]",
                "method": "CPI",
                "amount": "7997.42",
                "rate": "7.99742"
            }
        }
    }


class MethodsResponse(BaseModel):
    """Response schema for /api/v1/methods"""
    methods: list[MethodInfo]


class HealthResponse(BaseModel):
    """Health check response for /api/v1/health"""
    status: str = Field(description="Service health status")
    version: str = Field(description="API version")
    methods: int = Field(description="Number of registered transformation methods")


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(description="Error code")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(description="Error timestamp")


class ErrorResponse(BaseModel):
    """Problem details envelope."""
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "TIMEBUCKS_UNKNOWN_METHOD",
                    "message": "Transformation method 'PPP' not found",
                    "details": {"method": "PPP"},
                    "timestamp": "2026-01-15T15:30:00Z"
                }
            }
        }
    }
