"""
TimeBucks API Module

REST surface under /api/v1/ for parsing, validating and converting values.
"""

from timebucks.api.routes import router
from timebucks.api.schemas import (
    ErrorResponse,
    HealthResponse,
    ParseResponse,
    TransformResponse,
)

__all__ = [
    "router",
    "ParseResponse",
    "TransformResponse",
    "HealthResponse",
    "ErrorResponse",
]
