"""
TimeBucks API Routes

API base URL: /api/v1/
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status

from timebucks import __version__
from timebucks.api.schemas import (
    ErrorResponse,
    HealthResponse,
    MethodsResponse,
    ParseResponse,
    TransformRequest,
    TransformResponse,
    ValidateResponse,
)
from timebucks.computation.engine import ConversionEngine
from timebucks.computation.registry import TransformationRegistry, get_default_registry
from timebucks.config import get_settings
from timebucks.exceptions import (
    InvalidNotationError,
    MissingDataError,
    TimeBucksError,
    UnknownMethodError,
)
from timebucks.notation.parser import NotationParser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["TimeBucks"])

_parser = NotationParser()


def get_registry() -> TransformationRegistry:
    """Registry dependency; overridable in tests."""
    return get_default_registry()


def _error(status_code: int, code: str, error: TimeBucksError) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": error.message,
                "details": error.details or None,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        }
    )


@router.get(
    "/parse",
    response_model=ParseResponse,
    summary="Parse TimeBucks notation",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid notation"},
    }
)
async def parse_notation(notation: str = Query(..., examples=["$8,000@2024[CPI:1970]"])) -> ParseResponse:
    try:
        value = _parser.parse(notation)
    except InvalidNotationError as e:
        raise _error(status.HTTP_400_BAD_REQUEST, "TIMEBUCKS_INVALID_NOTATION", e)

    return ParseResponse(
        notation=value.format(),
        amount=str(value.amount),
        currency=value.currency,
        year=value.year,
        month=value.month,
        day=value.day,
        is_calculated=value.is_calculated(),
        method=value.method,
        source_year=value.source_year,
        source_month=value.source_month,
        source_day=value.source_day
    )


@router.get(
    "/validate",
    response_model=ValidateResponse,
    summary="Check whether text is valid TimeBucks notation"
)
async def validate_notation(notation: str = Query(...)) -> ValidateResponse:
    return ValidateResponse(notation=notation, valid=_parser.validate(notation))


@router.post(
    "/transform",
    response_model=TransformResponse,
    summary="Convert a value to another date",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid notation"},
        404: {"model": ErrorResponse, "description": "Unknown transformation method"},
        500: {"model": ErrorResponse, "description": "No index data for the method"},
    }
)
async def transform(
    request: TransformRequest,
    registry: TransformationRegistry = Depends(get_registry)
) -> TransformResponse:
    method = request.method or get_settings().default_method
    engine = ConversionEngine(registry)

    try:
        source = _parser.parse(request.notation)
        details = engine.transform_with_details(
            source,
            method,
            request.target_year,
            request.target_month,
            request.target_day
        )
    except InvalidNotationError as e:
        raise _error(status.HTTP_400_BAD_REQUEST, "TIMEBUCKS_INVALID_NOTATION", e)
    except UnknownMethodError as e:
        raise _error(status.HTTP_404_NOT_FOUND, "TIMEBUCKS_UNKNOWN_METHOD", e)
    except MissingDataError as e:
        logger.error(f"Index data missing for {method}: {e}")
        raise _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "TIMEBUCKS_MISSING_DATA", e)

    return TransformResponse(
        original=details.original.format(),
        result=details.result.format(),
        method=details.method,
        amount=str(details.result.amount),
        rate=str(details.rate) if details.rate is not None else None
    )


@router.get(
    "/methods",
    response_model=MethodsResponse,
    summary="List registered transformation methods"
)
async def list_methods(
    registry: TransformationRegistry = Depends(get_registry)
) -> MethodsResponse:
    return MethodsResponse(methods=registry.describe())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check"
)
async def health_check(
    registry: TransformationRegistry = Depends(get_registry)
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        methods=len(registry)
    )
