"""
TimeBucks - Temporal currency values and index-based time conversion

    >>> from timebucks import TimeBucks, parse
    >>> TimeBucks.create(1000, "USD", 1970).transform("CPI", 2024).format()
    '$7,997.42@2024[CPI:1970]'
    >>> parse("$8,000@2024[CPI:1970]").is_calculated()
    True
"""

__version__ = "1.0.0"

from timebucks.currency import Currency
from timebucks.exceptions import (
    InvalidNotationError,
    MissingDataError,
    TimeBucksError,
    UnknownMethodError,
)
from timebucks.models import (
    MethodInfo,
    ParsedNotation,
    Provenance,
    TimeBucks,
    TransformationResult,
    create_calculated_value,
    create_value,
)
from timebucks.notation import NotationParser, format_notation, parse, parse_raw, validate
from timebucks.computation import (
    ConversionEngine,
    IndexTable,
    IndexTransformation,
    TransformationRegistry,
    get_default_registry,
)

__all__ = [
    "__version__",
    "Currency",
    "TimeBucksError",
    "InvalidNotationError",
    "UnknownMethodError",
    "MissingDataError",
    "TimeBucks",
    "Provenance",
    "ParsedNotation",
    "TransformationResult",
    "MethodInfo",
    "create_value",
    "create_calculated_value",
    "NotationParser",
    "parse",
    "parse_raw",
    "validate",
    "format_notation",
    "ConversionEngine",
    "IndexTable",
    "IndexTransformation",
    "TransformationRegistry",
    "get_default_registry",
]
