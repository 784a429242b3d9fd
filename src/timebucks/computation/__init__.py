"""
TimeBucks Computation Module

Index tables, built-in transformations, the method registry and the
conversion engine.
"""

from timebucks.computation.index_table import IndexTable
from timebucks.computation.transformer import (
    CPITransformation,
    GoldTransformation,
    IndexTransformation,
    WageTransformation,
    cpi_for_year,
    gold_price_for_year,
    wage_for_year,
)
from timebucks.computation.registry import TransformationRegistry, get_default_registry
from timebucks.computation.engine import ConversionEngine

__all__ = [
    "IndexTable",
    "IndexTransformation",
    "CPITransformation",
    "WageTransformation",
    "GoldTransformation",
    "cpi_for_year",
    "wage_for_year",
    "gold_price_for_year",
    "TransformationRegistry",
    "get_default_registry",
    "ConversionEngine",
]
