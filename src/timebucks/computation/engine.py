"""
Conversion Engine - Orchestrate notation -> transformation -> notation

    NotationParser ──> TimeBucks ──> TransformationRegistry ──> TimeBucks ──> notation
"""

import logging
from decimal import Decimal

from timebucks.computation.registry import TransformationRegistry, get_default_registry
from timebucks.models import TimeBucks, TransformationResult
from timebucks.notation.parser import NotationParser

logger = logging.getLogger(__name__)


class ConversionEngine:
    """
    Orchestrates parsing, transformation and formatting.

    Domain errors (InvalidNotationError, UnknownMethodError,
    MissingDataError) propagate unchanged to the caller.
    """

    def __init__(self, registry: TransformationRegistry | None = None):
        self.registry = registry if registry is not None else get_default_registry()
        self.parser = NotationParser()

    def convert(
        self,
        notation: str,
        method: str,
        target_year: int,
        target_month: int | None = None,
        target_day: int | None = None
    ) -> str:
        """
        Convert a notation string to another date.

        Example:
            >>> ConversionEngine().convert("$1,000@1970", "CPI", 2024)
            '$7,997.42@2024[CPI:1970]'
        """
        source = self.parser.parse(notation)
        result = self.registry.transform(source, method, target_year, target_month, target_day)
        formatted = result.format()
        logger.info(f"Converted {notation} -> {formatted}")
        return formatted

    def transform_with_details(
        self,
        source: TimeBucks,
        method: str,
        target_year: int,
        target_month: int | None = None,
        target_day: int | None = None
    ) -> TransformationResult:
        """Transform and report the ratio that was applied."""
        result = self.registry.transform(source, method, target_year, target_month, target_day)
        rate = self._implied_rate(source.amount, result.amount)
        logger.debug(f"{method}: {source.format()} -> {result.format()} (rate={rate})")
        return TransformationResult(
            original=source,
            result=result,
            method=method,
            rate=rate
        )

    def compare_methods(
        self,
        source: TimeBucks,
        target_year: int,
        target_month: int | None = None,
        target_day: int | None = None,
        methods: list[str] | None = None
    ) -> dict[str, TimeBucks]:
        """
        The same conversion under several methods.

        Args:
            methods: Method names to apply. Defaults to every registered method.
        """
        names = methods if methods is not None else list(self.registry.all_methods())
        results = {
            name: self.registry.transform(source, name, target_year, target_month, target_day)
            for name in names
        }
        logger.info(
            f"Compared {len(results)} methods for {source.format()} -> {target_year}"
        )
        return results

    def _implied_rate(self, original: Decimal, result: Decimal) -> Decimal | None:
        if original == 0:
            return None
        return result / original
