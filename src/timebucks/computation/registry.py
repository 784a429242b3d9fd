"""
Transformation Registry - Method name -> transformation function

The registry is the only mutable shared state in TimeBucks. Entries are
added or overwritten, never removed. A single lock serialises access to
the mapping; the transformation itself runs outside the lock.
"""

import logging
import threading
from functools import lru_cache

from timebucks.computation.transformer import BUILTIN_TRANSFORMATIONS
from timebucks.exceptions import UnknownMethodError
from timebucks.models import MethodInfo, TimeBucks, TransformationFunction

logger = logging.getLogger(__name__)


class TransformationRegistry:
    """
    Resolve method names to transformation functions.

    A transformation function takes (source, target_year, target_month,
    target_day) and returns a calculated TimeBucks.
    """

    def __init__(self):
        self._methods: dict[str, TransformationFunction] = {}
        self._descriptions: dict[str, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_builtins(cls) -> "TransformationRegistry":
        """New registry seeded with CPI, WAGE and GOLD."""
        registry = cls()
        for transformation in BUILTIN_TRANSFORMATIONS:
            registry.register(
                transformation.name,
                transformation,
                description=transformation.description
            )
        return registry

    def register(
        self,
        name: str,
        fn: TransformationFunction,
        description: str = ""
    ) -> None:
        """Insert or overwrite the function registered under name."""
        with self._lock:
            replaced = name in self._methods
            self._methods[name] = fn
            self._descriptions[name] = description
        if replaced:
            logger.info(f"Transformation method '{name}' replaced")
        else:
            logger.debug(f"Transformation method '{name}' registered")

    def get(self, name: str) -> TransformationFunction | None:
        with self._lock:
            return self._methods.get(name)

    def all_methods(self) -> dict[str, TransformationFunction]:
        """Snapshot copy; changing it does not touch the registry."""
        with self._lock:
            return dict(self._methods)

    def describe(self) -> list[MethodInfo]:
        """Registered methods with descriptions, in registration order."""
        with self._lock:
            return [
                MethodInfo(name=name, description=self._descriptions.get(name, ""))
                for name in self._methods
            ]

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._methods

    def __len__(self) -> int:
        with self._lock:
            return len(self._methods)

    def transform(
        self,
        source: TimeBucks,
        name: str,
        target_year: int,
        target_month: int | None = None,
        target_day: int | None = None
    ) -> TimeBucks:
        """
        Apply the method registered under name.

        Returns:
            The function's result, unchanged.

        Raises:
            UnknownMethodError: If name is not registered
        """
        fn = self.get(name)
        if fn is None:
            raise UnknownMethodError(name)
        return fn(source, target_year, target_month, target_day)


@lru_cache
def get_default_registry() -> TransformationRegistry:
    """Shared registry seeded with the built-in methods."""
    return TransformationRegistry.with_builtins()
