"""Strategy registry with auto-discovery of ProgressionStrategy subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from pathlib import Path

from progression_engine.exceptions import UnknownProgressionTypeError
from progression_engine.models.enums import ProgressionType
from progression_engine.strategies.base import ProgressionStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Discovers and manages all ProgressionStrategy implementations.

    Auto-discovers strategies by scanning the strategies/ package for any
    concrete subclasses of ProgressionStrategy. A new progression scheme is
    added by placing a module there; no manual registration needed. One
    strategy is held per ProgressionType; a later registration replaces an
    earlier one.
    """

    def __init__(self) -> None:
        self._strategies: dict[ProgressionType, ProgressionStrategy] = {}

    def discover_strategies(self) -> None:
        """Scan the strategies package and register all strategy subclasses."""
        import progression_engine.strategies as strategies_pkg

        strategies_path = Path(strategies_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(strategies_pkg.__name__, str(strategies_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        """Import every module under a package and register strategies."""
        for _, module_name, _ in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, ProgressionStrategy)
                    and attr is not ProgressionStrategy
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, strategy: ProgressionStrategy) -> None:
        """Register a strategy instance under its progression type."""
        logger.debug(
            "Registered %s v%s for %s",
            type(strategy).__name__,
            strategy.version,
            strategy.progression_type.name,
        )
        self._strategies[strategy.progression_type] = strategy

    def get(self, progression_type: ProgressionType) -> ProgressionStrategy:
        """Retrieve the strategy for a progression type.

        Raises:
            UnknownProgressionTypeError: nothing is registered for the type.
        """
        try:
            return self._strategies[progression_type]
        except KeyError:
            raise UnknownProgressionTypeError(progression_type) from None

    def get_all_strategies(self) -> list[ProgressionStrategy]:
        """Return all registered strategies ordered by progression type."""
        return [self._strategies[t] for t in sorted(self._strategies)]

    @property
    def progression_types(self) -> list[ProgressionType]:
        """List all progression types with a registered strategy."""
        return list(self._strategies.keys())
