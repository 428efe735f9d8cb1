"""
Strategy Registry - Record Type to Strategy Mapping.

A thread-safe registry of record strategies. The built-in record types
are registered by ``default_registry()``. The set of record types is
closed (``RecordType``); host applications customise filtering by
replacing the strategy of a built-in type and passing the registry to
``create_pipeline``.

Usage:
    registry = default_registry()
    registry.register(RecordType.JOB, MyJobStrategy, "2.0.0", replace=True)
    strategy = registry.create(RecordType.JOB, config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional, Type

from hr_record_filter.config.models import FilterEngineConfig
from hr_record_filter.domain.entities import RecordType

logger = logging.getLogger(__name__)


@dataclass
class StrategyInfo:
    """Metadata about a registered strategy."""

    record_type: RecordType
    strategy_class: Type[Any]
    version: str
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "record_type": self.record_type.value,
            "strategy": self.strategy_class.__name__,
            "version": self.version,
            "description": self.description,
            "tags": self.tags,
        }


class StrategyRegistry:
    """Thread-safe registry mapping record types to strategy classes."""

    def __init__(self) -> None:
        self._strategies: Dict[RecordType, StrategyInfo] = {}
        self._lock = RLock()

    def register(
        self,
        record_type: RecordType,
        strategy_class: Type[Any],
        version: str,
        description: str = "",
        tags: Optional[List[str]] = None,
        *,
        replace: bool = False,
    ) -> None:
        """
        Register a strategy class for a record type.

        Args:
            record_type: Record type handled by the strategy
            strategy_class: Class accepting a FilterEngineConfig in __init__
            version: Version string for the strategy
            description: Optional description
            tags: Optional tags for categorization
            replace: Allow overriding an existing registration

        Raises:
            ValueError: If the record type is taken and replace is False
        """
        with self._lock:
            if record_type in self._strategies and not replace:
                raise ValueError(
                    f"Strategy for '{record_type.value}' is already registered. "
                    f"Pass replace=True to override it."
                )
            self._strategies[record_type] = StrategyInfo(
                record_type=record_type,
                strategy_class=strategy_class,
                version=version,
                description=description,
                tags=tags or [],
            )
            logger.debug(
                f"Registered strategy {strategy_class.__name__} v{version} "
                f"for {record_type.value}"
            )

    def unregister(self, record_type: RecordType) -> bool:
        """Remove a registration; False if there was none."""
        with self._lock:
            if record_type not in self._strategies:
                logger.warning(f"Cannot unregister: no strategy for '{record_type.value}'")
                return False
            del self._strategies[record_type]
            return True

    def create(
        self,
        record_type: RecordType,
        config: Optional[FilterEngineConfig] = None,
    ) -> Any:
        """
        Instantiate the strategy registered for a record type.

        Raises:
            KeyError: If no strategy is registered for the record type
        """
        with self._lock:
            info = self._strategies.get(record_type)
        if info is None:
            raise KeyError(f"No strategy registered for '{record_type.value}'")
        return info.strategy_class(config or FilterEngineConfig())

    def list_all(self) -> Dict[RecordType, StrategyInfo]:
        with self._lock:
            return dict(self._strategies)

    def get_versions(self) -> Dict[str, str]:
        with self._lock:
            return {rt.value: info.version for rt, info in self._strategies.items()}

    def __contains__(self, record_type: object) -> bool:
        with self._lock:
            return record_type in self._strategies

    @property
    def registered_count(self) -> int:
        with self._lock:
            return len(self._strategies)


def default_registry() -> StrategyRegistry:
    """Registry pre-populated with the built-in record strategies."""
    from hr_record_filter.filters.strategies import STRATEGY_CLASSES

    registry = StrategyRegistry()
    for record_type, strategy_class in STRATEGY_CLASSES.items():
        registry.register(
            record_type,
            strategy_class,
            "1.0.0",
            description=(strategy_class.__doc__ or "").strip().splitlines()[0],
            tags=["builtin"],
        )
    return registry
