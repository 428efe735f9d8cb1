"""
Registry Module - Record Strategy Management.

Components:
    - StrategyRegistry: record type -> strategy class
    - StrategyInfo: metadata about a registration
    - default_registry: registry with the built-in record types
"""

from hr_record_filter.registry.strategy_registry import (
    StrategyInfo,
    StrategyRegistry,
    default_registry,
)

__all__ = [
    "StrategyInfo",
    "StrategyRegistry",
    "default_registry",
]
