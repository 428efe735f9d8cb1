"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - FilterEngineConfig: Root configuration object
    - StageConfig: enable/disable switch per filter stage
    - ClassifierConfig: time, duration, experience and salary thresholds
    - ChoicesConfig: fixed option lists for filter menus

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. flexible_hours)
"""

from hr_record_filter.config.loader import ConfigLoader, load_config
from hr_record_filter.config.models import (
    BandConfig,
    ChoicesConfig,
    ClassifierConfig,
    DurationCategoryConfig,
    FilterEngineConfig,
    StageConfig,
    TimeCategoryConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "BandConfig",
    "ChoicesConfig",
    "ClassifierConfig",
    "DurationCategoryConfig",
    "FilterEngineConfig",
    "StageConfig",
    "TimeCategoryConfig",
]
