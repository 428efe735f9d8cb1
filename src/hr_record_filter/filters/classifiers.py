"""
Derived-Category Classifiers.

Pure functions bucketing a continuous field into named categories:
    - time_category: check-in time -> early / on-time / late
    - duration_category: leave length -> short / medium / long
    - experience_band / salary_band: candidate numbers -> range labels

Categories are recomputed on every pass and never stored on records.
Boundaries belong to the lower category: 09:00 is on-time, 2 days is
short, 5 days is medium. Band lower bounds are inclusive.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from hr_record_filter.config.models import (
    BandConfig,
    ClassifierConfig,
    DurationCategoryConfig,
    TimeCategoryConfig,
)
from hr_record_filter.domain.value_objects import DurationCategory, TimeCategory

logger = logging.getLogger(__name__)

_DEFAULTS = ClassifierConfig()


def parse_clock_minutes(value: Optional[str]) -> Optional[int]:
    """
    Convert "HH:MM" (seconds allowed) to minutes since midnight.

    Returns:
        Minutes, or None for missing or malformed input
    """
    if not value:
        return None
    parts = value.strip().split(":")
    if len(parts) < 2:
        logger.debug(f"Unparseable clock time {value!r}")
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        logger.debug(f"Unparseable clock time {value!r}")
        return None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        logger.debug(f"Clock time out of range {value!r}")
        return None
    return hours * 60 + minutes


def time_category(
    check_in: Optional[str],
    config: Optional[TimeCategoryConfig] = None,
) -> Optional[TimeCategory]:
    """Classify a check-in; None when there is no usable check-in."""
    config = config or _DEFAULTS.time
    minutes = parse_clock_minutes(check_in)
    if minutes is None:
        return None
    if minutes < config.early_before_minutes:
        return TimeCategory.EARLY
    if minutes <= config.on_time_until_minutes:
        return TimeCategory.ON_TIME
    return TimeCategory.LATE


def duration_category(
    days: Optional[float],
    config: Optional[DurationCategoryConfig] = None,
) -> Optional[DurationCategory]:
    """Classify a leave length in days; None for a missing value."""
    config = config or _DEFAULTS.duration
    if days is None or math.isnan(days):
        return None
    if days <= config.short_max_days:
        return DurationCategory.SHORT
    if days <= config.medium_max_days:
        return DurationCategory.MEDIUM
    return DurationCategory.LONG


def band_of(value: Optional[float], bands: BandConfig) -> Optional[str]:
    """Label of the half-open band containing value, or None."""
    if value is None or math.isnan(value):
        return None
    if bands.min_value is not None and value < bands.min_value:
        return None
    for boundary, label in zip(bands.boundaries, bands.labels):
        if value < boundary:
            return label
    return bands.labels[-1]


def experience_band(
    years: Optional[float],
    config: Optional[BandConfig] = None,
) -> Optional[str]:
    return band_of(years, config or _DEFAULTS.experience)


def salary_band(
    amount: Optional[float],
    config: Optional[BandConfig] = None,
) -> Optional[str]:
    return band_of(amount, config or _DEFAULTS.salary)
