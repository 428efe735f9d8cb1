"""
Date Range Filter Implementation.

ISO dates (YYYY-MM-DD) sort correctly as strings, so all comparisons are
lexicographic. An empty bound disables that bound only.

Modes:
    - SINGLE_DAY: the record's date must lie within [from, to]
    - INTERVAL: the record's [start, end] must overlap [from, to]
    - NONE: record type has no dates, everything passes
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Tuple

from hr_record_filter.domain.value_objects import DateMatchMode, FilterCriteria
from hr_record_filter.filters.base import BaseRecordStage

if TYPE_CHECKING:
    from hr_record_filter.pipeline.filter_context import FilterContext


def date_in_range(value: str, from_date: str = "", to_date: str = "") -> bool:
    """True if a single date lies within the (optionally open) range."""
    if from_date and value < from_date:
        return False
    if to_date and value > to_date:
        return False
    return True


def interval_overlaps(
    start: str,
    end: str,
    from_date: str = "",
    to_date: str = "",
) -> bool:
    """True if [start, end] intersects the (optionally open) range."""
    if from_date and end < from_date:
        return False
    if to_date and start > to_date:
        return False
    return True


class DateRangeFilter(BaseRecordStage):
    """Filter records by the date range picker."""

    stage_name = "date_range_filter"

    def _constrains(self, criteria: FilterCriteria) -> bool:
        return criteria.has_date_range and self.strategy.date_mode != DateMatchMode.NONE

    def check(
        self,
        record: Any,
        criteria: FilterCriteria,
        context: "FilterContext",
    ) -> Tuple[bool, str]:
        span = self.strategy.date_span(record)
        if span is None or criteria.date_range is None:
            return True, ""

        start, end = span
        from_date = criteria.date_range.from_date
        to_date = criteria.date_range.to_date

        if self.strategy.date_mode == DateMatchMode.INTERVAL:
            if interval_overlaps(start, end, from_date, to_date):
                return True, ""
            return False, f"{start}..{end} does not overlap {from_date}..{to_date}"

        if date_in_range(start, from_date, to_date):
            return True, ""
        return False, f"date={start} outside {from_date}..{to_date}"
