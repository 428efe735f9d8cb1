"""
Category Filter Implementation.

Filters by a category derived from a record field (time-of-day for
attendance, duration for leave). Categories are computed on the fly by
the record strategy; a record without a category (e.g. no check-in) never
matches an explicit category selection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Tuple

from hr_record_filter.domain.value_objects import FilterCriteria
from hr_record_filter.filters.base import BaseRecordStage

if TYPE_CHECKING:
    from hr_record_filter.pipeline.filter_context import FilterContext


class CategoryFilter(BaseRecordStage):
    """Filter records by derived category."""

    stage_name = "category_filter"

    def _constrains(self, criteria: FilterCriteria) -> bool:
        return bool(criteria.category) and bool(self.strategy.category_values())

    def check(
        self,
        record: Any,
        criteria: FilterCriteria,
        context: "FilterContext",
    ) -> Tuple[bool, str]:
        category = self.strategy.category_of(record)
        if category is None:
            return False, "record has no category"
        if category not in criteria.category:
            return False, f"category={category} not in selection"
        return True, ""
