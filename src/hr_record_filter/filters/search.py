"""
Free-Text Search Stage.

Case-insensitive substring search over the fixed list of searchable
fields each record type exposes. No tokenization, stemming or fuzzy
matching; numbers are searched through their decimal text, so "5" matches
an experience of 5.5 years and a salary of 150000.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Tuple

from hr_record_filter.domain.value_objects import FilterCriteria
from hr_record_filter.filters.base import BaseRecordStage

if TYPE_CHECKING:
    from hr_record_filter.pipeline.filter_context import FilterContext


def matches_search(fields: Iterable[str], query: str) -> bool:
    """True if query is empty or any field contains it (ignoring case)."""
    if not query:
        return True
    needle = query.lower()
    return any(needle in str(field).lower() for field in fields if field is not None)


class SearchFilter(BaseRecordStage):
    """Filter records by the search box."""

    stage_name = "search_filter"

    def _constrains(self, criteria: FilterCriteria) -> bool:
        return bool(criteria.search)

    def check(
        self,
        record: Any,
        criteria: FilterCriteria,
        context: "FilterContext",
    ) -> Tuple[bool, str]:
        if matches_search(record.searchable_fields(context), criteria.search):
            return True, ""
        return False, f"no searchable field contains {criteria.search!r}"
