"""
Dimension Filter Implementation.

Set-membership filtering across every dimension of a record type:
    - AND across dimensions
    - OR within a dimension's selected values
    - An empty selection imposes no constraint

Dimension values may be resolved indirectly (an attendance record's
department comes from the employee directory); unresolvable references
arrive here as the "Unknown" label and filter like any other value.
Selections on dimensions the record type does not have are ignored here;
the pipeline reports them once per pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Tuple

from hr_record_filter.domain.value_objects import FilterCriteria
from hr_record_filter.filters.base import BaseRecordStage

if TYPE_CHECKING:
    from hr_record_filter.pipeline.filter_context import FilterContext


class DimensionFilter(BaseRecordStage):
    """Filter records by multi-select dimensions."""

    stage_name = "dimension_filter"

    def _known_selections(self, criteria: FilterCriteria) -> Dict[str, FrozenSet[str]]:
        known = self.strategy.dimension_names()
        return {
            dimension: values
            for dimension, values in criteria.active_selections().items()
            if dimension in known
        }

    def _constrains(self, criteria: FilterCriteria) -> bool:
        return bool(self._known_selections(criteria))

    def check(
        self,
        record: Any,
        criteria: FilterCriteria,
        context: "FilterContext",
    ) -> Tuple[bool, str]:
        for dimension, selected in self._known_selections(criteria).items():
            value = self.strategy.dimension_value(record, dimension, context)
            if value not in selected:
                return False, f"{dimension}={value} not in selection"
        return True, ""
