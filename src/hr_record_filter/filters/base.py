"""
Shared Stage Behaviour.

Every stage filters the same way: inactive or disabled stages pass
everything through untouched, active ones check records one at a time and
keep the survivors in their original order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from hr_record_filter.config.models import StageConfig
from hr_record_filter.domain.value_objects import FilterCriteria, FilterResult

if TYPE_CHECKING:
    from hr_record_filter.interfaces.filter_stage import RecordFilterStrategy
    from hr_record_filter.pipeline.filter_context import FilterContext


class BaseRecordStage:
    """Base class for the record filter stages."""

    stage_name = "stage"

    def __init__(
        self,
        strategy: "RecordFilterStrategy",
        config: Optional[StageConfig] = None,
    ) -> None:
        """
        Initialize with configuration.

        Args:
            strategy: Record-type knowledge (dimensions, dates, category)
            config: Stage configuration (enabled switch)
        """
        self.strategy = strategy
        self.config = config or StageConfig()

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return self.stage_name

    def is_active(self, criteria: FilterCriteria) -> bool:
        return self.config.enabled and self._constrains(criteria)

    def _constrains(self, criteria: FilterCriteria) -> bool:
        raise NotImplementedError

    def check(
        self,
        record: Any,
        criteria: FilterCriteria,
        context: "FilterContext",
    ) -> Tuple[bool, str]:
        raise NotImplementedError

    def apply(
        self,
        records: List[Any],
        criteria: FilterCriteria,
        context: "FilterContext",
    ) -> FilterResult:
        """
        Apply the stage.

        Args:
            records: Records to filter (not modified)
            criteria: Active filter criteria
            context: Lookups for indirect fields

        Returns:
            FilterResult with passed/rejected records in input order
        """
        if not self.is_active(criteria):
            return FilterResult(passed_records=list(records))

        passed: List[Any] = []
        rejected: List[Any] = []
        reasons: Dict[int, str] = {}

        for position, record in enumerate(records):
            is_valid, reason = self.check(record, criteria, context)
            if is_valid:
                passed.append(record)
            else:
                rejected.append(record)
                reasons[position] = reason

        return FilterResult(
            passed_records=passed,
            rejected_records=rejected,
            rejection_reasons=reasons,
        )
