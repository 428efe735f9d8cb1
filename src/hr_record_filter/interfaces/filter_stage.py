"""
Filter Stage Protocol.

Defines the abstract interface for filter stages. Each stage implements
one kind of predicate (free-text search, dimension membership, date range,
derived category) while conforming to a common interface.

The filter stage is responsible for:
    - Deciding whether the criteria activate it at all
    - Checking single records and giving a rejection reason
    - Applying itself to an ordered list, preserving order

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Stages are stateless (resolution via FilterContext)
    - Record-type knowledge injected via a RecordFilterStrategy
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from hr_record_filter.domain.entities import RecordType
    from hr_record_filter.domain.value_objects import (
        DateMatchMode,
        DirectorySource,
        FilterCriteria,
        FilterResult,
    )
    from hr_record_filter.pipeline.filter_context import FilterContext


@runtime_checkable
class FilterStage(Protocol):
    """Abstract interface for filter stages."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        ...

    def is_active(self, criteria: "FilterCriteria") -> bool:
        """True if the criteria constrain this stage."""
        ...

    def check(
        self,
        record: Any,
        criteria: "FilterCriteria",
        context: "FilterContext",
    ) -> Tuple[bool, str]:
        """
        Check a single record.

        Returns:
            Tuple of (passes, rejection_reason)
        """
        ...

    def apply(
        self,
        records: List[Any],
        criteria: "FilterCriteria",
        context: "FilterContext",
    ) -> "FilterResult":
        """Apply the stage to records, keeping their relative order."""
        ...


class RecordFilterStrategy(Protocol):
    """Record-type specific knowledge used by the generic stages."""

    @property
    def record_type(self) -> "RecordType":
        ...

    @property
    def date_mode(self) -> "DateMatchMode":
        ...

    def dimension_names(self) -> List[str]:
        """Dimensions this record type can be filtered on."""
        ...

    def dimension_value(
        self, record: Any, dimension: str, context: "FilterContext"
    ) -> Optional[str]:
        """Value of a dimension for a record (None if not applicable)."""
        ...

    def date_span(self, record: Any) -> Optional[Tuple[str, str]]:
        """(start, end) ISO dates; equal for single-day records."""
        ...

    def category_of(self, record: Any) -> Optional[str]:
        """Derived category, or None when unclassifiable."""
        ...

    def category_values(self) -> List[str]:
        """All category values; empty if the type has no category."""
        ...

    def fixed_choices(self) -> Dict[str, List[str]]:
        """Dimensions whose options are a fixed list."""
        ...

    def directory_dimensions(self) -> Dict[str, "DirectorySource"]:
        """Dimensions whose options are listed from the employee directory."""
        ...

    def option_label(self, dimension: str, value: str, context: "FilterContext") -> str:
        """Text shown for an option value in a filter menu."""
        ...
