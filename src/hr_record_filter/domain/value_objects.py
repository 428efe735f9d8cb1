"""
Value Objects for Domain Layer.

Immutable values that flow through a filter pass: the criteria the user
has selected, the per-stage results and the final outcome.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, Field

from hr_record_filter.domain.entities import RecordType


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Dimension name -> selected values
SelectionsDict = Dict[str, FrozenSet[str]]

# Position in stage input -> rejection reason
RejectionReasonsDict = Dict[int, str]


class TimeCategory(str, Enum):
    """Punctuality of a check-in."""

    EARLY = "early"
    ON_TIME = "on-time"
    LATE = "late"


class DurationCategory(str, Enum):
    """Length class of a leave request."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class DateMatchMode(str, Enum):
    """How a record's dates are compared against a date range."""

    SINGLE_DAY = "single_day"
    INTERVAL = "interval"
    NONE = "none"


class DirectorySource(str, Enum):
    """Employee-directory listing that supplies a dimension's options."""

    EMPLOYEES = "employees"
    DEPARTMENTS = "departments"


class EmployeeProfile(BaseModel):
    """What the employee directory knows about an employee id."""

    name: str
    department: Optional[str] = None

    model_config = {"frozen": True}


class FilterOption(BaseModel):
    """One choice in a filter menu: the value selected and the text shown."""

    value: str
    label: str

    model_config = {"frozen": True}


class DateRange(BaseModel):
    """Inclusive ISO date bounds; an empty bound is disabled."""

    from_date: str = Field(default="", alias="from")
    to_date: str = Field(default="", alias="to")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_open(self) -> bool:
        """True when neither bound is set (the filter is inert)."""
        return not self.from_date and not self.to_date


class FilterCriteria(BaseModel):
    """
    The complete set of filters active on a list view.

    Criteria are immutable: every transition (typing in the search box,
    toggling a checkbox, clearing) returns a new value. An empty selection
    set for a dimension means "no constraint", not "exclude everything".
    """

    search: str = ""
    selections: SelectionsDict = Field(default_factory=dict)
    date_range: Optional[DateRange] = None
    category: FrozenSet[str] = Field(default_factory=frozenset)

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """True when no filter of any kind is active."""
        return (
            not self.search
            and not self.active_selections()
            and (self.date_range is None or self.date_range.is_open)
            and not self.category
        )

    @property
    def has_date_range(self) -> bool:
        return self.date_range is not None and not self.date_range.is_open

    def active_selections(self) -> SelectionsDict:
        """Selections that actually constrain (non-empty sets only)."""
        return {name: values for name, values in self.selections.items() if values}

    def with_search(self, search: str) -> "FilterCriteria":
        return self.model_copy(update={"search": search})

    def with_selection(self, dimension: str, values: Any) -> "FilterCriteria":
        selections = dict(self.selections)
        selections[dimension] = frozenset(values)
        return self.model_copy(update={"selections": selections})

    def toggle(self, dimension: str, value: str) -> "FilterCriteria":
        """Add value to a dimension's selection, or remove it if present."""
        current = self.selections.get(dimension, frozenset())
        if value in current:
            return self.with_selection(dimension, current - {value})
        return self.with_selection(dimension, current | {value})

    def toggle_category(self, value: str) -> "FilterCriteria":
        if value in self.category:
            return self.model_copy(update={"category": self.category - {value}})
        return self.model_copy(update={"category": self.category | {value}})

    def with_category(self, *values: str) -> "FilterCriteria":
        return self.model_copy(update={"category": frozenset(values)})

    def with_date_range(self, from_date: str = "", to_date: str = "") -> "FilterCriteria":
        return self.model_copy(
            update={"date_range": DateRange(from_date=from_date, to_date=to_date)}
        )

    def cleared(self) -> "FilterCriteria":
        """The "clear all filters" transition."""
        return FilterCriteria()

    def merge(self, other: "FilterCriteria") -> "FilterCriteria":
        """
        Combine two criteria over disjoint dimensions.

        Raises:
            ValueError: If both criteria constrain the same dimension
        """
        overlap: List[str] = sorted(
            set(self.active_selections()) & set(other.active_selections())
        )
        if self.search and other.search:
            overlap.append("search")
        if self.has_date_range and other.has_date_range:
            overlap.append("date_range")
        if self.category and other.category:
            overlap.append("category")
        if overlap:
            raise ValueError(f"Criteria overlap on: {', '.join(overlap)}")

        selections = dict(self.active_selections())
        selections.update(other.active_selections())
        return FilterCriteria(
            search=self.search or other.search,
            selections=selections,
            date_range=self.date_range if self.has_date_range else other.date_range,
            category=self.category or other.category,
        )


class FilterResult(BaseModel):
    """Result of applying a single filter stage."""

    passed_records: List[Any] = Field(default_factory=list)
    rejected_records: List[Any] = Field(default_factory=list)
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Input position -> rejection reason"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_records)


class StageResult(BaseModel):
    """Result of a single filter stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    rejection_reasons: List[str] = Field(default_factory=list)


class FilterOutcome(BaseModel):
    """Complete result of a filter pass."""

    record_type: RecordType
    criteria: FilterCriteria
    records: List[Any] = Field(default_factory=list)
    total_count: int = 0
    audit_trail: List[StageResult] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def visible_count(self) -> int:
        return len(self.records)

    @property
    def hidden_count(self) -> int:
        return self.total_count - self.visible_count
