"""
Filters Package - Predicate Stages, Classifiers and Record Strategies.

Stages:
    - SearchFilter: free-text substring search
    - DimensionFilter: multi-select set membership per dimension
    - DateRangeFilter: single-day or interval-overlap date ranges
    - CategoryFilter: derived categories (time-of-day, duration)

Record Strategies:
    - AttendanceFilterStrategy, LeaveFilterStrategy, CandidateFilterStrategy
    - EmployeeFilterStrategy, JobPostingFilterStrategy

Design Principles:
    - Each stage is independently testable
    - Stages are pure: no record is modified, order is preserved
    - Clear rejection reasons for the audit trail
"""

from hr_record_filter.filters.category import CategoryFilter
from hr_record_filter.filters.classifiers import (
    band_of,
    duration_category,
    experience_band,
    parse_clock_minutes,
    salary_band,
    time_category,
)
from hr_record_filter.filters.date_range import (
    DateRangeFilter,
    date_in_range,
    interval_overlaps,
)
from hr_record_filter.filters.dimension import DimensionFilter
from hr_record_filter.filters.search import SearchFilter, matches_search
from hr_record_filter.filters.strategies import (
    AttendanceFilterStrategy,
    BaseFilterStrategy,
    CandidateFilterStrategy,
    EmployeeFilterStrategy,
    JobPostingFilterStrategy,
    LeaveFilterStrategy,
)

__all__ = [
    "CategoryFilter",
    "DateRangeFilter",
    "DimensionFilter",
    "SearchFilter",
    "band_of",
    "date_in_range",
    "duration_category",
    "experience_band",
    "interval_overlaps",
    "matches_search",
    "parse_clock_minutes",
    "salary_band",
    "time_category",
    "AttendanceFilterStrategy",
    "BaseFilterStrategy",
    "CandidateFilterStrategy",
    "EmployeeFilterStrategy",
    "JobPostingFilterStrategy",
    "LeaveFilterStrategy",
]
