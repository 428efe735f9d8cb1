"""
HR Record Filter - Client-Side Filtering for HR List Views.

Filters in-memory collections of HR records (attendance, leave requests,
recruitment candidates, employees, job postings) by free-text search,
multi-select dimensions, date ranges and derived categories. Every pass is
a pure function of the records and an immutable FilterCriteria value.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Strategy Pattern for record-type specific logic
    - Configuration-driven thresholds via YAML

Main Components:
    - domain: Records, criteria and result value objects
    - interfaces: Protocols for lookups, stages, logging, metrics
    - filters: Classifiers, predicate stages, record strategies
    - pipeline: Orchestration, lookup context, filter options
    - adapters: In-memory lookups, payload loader, loggers
    - config: Configuration models and loaders

Example:
    >>> from hr_record_filter import FilterCriteria, create_pipeline
    >>> pipeline = create_pipeline("attendance", employees=employees)
    >>> criteria = FilterCriteria().toggle("status", "present").with_category("late")
    >>> visible = pipeline.filter(attendance, criteria)
"""

import logging

from hr_record_filter.domain import (
    AttendanceRecord,
    CandidateRecord,
    DateRange,
    EmployeeRecord,
    FilterCriteria,
    FilterOption,
    FilterOutcome,
    JobPosting,
    LeaveRecord,
    RecordType,
)
from hr_record_filter.config import FilterEngineConfig, load_config
from hr_record_filter.pipeline import (
    FilterContext,
    RecordFilterPipeline,
    build_filter_options,
    create_pipeline,
    filter_records,
)

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for HR Record Filter.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import hr_record_filter
        >>> hr_record_filter.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("hr_record_filter").setLevel(level)


__all__ = [
    "AttendanceRecord",
    "CandidateRecord",
    "DateRange",
    "EmployeeRecord",
    "FilterCriteria",
    "FilterOption",
    "FilterOutcome",
    "JobPosting",
    "LeaveRecord",
    "RecordType",
    "FilterEngineConfig",
    "load_config",
    "FilterContext",
    "RecordFilterPipeline",
    "build_filter_options",
    "create_pipeline",
    "filter_records",
    "configure_logging",
]
