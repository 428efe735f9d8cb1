"""
Domain Layer - Records and Value Objects.

Entities:
    - AttendanceRecord, LeaveRecord, CandidateRecord: the filtered lists
    - EmployeeRecord, JobPosting: directory data, also filterable
    - RecordType: Enum naming each record kind

Value Objects:
    - FilterCriteria, DateRange: what the user selected
    - FilterOption, DirectorySource: filter menu entries and where they come from
    - FilterResult, StageResult, FilterOutcome: what a pass produced
    - TimeCategory, DurationCategory: derived categories

Design Principles:
    - Immutable (frozen pydantic models)
    - Filtering never edits a record
    - No infrastructure dependencies
"""

from hr_record_filter.domain.entities import (
    AttendanceRecord,
    CandidateRecord,
    EmployeeRecord,
    FilterableRecord,
    JobPosting,
    LeaveRecord,
    RECORD_MODELS,
    RecordType,
    format_number,
)
from hr_record_filter.domain.value_objects import (
    DateMatchMode,
    DateRange,
    DirectorySource,
    DurationCategory,
    EmployeeProfile,
    FilterCriteria,
    FilterOption,
    FilterOutcome,
    FilterResult,
    StageResult,
    TimeCategory,
)

__all__ = [
    "AttendanceRecord",
    "CandidateRecord",
    "EmployeeRecord",
    "FilterableRecord",
    "JobPosting",
    "LeaveRecord",
    "RECORD_MODELS",
    "RecordType",
    "format_number",
    "DateMatchMode",
    "DateRange",
    "DirectorySource",
    "DurationCategory",
    "EmployeeProfile",
    "FilterCriteria",
    "FilterOption",
    "FilterOutcome",
    "FilterResult",
    "StageResult",
    "TimeCategory",
]
