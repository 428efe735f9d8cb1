"""
Record Strategies - Record-Type Specific Filter Knowledge.

Provides Strategy Pattern implementations for each record type:
    - AttendanceFilterStrategy: employee/department/status, single-day date,
      time-of-day category
    - LeaveFilterStrategy: employee/department/leave type/status, interval
      date, duration category
    - CandidateFilterStrategy: job title/stage plus experience and salary bands
    - EmployeeFilterStrategy: department/status
    - JobPostingFilterStrategy: lifecycle (active/archived)/department

Design Notes:
    - The generic stages ask the strategy for dimension values, date spans
      and categories; they never look at record fields directly
    - Thresholds and option lists come from config (DI via constructor)
    - Indirect dimensions resolve through the FilterContext
    - Employee-linked types draw their employee and department menus from
      the employee directory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple

from hr_record_filter.config.models import FilterEngineConfig
from hr_record_filter.domain.entities import (
    AttendanceRecord,
    CandidateRecord,
    EmployeeRecord,
    JobPosting,
    LeaveRecord,
    RecordType,
)
from hr_record_filter.domain.value_objects import (
    DateMatchMode,
    DirectorySource,
    DurationCategory,
    TimeCategory,
)
from hr_record_filter.filters.classifiers import (
    duration_category,
    experience_band,
    salary_band,
    time_category,
)

if TYPE_CHECKING:
    from hr_record_filter.pipeline.filter_context import FilterContext

DimensionExtractor = Callable[[Any, "FilterContext"], Optional[str]]


class BaseFilterStrategy:
    """Shared plumbing: dimension table lookup and no-date/no-category defaults."""

    record_type: RecordType
    date_mode: DateMatchMode = DateMatchMode.NONE

    def __init__(self, config: Optional[FilterEngineConfig] = None) -> None:
        self.config = config or FilterEngineConfig()
        self._dimensions: Dict[str, DimensionExtractor] = self._build_dimensions()

    def _build_dimensions(self) -> Dict[str, DimensionExtractor]:
        return {}

    def dimension_names(self) -> List[str]:
        return list(self._dimensions)

    def dimension_value(
        self, record: Any, dimension: str, context: "FilterContext"
    ) -> Optional[str]:
        extractor = self._dimensions.get(dimension)
        if extractor is None:
            return None
        return extractor(record, context)

    def date_span(self, record: Any) -> Optional[Tuple[str, str]]:
        return None

    def category_of(self, record: Any) -> Optional[str]:
        return None

    def category_values(self) -> List[str]:
        return []

    def fixed_choices(self) -> Dict[str, List[str]]:
        return {}

    def directory_dimensions(self) -> Dict[str, DirectorySource]:
        return {}

    def option_label(self, dimension: str, value: str, context: "FilterContext") -> str:
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(record_type={self.record_type.value})"


class EmployeeLinkedStrategy(BaseFilterStrategy):
    """
    Records that reference an employee by id.

    The employee and department menus list the whole employee directory,
    and employees are shown by name.
    """

    def directory_dimensions(self) -> Dict[str, DirectorySource]:
        return {
            "employee": DirectorySource.EMPLOYEES,
            "department": DirectorySource.DEPARTMENTS,
        }

    def option_label(self, dimension: str, value: str, context: "FilterContext") -> str:
        if dimension == "employee":
            return context.employee_name(value)
        return value


class AttendanceFilterStrategy(EmployeeLinkedStrategy):
    """Attendance entries: one day per record, classified by check-in time."""

    record_type = RecordType.ATTENDANCE
    date_mode = DateMatchMode.SINGLE_DAY

    def _build_dimensions(self) -> Dict[str, DimensionExtractor]:
        return {
            "employee": lambda r, ctx: r.employee_id,
            "department": lambda r, ctx: ctx.employee_department(r.employee_id),
            "status": lambda r, ctx: r.status,
        }

    def date_span(self, record: AttendanceRecord) -> Optional[Tuple[str, str]]:
        return record.date, record.date

    def category_of(self, record: AttendanceRecord) -> Optional[str]:
        category = time_category(record.check_in, self.config.classifiers.time)
        return category.value if category else None

    def category_values(self) -> List[str]:
        return [c.value for c in TimeCategory]

    def fixed_choices(self) -> Dict[str, List[str]]:
        return {"status": list(self.config.choices.attendance_statuses)}


class LeaveFilterStrategy(EmployeeLinkedStrategy):
    """
    Leave requests: a date interval per record.

    Date ranges select leaves that overlap the range, so a leave starting
    before ``from`` or ending after ``to`` is still shown.
    """

    record_type = RecordType.LEAVE
    date_mode = DateMatchMode.INTERVAL

    def _build_dimensions(self) -> Dict[str, DimensionExtractor]:
        return {
            "employee": lambda r, ctx: r.employee_id,
            "department": lambda r, ctx: ctx.employee_department(r.employee_id),
            "leave_type": lambda r, ctx: r.leave_type,
            "status": lambda r, ctx: r.status,
        }

    def date_span(self, record: LeaveRecord) -> Optional[Tuple[str, str]]:
        return record.start_date, record.end_date

    def category_of(self, record: LeaveRecord) -> Optional[str]:
        category = duration_category(record.days_count, self.config.classifiers.duration)
        return category.value if category else None

    def category_values(self) -> List[str]:
        return [c.value for c in DurationCategory]

    def fixed_choices(self) -> Dict[str, List[str]]:
        return {
            "leave_type": list(self.config.choices.leave_types),
            "status": list(self.config.choices.leave_statuses),
        }


class CandidateFilterStrategy(BaseFilterStrategy):
    """
    Recruitment candidates.

    Experience and salary are filtered through their bands: a candidate
    matches a multi-select band filter iff its computed band is selected.
    """

    record_type = RecordType.CANDIDATE

    def _build_dimensions(self) -> Dict[str, DimensionExtractor]:
        classifiers = self.config.classifiers
        return {
            "job_title": lambda r, ctx: ctx.job_title(r.job_id),
            "stage": lambda r, ctx: r.stage,
            "experience": lambda r, ctx: experience_band(
                r.experience_years, classifiers.experience
            ),
            "salary": lambda r, ctx: salary_band(r.expected_salary, classifiers.salary),
        }

    def fixed_choices(self) -> Dict[str, List[str]]:
        classifiers = self.config.classifiers
        return {
            "stage": list(self.config.choices.candidate_stages),
            "experience": list(classifiers.experience.labels),
            "salary": list(classifiers.salary.labels),
        }


class EmployeeFilterStrategy(BaseFilterStrategy):
    """Employee directory listing."""

    record_type = RecordType.EMPLOYEE

    def _build_dimensions(self) -> Dict[str, DimensionExtractor]:
        return {
            "department": lambda r, ctx: r.department or ctx.unknown_label,
            "status": lambda r, ctx: r.status,
        }

    def fixed_choices(self) -> Dict[str, List[str]]:
        return {"status": list(self.config.choices.employee_statuses)}


class JobPostingFilterStrategy(BaseFilterStrategy):
    """Job postings, split into active (open) and archived tabs."""

    record_type = RecordType.JOB

    def _build_dimensions(self) -> Dict[str, DimensionExtractor]:
        return {
            "lifecycle": lambda r, ctx: "active" if r.is_active else "archived",
            "department": lambda r, ctx: r.department or ctx.unknown_label,
        }

    def fixed_choices(self) -> Dict[str, List[str]]:
        return {"lifecycle": ["active", "archived"]}


# =============================================================================
# Strategy Table
# =============================================================================

STRATEGY_CLASSES = {
    RecordType.ATTENDANCE: AttendanceFilterStrategy,
    RecordType.LEAVE: LeaveFilterStrategy,
    RecordType.CANDIDATE: CandidateFilterStrategy,
    RecordType.EMPLOYEE: EmployeeFilterStrategy,
    RecordType.JOB: JobPostingFilterStrategy,
}
