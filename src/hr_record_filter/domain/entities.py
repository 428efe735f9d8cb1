"""
Core Domain Entities.

Read-only records as delivered by the HR backend. Every record knows which
of its fields take part in free-text search; everything else about
filtering (dimensions, dates, categories) is described by the record-type
strategies in ``hr_record_filter.filters.strategies``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from hr_record_filter.pipeline.filter_context import FilterContext


class RecordType(str, Enum):
    """Kinds of records the engine can filter."""

    ATTENDANCE = "attendance"
    LEAVE = "leave"
    CANDIDATE = "candidate"
    EMPLOYEE = "employee"
    JOB = "job"


def format_number(value: Optional[float]) -> str:
    """Render a number the way it is displayed and searched (5.0 -> "5")."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _present(*values: Optional[str]) -> List[str]:
    return [v for v in values if v]


class AttendanceRecord(BaseModel):
    """A single day of attendance for one employee."""

    id: Optional[str] = Field(default=None, description="Backend identifier")
    employee_id: str = Field(..., description="Reference into the employee directory")
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    check_in: Optional[str] = Field(default=None, description="HH:MM")
    check_out: Optional[str] = Field(default=None, description="HH:MM")
    status: str = Field(..., description="present, absent, late, half-day, on-leave")
    notes: Optional[str] = None

    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}

    def searchable_fields(self, context: "FilterContext") -> List[str]:
        return _present(
            context.employee_name(self.employee_id),
            self.date,
            self.status,
            self.check_in,
            self.check_out,
        )


class LeaveRecord(BaseModel):
    """A leave request spanning one or more days."""

    id: Optional[str] = Field(default=None, description="Backend identifier")
    employee_id: str = Field(..., description="Reference into the employee directory")
    leave_type: str = Field(..., description="casual, sick, vacation, ...")
    start_date: str = Field(..., description="First day of leave (YYYY-MM-DD)")
    end_date: str = Field(..., description="Last day of leave (YYYY-MM-DD)")
    days_count: float = Field(..., description="Length of the leave in days")
    reason: Optional[str] = None
    status: str = Field(default="pending", description="pending, approved, rejected")

    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}

    def searchable_fields(self, context: "FilterContext") -> List[str]:
        return _present(
            context.employee_name(self.employee_id),
            self.leave_type,
            self.status,
            self.start_date,
            self.end_date,
            self.reason,
        )


class CandidateRecord(BaseModel):
    """A recruitment candidate applying for a job posting."""

    id: Optional[str] = Field(default=None, description="Backend identifier")
    job_id: str = Field(..., description="Reference into the job catalog")
    full_name: str
    email: str
    phone: str = ""
    current_company: Optional[str] = None
    stage: str = Field(default="applied", description="Hiring pipeline stage")
    experience_years: Optional[float] = Field(default=None, description="Years of experience")
    expected_salary: Optional[float] = Field(default=None, description="Expected yearly salary")

    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}

    def searchable_fields(self, context: "FilterContext") -> List[str]:
        return _present(
            self.full_name,
            self.email,
            self.phone,
            self.current_company,
            context.job_title(self.job_id),
            self.stage,
            format_number(self.experience_years),
            format_number(self.expected_salary),
        )


class EmployeeRecord(BaseModel):
    """An employee as listed in the directory."""

    id: str
    first_name: str
    last_name: str
    email: str = ""
    department: Optional[str] = None
    position: Optional[str] = None
    status: str = Field(default="active", description="active or terminated")

    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def searchable_fields(self, context: "FilterContext") -> List[str]:
        return _present(self.full_name, self.email, self.department)


class JobPosting(BaseModel):
    """An open or archived job posting."""

    id: str
    title: str
    department: Optional[str] = None
    location: Optional[str] = None
    status: str = Field(default="open", description="open, closed, archived")
    salary_range: Optional[str] = None

    model_config = {"frozen": True, "extra": "ignore", "coerce_numbers_to_str": True}

    @property
    def is_active(self) -> bool:
        return self.status == "open"

    def searchable_fields(self, context: "FilterContext") -> List[str]:
        return _present(self.title, self.department, self.location)


FilterableRecord = Union[
    AttendanceRecord,
    LeaveRecord,
    CandidateRecord,
    EmployeeRecord,
    JobPosting,
]

RECORD_MODELS = {
    RecordType.ATTENDANCE: AttendanceRecord,
    RecordType.LEAVE: LeaveRecord,
    RecordType.CANDIDATE: CandidateRecord,
    RecordType.EMPLOYEE: EmployeeRecord,
    RecordType.JOB: JobPosting,
}
