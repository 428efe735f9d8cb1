"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from hr_record_filter.adapters.directory import InMemoryEmployeeDirectory, InMemoryJobCatalog
from hr_record_filter.config.models import FilterEngineConfig
from hr_record_filter.domain.entities import (
    AttendanceRecord,
    CandidateRecord,
    EmployeeRecord,
    JobPosting,
    LeaveRecord,
)
from hr_record_filter.pipeline.filter_context import FilterContext


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML and JSON fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def default_config() -> FilterEngineConfig:
    """Create default engine configuration."""
    return FilterEngineConfig()


@pytest.fixture
def employees() -> List[EmployeeRecord]:
    """Employee directory used to resolve names and departments."""
    return [
        EmployeeRecord(
            id="emp-1",
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            department="Engineering",
            position="Engineer",
        ),
        EmployeeRecord(
            id="emp-2",
            first_name="Grace",
            last_name="Hopper",
            email="grace@example.com",
            department="Engineering",
            position="Lead",
        ),
        EmployeeRecord(
            id="emp-3",
            first_name="Mary",
            last_name="Jackson",
            email="mary@example.com",
            department="Finance",
            position="Analyst",
        ),
        # No department on file
        EmployeeRecord(
            id="emp-4",
            first_name="Alan",
            last_name="Turing",
            email="alan@example.com",
            department=None,
            status="terminated",
        ),
    ]


@pytest.fixture
def jobs() -> List[JobPosting]:
    """Job postings used to resolve candidate job titles."""
    return [
        JobPosting(id="job-1", title="Backend Engineer", department="Engineering"),
        JobPosting(id="job-2", title="Data Analyst", department="Finance"),
        JobPosting(id="job-3", title="Office Manager", department="Operations", status="closed"),
    ]


@pytest.fixture
def directory(employees: List[EmployeeRecord]) -> InMemoryEmployeeDirectory:
    return InMemoryEmployeeDirectory(employees)


@pytest.fixture
def job_catalog(jobs: List[JobPosting]) -> InMemoryJobCatalog:
    return InMemoryJobCatalog(jobs)


@pytest.fixture
def context(
    directory: InMemoryEmployeeDirectory,
    job_catalog: InMemoryJobCatalog,
) -> FilterContext:
    """Filter context with both lookups."""
    return FilterContext(directory, job_catalog)


@pytest.fixture
def attendance_records() -> List[AttendanceRecord]:
    """Attendance entries covering every time category."""
    return [
        AttendanceRecord(
            id="att-1", employee_id="emp-1", date="2024-12-02",
            check_in="08:40", check_out="17:00", status="present",
        ),
        AttendanceRecord(
            id="att-2", employee_id="emp-2", date="2024-12-02",
            check_in="09:10", check_out="18:00", status="late",
        ),
        AttendanceRecord(
            id="att-3", employee_id="emp-3", date="2024-12-03",
            check_in=None, check_out=None, status="absent",
        ),
        AttendanceRecord(
            id="att-4", employee_id="emp-1", date="2024-12-04",
            check_in="08:55", check_out="17:30", status="present",
        ),
        # Employee id missing from the directory
        AttendanceRecord(
            id="att-5", employee_id="emp-404", date="2024-12-05",
            check_in="09:00", check_out="17:00", status="present",
        ),
    ]


@pytest.fixture
def leave_records() -> List[LeaveRecord]:
    """Leave requests with short, medium and long durations."""
    return [
        LeaveRecord(
            id="lv-1", employee_id="emp-1", leave_type="vacation",
            start_date="2024-12-20", end_date="2024-12-26", days_count=7,
            reason="Holidays", status="approved",
        ),
        LeaveRecord(
            id="lv-2", employee_id="emp-2", leave_type="sick",
            start_date="2024-12-01", end_date="2024-12-10", days_count=2,
            reason="Flu", status="approved",
        ),
        LeaveRecord(
            id="lv-3", employee_id="emp-3", leave_type="casual",
            start_date="2024-12-27", end_date="2024-12-31", days_count=4,
            reason=None, status="pending",
        ),
        LeaveRecord(
            id="lv-4", employee_id="emp-404", leave_type="personal",
            start_date="2025-01-02", end_date="2025-01-02", days_count=1,
            reason="Moving house", status="rejected",
        ),
    ]


@pytest.fixture
def candidate_records() -> List[CandidateRecord]:
    """Candidates across experience and salary bands."""
    return [
        CandidateRecord(
            id="cand-1", job_id="job-1", full_name="Linus Tor",
            email="linus@example.com", phone="555-0101",
            current_company="Kernel Corp", stage="interview",
            experience_years=5.5, expected_salary=150000,
        ),
        CandidateRecord(
            id="cand-2", job_id="job-2", full_name="Edsger Dijk",
            email="edsger@example.com", phone="555-0102",
            current_company=None, stage="screening",
            experience_years=1, expected_salary=45000,
        ),
        CandidateRecord(
            id="cand-3", job_id="job-1", full_name="Barbara Lisk",
            email="barbara@example.com", phone="555-0103",
            current_company="Clu Labs", stage="offer",
            experience_years=10, expected_salary=80000,
        ),
        # Posting was deleted
        CandidateRecord(
            id="cand-4", job_id="job-999", full_name="Ken Thom",
            email="ken@example.com", phone="555-0104",
            current_company="Bell", stage="hired",
            experience_years=2, expected_salary=120000,
        ),
    ]
