"""
Filter Context - Resolution of Indirect Fields.

Records reference employees and job postings by id. The FilterContext
wraps the injected lookup capabilities and turns every unresolvable
reference into the configured sentinel label ("Unknown"), so filtering
never fails on dangling ids.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from hr_record_filter.domain.value_objects import EmployeeProfile
from hr_record_filter.interfaces.resolvers import (
    EmployeeDirectory,
    EmployeeResolver,
    JobTitleResolver,
)

logger = logging.getLogger(__name__)

DEFAULT_UNKNOWN_LABEL = "Unknown"


class FilterContext:
    """Read-only lookups available to filter stages during a pass."""

    def __init__(
        self,
        employees: Optional[EmployeeResolver] = None,
        jobs: Optional[JobTitleResolver] = None,
        *,
        unknown_label: str = DEFAULT_UNKNOWN_LABEL,
    ) -> None:
        """
        Initialize filter context.

        Args:
            employees: Employee lookup (attendance and leave records)
            jobs: Job title lookup (candidates)
            unknown_label: Value used for anything that cannot be resolved
        """
        self._employees = employees
        self._jobs = jobs
        self.unknown_label = unknown_label

    def _profile(self, employee_id: Optional[str]) -> Optional[EmployeeProfile]:
        if self._employees is None or not employee_id:
            return None
        return self._employees.resolve(employee_id)

    def employee_name(self, employee_id: Optional[str]) -> str:
        profile = self._profile(employee_id)
        if profile is None or not profile.name:
            return self.unknown_label
        return profile.name

    def employee_department(self, employee_id: Optional[str]) -> str:
        profile = self._profile(employee_id)
        if profile is None or not profile.department:
            return self.unknown_label
        return profile.department

    def job_title(self, job_id: Optional[str]) -> str:
        if self._jobs is None or not job_id:
            return self.unknown_label
        return self._jobs.resolve_title(job_id) or self.unknown_label

    def directory_entries(self) -> Optional[List[Tuple[str, EmployeeProfile]]]:
        """Every listed employee, or None when the lookup cannot list."""
        if not isinstance(self._employees, EmployeeDirectory):
            return None
        return self._employees.entries()

    def directory_departments(self) -> Optional[List[str]]:
        if not isinstance(self._employees, EmployeeDirectory):
            return None
        return self._employees.departments()

    @property
    def has_employees(self) -> bool:
        return self._employees is not None

    @property
    def has_jobs(self) -> bool:
        return self._jobs is not None

    def __repr__(self) -> str:
        return (
            f"FilterContext(employees={self.has_employees}, "
            f"jobs={self.has_jobs}, unknown_label={self.unknown_label!r})"
        )
