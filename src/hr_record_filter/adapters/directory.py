"""
In-Memory Lookups.

Resolver implementations over already-fetched collections (the
``/employees`` and ``/jobs`` responses). Both index by id once at
construction so each lookup during a pass is a dict access.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from hr_record_filter.domain.entities import EmployeeRecord, JobPosting
from hr_record_filter.domain.value_objects import EmployeeProfile

logger = logging.getLogger(__name__)


class InMemoryEmployeeDirectory:
    """EmployeeDirectory backed by a list of employees."""

    def __init__(self, employees: Iterable[EmployeeRecord]) -> None:
        self._employees: Dict[str, EmployeeRecord] = {}
        for employee in employees:
            if employee.id in self._employees:
                logger.warning(f"Duplicate employee id {employee.id}; keeping the first")
                continue
            self._employees[employee.id] = employee

    def resolve(self, employee_id: str) -> Optional[EmployeeProfile]:
        employee = self._employees.get(employee_id)
        if employee is None:
            return None
        return EmployeeProfile(name=employee.full_name, department=employee.department)

    def entries(self) -> List[Tuple[str, EmployeeProfile]]:
        return [
            (employee_id, EmployeeProfile(name=e.full_name, department=e.department))
            for employee_id, e in self._employees.items()
        ]

    def departments(self) -> List[str]:
        """Distinct non-empty departments, in directory order."""
        seen: Dict[str, None] = {}
        for employee in self._employees.values():
            if employee.department:
                seen.setdefault(employee.department, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self._employees)


class InMemoryJobCatalog:
    """JobTitleResolver backed by a list of job postings."""

    def __init__(self, jobs: Iterable[JobPosting]) -> None:
        self._titles: Dict[str, str] = {}
        for job in jobs:
            self._titles.setdefault(job.id, job.title)

    def resolve_title(self, job_id: str) -> Optional[str]:
        return self._titles.get(job_id)

    def __len__(self) -> int:
        return len(self._titles)
