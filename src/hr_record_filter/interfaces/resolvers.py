"""
Lookup Protocols.

Attendance and leave records carry only an ``employee_id``; candidates only
a ``job_id``. Names, departments and job titles are looked up through these
read-only capabilities, which the host application supplies (usually backed
by the ``/employees`` and ``/jobs`` API responses).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from hr_record_filter.domain.value_objects import EmployeeProfile


@runtime_checkable
class EmployeeResolver(Protocol):
    """Resolves an employee id to name and department."""

    def resolve(self, employee_id: str) -> Optional["EmployeeProfile"]:
        """
        Look up an employee.

        Args:
            employee_id: Identifier stored on the record

        Returns:
            EmployeeProfile, or None if the id is unknown
        """
        ...


@runtime_checkable
class JobTitleResolver(Protocol):
    """Resolves a job posting id to its title."""

    def resolve_title(self, job_id: str) -> Optional[str]:
        """Return the job title, or None if the id is unknown."""
        ...


@runtime_checkable
class EmployeeDirectory(Protocol):
    """
    An EmployeeResolver that can also list its contents.

    Filter menus for employee and department are built from the full
    directory when the lookup supports listing; records referencing ids
    outside the directory never add an option.
    """

    def resolve(self, employee_id: str) -> Optional["EmployeeProfile"]:
        ...

    def entries(self) -> List[Tuple[str, "EmployeeProfile"]]:
        """(employee_id, profile) pairs in directory order."""
        ...

    def departments(self) -> List[str]:
        """Distinct non-empty departments in directory order."""
        ...
