"""
Unit Tests for Filter Options.

Test Aspects Covered:
    ✅ Business Logic: Fixed option lists from configuration
    ✅ Business Logic: Employee and department menus from the employee directory
    ✅ Business Logic: Observed values in first-seen order without a directory
    ✅ Edge Cases: "Unknown" sentinel, dangling ids and empty values excluded
"""

from __future__ import annotations

from typing import List, Optional

from hr_record_filter.adapters.directory import InMemoryEmployeeDirectory
from hr_record_filter.config.models import ChoicesConfig, FilterEngineConfig
from hr_record_filter.domain.entities import (
    AttendanceRecord,
    CandidateRecord,
    EmployeeRecord,
    LeaveRecord,
)
from hr_record_filter.domain.value_objects import EmployeeProfile, FilterOption
from hr_record_filter.filters.strategies import (
    AttendanceFilterStrategy,
    CandidateFilterStrategy,
    EmployeeFilterStrategy,
    LeaveFilterStrategy,
)
from hr_record_filter.pipeline.facets import build_category_options, build_filter_options
from hr_record_filter.pipeline.filter_context import FilterContext


def values(options: List[FilterOption]) -> List[str]:
    return [option.value for option in options]


class LookupOnlyResolver:
    """Resolves ids but cannot list the directory."""

    def resolve(self, employee_id: str) -> Optional[EmployeeProfile]:
        if employee_id == "emp-1":
            return EmployeeProfile(name="Ada Lovelace", department="Engineering")
        return None


class TestBuildFilterOptions:
    """Test cases for build_filter_options."""

    def test_attendance_options(
        self,
        attendance_records: List[AttendanceRecord],
        context: FilterContext,
    ) -> None:
        """
        SCENARIO: Options for the attendance filter menus
        EXPECTED: Directory departments and employees, fixed status list
        """
        # Act
        options = build_filter_options(AttendanceFilterStrategy(), attendance_records, context)

        # Assert
        assert values(options["department"]) == ["Engineering", "Finance"]
        assert values(options["employee"]) == ["emp-1", "emp-2", "emp-3", "emp-4"]
        assert values(options["status"]) == ["present", "absent", "late", "half-day", "on-leave"]

    def test_employee_options_labelled_by_name(
        self,
        attendance_records: List[AttendanceRecord],
        context: FilterContext,
    ) -> None:
        options = build_filter_options(AttendanceFilterStrategy(), attendance_records, context)

        assert options["employee"][0] == FilterOption(value="emp-1", label="Ada Lovelace")
        assert [o.label for o in options["employee"]] == [
            "Ada Lovelace",
            "Grace Hopper",
            "Mary Jackson",
            "Alan Turing",
        ]
        assert options["status"][0] == FilterOption(value="present", label="present")

    def test_directory_options_ignore_records(self) -> None:
        """
        SCENARIO: Directory with an Eng and a Finance employee; records
                  reference the Eng employee and an id missing from the directory
        EXPECTED: Both departments offered, only directory employees offered
        """
        # Arrange
        directory = InMemoryEmployeeDirectory([
            EmployeeRecord(id="e1", first_name="Ada", last_name="L", department="Eng"),
            EmployeeRecord(id="e2", first_name="Grace", last_name="H", department="Finance"),
        ])
        records = [
            AttendanceRecord(employee_id="e1", date="2024-12-02", status="present"),
            AttendanceRecord(employee_id="ghost", date="2024-12-02", status="present"),
        ]

        # Act
        options = build_filter_options(
            AttendanceFilterStrategy(), records, FilterContext(directory)
        )

        # Assert
        assert values(options["department"]) == ["Eng", "Finance"]
        assert options["employee"] == [
            FilterOption(value="e1", label="Ada L"),
            FilterOption(value="e2", label="Grace H"),
        ]

    def test_leave_options_from_directory(
        self,
        leave_records: List[LeaveRecord],
        context: FilterContext,
    ) -> None:
        options = build_filter_options(LeaveFilterStrategy(), leave_records[:1], context)

        assert values(options["department"]) == ["Engineering", "Finance"]
        assert len(options["employee"]) == 4

    def test_observed_values_without_listing(
        self,
        attendance_records: List[AttendanceRecord],
    ) -> None:
        """
        SCENARIO: Lookup can resolve ids but not list the directory
        EXPECTED: Observed values in first-seen order, "Unknown" excluded
        """
        context = FilterContext(LookupOnlyResolver())

        options = build_filter_options(AttendanceFilterStrategy(), attendance_records, context)

        assert values(options["department"]) == ["Engineering"]
        assert values(options["employee"]) == ["emp-1", "emp-2", "emp-3", "emp-404"]
        assert options["employee"][0].label == "Ada Lovelace"
        assert options["employee"][1].label == "Unknown"

    def test_unique_job_titles_exclude_unknown(
        self,
        candidate_records: List[CandidateRecord],
        context: FilterContext,
    ) -> None:
        """
        SCENARIO: One candidate applied to a deleted posting
        EXPECTED: Distinct resolved titles only
        """
        options = build_filter_options(CandidateFilterStrategy(), candidate_records, context)

        assert values(options["job_title"]) == ["Backend Engineer", "Data Analyst"]
        assert values(options["salary"]) == ["< $50k", "$50k - $80k", "$80k - $120k", "$120k+"]

    def test_employee_list_departments_observed(
        self,
        employees: List[EmployeeRecord],
        context: FilterContext,
    ) -> None:
        options = build_filter_options(EmployeeFilterStrategy(), employees[2:], context)

        assert values(options["department"]) == ["Finance"]

    def test_configured_choices(
        self,
        leave_records: List[LeaveRecord],
        context: FilterContext,
    ) -> None:
        config = FilterEngineConfig(choices=ChoicesConfig(leave_types=["casual", "sick"]))

        options = build_filter_options(LeaveFilterStrategy(config), leave_records, context)

        assert values(options["leave_type"]) == ["casual", "sick"]
        assert values(options["status"]) == ["pending", "approved", "rejected"]

    def test_empty_collection(self, context: FilterContext) -> None:
        """
        SCENARIO: No records loaded yet
        EXPECTED: Directory menus still filled, observed menus empty
        """
        with_directory = build_filter_options(AttendanceFilterStrategy(), [], context)
        without_lookups = build_filter_options(AttendanceFilterStrategy(), [], FilterContext())

        assert values(with_directory["department"]) == ["Engineering", "Finance"]
        assert without_lookups["department"] == []
        assert without_lookups["employee"] == []

    def test_category_options(self) -> None:
        assert build_category_options(AttendanceFilterStrategy()) == ["early", "on-time", "late"]
        assert build_category_options(LeaveFilterStrategy()) == ["short", "medium", "long"]
        assert build_category_options(CandidateFilterStrategy()) == []
