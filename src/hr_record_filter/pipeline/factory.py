"""
Pipeline Factory.

Wires a RecordFilterPipeline for a record type: strategy from the
registry, the four stages in their standard order, and a FilterContext
over the employee and job lookups.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from hr_record_filter.adapters.directory import InMemoryEmployeeDirectory, InMemoryJobCatalog
from hr_record_filter.config.models import FilterEngineConfig
from hr_record_filter.domain.entities import EmployeeRecord, JobPosting, RecordType
from hr_record_filter.domain.value_objects import FilterCriteria
from hr_record_filter.filters.category import CategoryFilter
from hr_record_filter.filters.date_range import DateRangeFilter
from hr_record_filter.filters.dimension import DimensionFilter
from hr_record_filter.filters.search import SearchFilter
from hr_record_filter.interfaces.audit_logger import AuditLogger
from hr_record_filter.interfaces.metrics_collector import MetricsCollector
from hr_record_filter.interfaces.resolvers import EmployeeResolver, JobTitleResolver
from hr_record_filter.pipeline.filter_context import FilterContext
from hr_record_filter.pipeline.record_pipeline import RecordFilterPipeline
from hr_record_filter.registry.strategy_registry import StrategyRegistry, default_registry
from hr_record_filter.validation.criteria_validator import CriteriaValidator

logger = logging.getLogger(__name__)

EmployeesSource = Union[EmployeeResolver, Iterable[EmployeeRecord]]
JobsSource = Union[JobTitleResolver, Iterable[JobPosting]]


def _employee_resolver(employees: Optional[EmployeesSource]) -> Optional[EmployeeResolver]:
    if employees is None or isinstance(employees, EmployeeResolver):
        return employees
    return InMemoryEmployeeDirectory(employees)


def _job_resolver(jobs: Optional[JobsSource]) -> Optional[JobTitleResolver]:
    if jobs is None or isinstance(jobs, JobTitleResolver):
        return jobs
    return InMemoryJobCatalog(jobs)


def create_pipeline(
    record_type: Union[RecordType, str],
    config: Optional[FilterEngineConfig] = None,
    employees: Optional[EmployeesSource] = None,
    jobs: Optional[JobsSource] = None,
    *,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
    validate_criteria: bool = False,
    registry: Optional[StrategyRegistry] = None,
) -> RecordFilterPipeline:
    """
    Build a ready-to-use pipeline.

    Args:
        record_type: Record type (enum or its value, e.g. "attendance")
        config: Engine configuration (defaults apply when omitted)
        employees: Employee resolver, or employee records to index
        jobs: Job title resolver, or job postings to index
        audit_logger: Optional audit logger
        metrics_collector: Optional metrics collector
        validate_criteria: Reject malformed criteria with ValidationError
        registry: Strategy registry (defaults to the built-in strategies)

    Returns:
        Configured RecordFilterPipeline
    """
    record_type = RecordType(record_type)
    config = config or FilterEngineConfig()
    registry = registry or default_registry()
    strategy = registry.create(record_type, config)

    stages: List[Any] = [
        SearchFilter(strategy, config.search_filter),
        DimensionFilter(strategy, config.dimension_filter),
        DateRangeFilter(strategy, config.date_range_filter),
        CategoryFilter(strategy, config.category_filter),
    ]
    context = FilterContext(
        _employee_resolver(employees),
        _job_resolver(jobs),
        unknown_label=config.unknown_label,
    )
    logger.debug(f"Created pipeline for {record_type.value} with {context!r}")

    return RecordFilterPipeline(
        strategy=strategy,
        stages=stages,
        config=config,
        context=context,
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
        criteria_validator=CriteriaValidator() if validate_criteria else None,
    )


def filter_records(
    records: Iterable[Any],
    criteria: Optional[FilterCriteria],
    record_type: Union[RecordType, str],
    *,
    employees: Optional[EmployeesSource] = None,
    jobs: Optional[JobsSource] = None,
    config: Optional[FilterEngineConfig] = None,
) -> List[Any]:
    """One-shot convenience: build a pipeline and filter."""
    pipeline = create_pipeline(record_type, config, employees, jobs)
    return pipeline.filter(records, criteria)
