"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - EmployeeResolver: employee id -> name and department
    - JobTitleResolver: job id -> title
    - EmployeeDirectory: resolver that can also list employees and departments
    - FilterStage: one predicate of the pipeline
    - RecordFilterStrategy: record-type specific dimensions, dates, category
    - AuditLogger: audit trail of filter passes
    - MetricsCollector: timing and count metrics

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - Collaborators are read-only
"""

from hr_record_filter.interfaces.audit_logger import AuditLogger
from hr_record_filter.interfaces.filter_stage import FilterStage, RecordFilterStrategy
from hr_record_filter.interfaces.metrics_collector import MetricsCollector
from hr_record_filter.interfaces.resolvers import (
    EmployeeDirectory,
    EmployeeResolver,
    JobTitleResolver,
)

__all__ = [
    "AuditLogger",
    "FilterStage",
    "RecordFilterStrategy",
    "MetricsCollector",
    "EmployeeDirectory",
    "EmployeeResolver",
    "JobTitleResolver",
]
