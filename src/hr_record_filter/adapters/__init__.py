"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols in ``interfaces`` plus the
boundary to the backend payloads. Following the Hexagonal Architecture
(Ports & Adapters) pattern.

Lookups:
    - InMemoryEmployeeDirectory: EmployeeResolver over fetched employees
    - InMemoryJobCatalog: JobTitleResolver over fetched job postings

Payloads:
    - RecordPayloadLoader: JSON arrays -> typed records

Loggers / Metrics:
    - ConsoleAuditLogger: audit trail on the console
    - InMemoryMetricsCollector: timings and counts in memory

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No filtering logic in adapters
"""

from hr_record_filter.adapters.console_logger import ConsoleAuditLogger
from hr_record_filter.adapters.directory import InMemoryEmployeeDirectory, InMemoryJobCatalog
from hr_record_filter.adapters.metrics_collector import InMemoryMetricsCollector, MetricSample
from hr_record_filter.adapters.payload_loader import LoadResult, PayloadError, RecordPayloadLoader

__all__ = [
    "ConsoleAuditLogger",
    "InMemoryEmployeeDirectory",
    "InMemoryJobCatalog",
    "InMemoryMetricsCollector",
    "MetricSample",
    "LoadResult",
    "PayloadError",
    "RecordPayloadLoader",
]
