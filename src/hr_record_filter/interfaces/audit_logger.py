"""
Audit Logger Protocol.

Tracks what a filter pass did: which stages ran, how many records each
let through and why records were hidden. Purely observational; it has no
effect on the filtered result.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_record_filtered(
        self,
        record_label: str,
        stage_name: str,
        reason: str,
    ) -> None:
        """Log that a record was hidden by a stage."""
        ...

    def log_pass_end(
        self,
        record_type: str,
        visible_count: int,
        total_count: int,
        duration_seconds: float,
    ) -> None:
        """Log what the list view shows after a complete pass."""
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an anomaly or warning.

        Args:
            message: Description of the anomaly
            severity: INFO, WARNING, or ERROR
            context: Optional additional context
        """
        ...
