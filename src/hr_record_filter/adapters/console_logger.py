"""
Console Audit Logger.

Prints the audit trail of filter passes to the console, prefixed with a
short correlation id so interleaved passes can be told apart. Every pass
ends with a one-line summary of what the list view shows, e.g.::

    [10:42:07] [3f2a9c1e] [INFO ] attendance: showing 3 of 5 records (2 hidden: dimension_filter 2)
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional


class ConsoleAuditLogger:
    """AuditLogger that prints to stdout and counts hidden records per stage."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, also print stage starts and every hidden record
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None
        self._hidden_by_stage: Counter = Counter()

    @property
    def hidden_count(self) -> int:
        """Records hidden during the current pass."""
        return sum(self._hidden_by_stage.values())

    @property
    def hidden_by_stage(self) -> Dict[str, int]:
        return dict(self._hidden_by_stage)

    def set_correlation_id(self, correlation_id: str) -> None:
        """Start a new pass: later lines carry this id, counters restart."""
        self._correlation_id = correlation_id
        self._hidden_by_stage.clear()

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._emit("INFO", f"{stage_name}: checking {input_count} records")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._emit(
            "INFO",
            f"{stage_name}: {output_count} records visible "
            f"({duration_seconds * 1000:.2f}ms)",
        )

    def log_record_filtered(
        self,
        record_label: str,
        stage_name: str,
        reason: str,
    ) -> None:
        self._hidden_by_stage[stage_name] += 1
        if self._verbose:
            self._emit("DEBUG", f"{record_label} hidden by {stage_name}: {reason}")

    def log_pass_end(
        self,
        record_type: str,
        visible_count: int,
        total_count: int,
        duration_seconds: float,
    ) -> None:
        summary = f"{record_type}: showing {visible_count} of {total_count} records"
        hidden = total_count - visible_count
        if hidden:
            per_stage = ", ".join(
                f"{stage} {count}" for stage, count in self._hidden_by_stage.items()
            )
            summary += f" ({hidden} hidden: {per_stage})"
        if self._verbose:
            summary += f" in {duration_seconds * 1000:.2f}ms"
        self._emit("INFO", summary)

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._emit(severity, f"ANOMALY: {message}")

    def _emit(self, level: str, message: str) -> None:
        clock = datetime.now().strftime("%H:%M:%S")
        pass_id = self._correlation_id[:8] if self._correlation_id else "-" * 8
        print(f"[{clock}] [{pass_id}] [{level:5}] {message}")
