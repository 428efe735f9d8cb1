"""
Record Filter Pipeline - Main Orchestrator.

Runs the filter stages over an in-memory record collection. Each stage
narrows the output of the previous one, which makes the result the
conjunction of all active predicates while keeping the input order.

Guarantees:
    - Input records and the input list are never modified
    - filter(R, empty criteria) returns R unchanged
    - filter(filter(R, C), C) == filter(R, C)
    - No exception for well-typed input
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Any, Iterable, List, Optional, Tuple

from hr_record_filter.config.models import FilterEngineConfig
from hr_record_filter.domain.value_objects import (
    FilterCriteria,
    FilterOutcome,
    StageResult,
)
from hr_record_filter.interfaces.audit_logger import AuditLogger
from hr_record_filter.interfaces.filter_stage import FilterStage, RecordFilterStrategy
from hr_record_filter.interfaces.metrics_collector import MetricsCollector
from hr_record_filter.pipeline.filter_context import FilterContext
from hr_record_filter.validation.criteria_validator import CriteriaValidator

logger = logging.getLogger(__name__)


def record_label(record: Any, position: int) -> str:
    """Short human-readable reference to a record for audit logs."""
    record_id = getattr(record, "id", None)
    return f"#{record_id}" if record_id else f"[{position}]"


class RecordFilterPipeline:
    """Orchestrates a filter pass for one record type."""

    def __init__(
        self,
        strategy: RecordFilterStrategy,
        stages: List[FilterStage],
        config: Optional[FilterEngineConfig] = None,
        context: Optional[FilterContext] = None,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        criteria_validator: Optional[CriteriaValidator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            strategy: Record-type knowledge shared with the stages
            stages: Ordered list of filter stages
            config: Engine configuration
            context: Employee / job lookups (defaults to none: all "Unknown")
            audit_logger: For the audit trail (optional)
            metrics_collector: For timing metrics (optional)
            criteria_validator: Fail-fast criteria checks (optional)
        """
        self.strategy = strategy
        self.stages = stages
        self.config = config or FilterEngineConfig()
        self.context = context or FilterContext(unknown_label=self.config.unknown_label)
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.criteria_validator = criteria_validator

    @property
    def record_type(self):
        return self.strategy.record_type

    def filter(
        self,
        records: Iterable[Any],
        criteria: Optional[FilterCriteria] = None,
    ) -> List[Any]:
        """
        Return the visible records, in input order.

        Args:
            records: Records of this pipeline's record type
            criteria: Active criteria (None means no filters)

        Raises:
            ValidationError: Only when a criteria validator is configured
        """
        return self.run(records, criteria).records

    def run(
        self,
        records: Iterable[Any],
        criteria: Optional[FilterCriteria] = None,
    ) -> FilterOutcome:
        """
        Execute a filter pass with audit trail.

        Args:
            records: Records of this pipeline's record type
            criteria: Active criteria (None means no filters)

        Returns:
            FilterOutcome with visible records and per-stage results
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        criteria = criteria or FilterCriteria()
        snapshot = list(records)

        if self.audit_logger:
            self.audit_logger.set_correlation_id(correlation_id)

        if self.criteria_validator:
            self.criteria_validator.validate(criteria, self.strategy)
        self._report_ignored_selections(criteria)

        current = snapshot
        audit_trail: List[StageResult] = []

        for stage in self.stages:
            if not stage.is_active(criteria):
                continue
            stage_result, current = self._execute_stage(stage, current, criteria)
            audit_trail.append(stage_result)

        total_duration = time.perf_counter() - start_time
        if self.metrics_collector:
            tags = {"record_type": self.record_type.value}
            self.metrics_collector.record_timing("filter_pass_seconds", total_duration, tags)
            self.metrics_collector.record_count("records_visible", len(current), tags)

        if self.audit_logger:
            self.audit_logger.log_pass_end(
                self.record_type.value, len(current), len(snapshot), total_duration
            )

        logger.debug(
            f"Filtered {self.record_type.value}: {len(current)} of "
            f"{len(snapshot)} visible ({total_duration * 1000:.2f}ms)"
        )

        return FilterOutcome(
            record_type=self.record_type,
            criteria=criteria,
            records=current,
            total_count=len(snapshot),
            audit_trail=audit_trail,
            metadata=self._build_metadata(correlation_id, total_duration),
        )

    def _execute_stage(
        self,
        stage: FilterStage,
        records: List[Any],
        criteria: FilterCriteria,
    ) -> Tuple[StageResult, List[Any]]:
        """Execute a single filter stage."""
        stage_start = time.perf_counter()

        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.name, len(records))

        filter_result = stage.apply(records, criteria, self.context)

        stage_duration = time.perf_counter() - stage_start
        logger.debug(
            f"{stage.name}: {filter_result.passed_count}/{len(records)} passed "
            f"({stage_duration * 1000:.2f}ms)"
        )

        if self.audit_logger:
            for position, reason in filter_result.rejection_reasons.items():
                self.audit_logger.log_record_filtered(
                    record_label(records[position], position), stage.name, reason
                )
            self.audit_logger.log_stage_end(
                stage.name, filter_result.passed_count, stage_duration
            )

        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "stage_duration_seconds", stage_duration, {"stage": stage.name}
            )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=filter_result.passed_count,
            duration_seconds=stage_duration,
            rejection_reasons=list(filter_result.rejection_reasons.values()),
        )
        return stage_result, filter_result.passed_records

    def _report_ignored_selections(self, criteria: FilterCriteria) -> None:
        """Selections on dimensions this record type lacks match every record."""
        ignored = sorted(
            set(criteria.active_selections()) - set(self.strategy.dimension_names())
        )
        if not ignored:
            return
        message = f"Selections on {ignored} ignored for {self.record_type.value} records"
        logger.warning(message)
        if self.audit_logger:
            self.audit_logger.log_anomaly(message, "WARN", {"dimensions": ignored})

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
        }
