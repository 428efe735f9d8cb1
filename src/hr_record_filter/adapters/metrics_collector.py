"""
In-Memory Metrics Collector.

Keeps filter-pass timings and counts in memory. ``get_metrics`` reports
count/total/max/last per metric name, which is enough to see whether a
list view is drifting towards the one-frame budget.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MetricSample:
    """One recorded value."""

    kind: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    recorded_at: str = field(default_factory=lambda: datetime.now().isoformat())


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._samples: Dict[str, List[MetricSample]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, MetricSample("timing", duration_seconds, dict(tags or {})))

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, MetricSample("count", value, dict(tags or {})))

    def samples(self, name: str) -> List[MetricSample]:
        with self._lock:
            return list(self._samples.get(name, []))

    def get_metrics(self) -> Dict[str, Any]:
        with self._lock:
            summary = {}
            for name, samples in self._samples.items():
                values = [s.value for s in samples]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "max": max(values),
                    "last": values[-1],
                }
            return summary

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def _record(self, name: str, sample: MetricSample) -> None:
        with self._lock:
            self._samples.setdefault(name, []).append(sample)
