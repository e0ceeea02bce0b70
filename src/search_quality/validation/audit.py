"""Bounded audit log of failed validation runs."""

from __future__ import annotations

from collections import Counter, deque

from search_quality.models.domain import AuditLogEntry, PipelineResult, ValidationStatistics


class AuditLog:
    """Keeps the ``max_entries`` most recent failures; older ones are evicted."""

    def __init__(self, max_entries: int = 1000) -> None:
        self._entries: deque[AuditLogEntry] = deque(maxlen=max_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, timestamp: int, result: PipelineResult) -> None:
        self._entries.append(AuditLogEntry(timestamp=timestamp, result=result))

    def entries(self) -> list[AuditLogEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def statistics(self, total_runs: int = 0) -> ValidationStatistics:
        """Aggregate over logged runs.

        Only failures are logged, so ``total_validations`` counts logged
        (failed) runs; ``total_runs`` carries the count of every run.
        """
        entries = list(self._entries)
        total = len(entries)
        failed = sum(1 for e in entries if not e.result.overall_valid)
        avg_time = (
            sum(e.result.total_processing_time_ms for e in entries) / total if total else 0.0
        )

        failures: Counter[str] = Counter()
        for entry in entries:
            for component in entry.result.components:
                if not component.valid:
                    failures[component.component_name] += 1

        return ValidationStatistics(
            total_validations=total,
            failed_validations=failed,
            avg_processing_time_ms=avg_time,
            component_failure_counts=dict(failures),
            total_runs=total_runs,
        )
