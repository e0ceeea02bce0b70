"""Bounded, append-only history of quality scores."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import replace

from search_quality.models.domain import QualityScore


class HistoryStore:
    """Chronological score history holding at most ``2 * window`` entries.

    When an append would exceed that bound, only the most recent ``window``
    entries are kept. Discarded scores are gone for good.
    """

    def __init__(self, window: int) -> None:
        self._window = window
        self._scores: list[QualityScore] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._scores)

    def append(self, score: QualityScore) -> QualityScore:
        """Append ``score`` and return it as stored.

        A timestamp older than the latest entry is raised to match it.
        """
        with self._lock:
            if self._scores and score.timestamp < self._scores[-1].timestamp:
                score = replace(score, timestamp=self._scores[-1].timestamp)
            self._scores.append(score)
            if len(self._scores) > self._window * 2:
                self._scores = self._scores[-self._window :]
        return score

    def all(self) -> tuple[QualityScore, ...]:
        return tuple(self._scores)

    def latest(self) -> QualityScore | None:
        scores = self._scores
        return scores[-1] if scores else None

    def overall_scores(self, start: int | None = None, stop: int | None = None) -> list[float]:
        """Overall scores of ``scores[start:stop]``, using Python slice semantics."""
        return [s.overall_score for s in self._scores[start:stop]]

    def export_snapshot(self) -> list[QualityScore]:
        return list(self._scores)

    def import_snapshot(self, scores: Iterable[QualityScore]) -> None:
        incoming = list(scores)
        with self._lock:
            self._scores = incoming[-self._window :]
