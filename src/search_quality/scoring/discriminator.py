"""Quality discriminator: scores search batches, keeps their history, reports drift."""

from __future__ import annotations

from collections.abc import Iterable

from search_quality.config.engine import DiscriminatorConfig
from search_quality.drift.analyzer import DriftAnalyzer
from search_quality.drift.statistics import mean
from search_quality.drift.trend import classify_trend
from search_quality.history.store import HistoryStore
from search_quality.models.domain import (
    DriftAnalysis,
    QualityMetrics,
    QualityScore,
    SearchResult,
    Trend,
    UserFeedback,
)
from search_quality.observability.metrics import log_drift_analysis, log_quality_score
from search_quality.scoring.score_calculator import ScoreCalculator, now_ms


class QualityDiscriminator:
    """One instance per logical session; never shared through module globals."""

    def __init__(
        self,
        config: DiscriminatorConfig | None = None,
        calculator: ScoreCalculator | None = None,
        session_id: str = "default",
    ) -> None:
        self.config = config or DiscriminatorConfig()
        self.session_id = session_id
        self._calculator = calculator or ScoreCalculator()
        self._history = HistoryStore(self.config.historical_window)
        self._drift = DriftAnalyzer(self.config)

    @property
    def history(self) -> HistoryStore:
        return self._history

    def compute_score(
        self,
        query: str,
        results: list[SearchResult],
        feedback: UserFeedback | None = None,
    ) -> QualityScore:
        """Score without recording, for what-if analysis."""
        latest = self._history.latest()
        timestamp = now_ms()
        if latest is not None and latest.timestamp > timestamp:
            timestamp = latest.timestamp
        return self._calculator.compute(query, results, feedback, timestamp=timestamp)

    def record(self, score: QualityScore) -> QualityScore:
        return self._history.append(score)

    def score_results(
        self,
        query: str,
        results: list[SearchResult],
        feedback: UserFeedback | None = None,
    ) -> QualityScore:
        score = self.record(self.compute_score(query, results, feedback))
        log_quality_score(self.session_id, score, len(results), feedback is not None)
        return score

    def analyze_drift(self) -> DriftAnalysis:
        return self._drift.analyze(self._history)

    def recent_trend(self) -> Trend:
        return classify_trend(self._history)

    def get_metrics(self) -> QualityMetrics:
        current = self._history.latest() or QualityScore(
            overall_score=0.0,
            relevance_score=0.0,
            diversity_score=0.0,
            freshness_score=0.0,
            consistency_score=0.0,
            timestamp=now_ms(),
        )
        drift = self.analyze_drift()
        log_drift_analysis(self.session_id, drift, len(self._history))

        return QualityMetrics(
            current_score=current,
            historical_average=mean(self._history.overall_scores()),
            recent_trend=self.recent_trend(),
            drift_detected=drift.is_drifting,
            drift_analysis=drift,
        )

    def export_historical_data(self) -> list[QualityScore]:
        return self._history.export_snapshot()

    def import_historical_data(self, scores: Iterable[QualityScore]) -> None:
        self._history.import_snapshot(scores)
