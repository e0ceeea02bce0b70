"""Drift detection: compare the recent window mean against the older baseline."""

from __future__ import annotations

import math

from search_quality.config.engine import DiscriminatorConfig
from search_quality.drift.statistics import mean, population_variance
from search_quality.history.store import HistoryStore
from search_quality.models.domain import DriftAnalysis, Recommendation


class DriftAnalyzer:
    def __init__(self, config: DiscriminatorConfig) -> None:
        self._config = config

    def analyze(self, history: HistoryStore) -> DriftAnalysis:
        config = self._config
        if len(history) < config.min_samples_for_analysis:
            return DriftAnalysis(
                is_drifting=False,
                drift_magnitude=0.0,
                confidence=0.0,
                recommendation="maintain",
                details="Insufficient historical data for drift analysis",
            )

        recent_window = config.recent_window
        recent_scores = history.overall_scores(-recent_window)
        older_scores = history.overall_scores(-config.max_history, -recent_window)

        if not older_scores:
            return DriftAnalysis(
                is_drifting=False,
                drift_magnitude=0.0,
                confidence=0.5,
                recommendation="maintain",
                details="Building baseline - continue collecting data",
            )

        recent_avg = mean(recent_scores)
        older_avg = mean(older_scores)

        drift_magnitude = recent_avg - older_avg
        ratio = self.degradation_ratio(drift_magnitude, older_avg)
        is_drifting = ratio >= config.drift_threshold

        variance = population_variance(recent_scores)
        confidence = max(0.0, min(1.0, 1.0 - variance * 2))

        recommendation, details = self.recommend(ratio, drift_magnitude)

        return DriftAnalysis(
            is_drifting=is_drifting,
            drift_magnitude=drift_magnitude,
            confidence=confidence,
            recommendation=recommendation,
            details=details,
        )

    @staticmethod
    def degradation_ratio(drift_magnitude: float, older_avg: float) -> float:
        """|magnitude| relative to the baseline; a zero baseline counts as unbounded drift."""
        if older_avg == 0:
            return 0.0 if drift_magnitude == 0 else math.inf
        return abs(drift_magnitude) / older_avg

    def recommend(
        self, ratio: float, drift_magnitude: float
    ) -> tuple[Recommendation, str]:
        """Map a degradation ratio onto the maintain/adjust/retrain ladder.

        Minor drift (above drift_threshold, below adjustment_threshold) still
        recommends "maintain" while ``is_drifting`` is reported as true.
        """
        config = self._config
        pct = f"{ratio * 100:.1f}"

        if ratio >= config.drift_threshold:
            if ratio >= config.retrain_threshold:
                return (
                    "retrain",
                    f"Significant degradation detected ({pct}%). Model retraining recommended.",
                )
            if ratio >= config.adjustment_threshold:
                return (
                    "adjust",
                    f"Moderate degradation detected ({pct}%). Consider adjusting model parameters.",
                )
            return "maintain", f"Minor drift detected ({pct}%). Monitor closely."

        if drift_magnitude > 0:
            return "maintain", f"Performance improving (+{pct}%)."
        return "maintain", "Performance is stable"
