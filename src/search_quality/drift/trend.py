"""Trend classification from the regression slope of the latest scores."""

from __future__ import annotations

from search_quality.config.constants import (
    TREND_MIN_SAMPLES,
    TREND_SLOPE_THRESHOLD,
    TREND_WINDOW,
)
from search_quality.drift.statistics import linear_slope
from search_quality.history.store import HistoryStore
from search_quality.models.domain import Trend


def classify_slope(slope: float) -> Trend:
    if slope > TREND_SLOPE_THRESHOLD:
        return "improving"
    if slope < -TREND_SLOPE_THRESHOLD:
        return "declining"
    return "stable"


def classify_trend(history: HistoryStore) -> Trend:
    if len(history) < TREND_MIN_SAMPLES:
        return "stable"
    return classify_slope(linear_slope(history.overall_scores(-TREND_WINDOW)))
