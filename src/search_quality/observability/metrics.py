"""Metric recording helpers for scores, drift and validation runs."""

from __future__ import annotations

from search_quality.models.domain import DriftAnalysis, PipelineResult, QualityScore
from search_quality.observability.logger import get_logger

logger = get_logger("metrics")


def log_quality_score(
    session_id: str,
    score: QualityScore,
    num_results: int,
    with_feedback: bool,
) -> None:
    logger.info(
        "quality_score",
        session_id=session_id,
        overall=round(score.overall_score, 4),
        relevance=round(score.relevance_score, 4),
        diversity=round(score.diversity_score, 4),
        freshness=round(score.freshness_score, 4),
        consistency=round(score.consistency_score, 4),
        num_results=num_results,
        with_feedback=with_feedback,
    )


def log_drift_analysis(session_id: str, drift: DriftAnalysis, history_size: int) -> None:
    log = logger.warning if drift.recommendation != "maintain" else logger.info
    log(
        "drift_analysis",
        session_id=session_id,
        is_drifting=drift.is_drifting,
        magnitude=round(drift.drift_magnitude, 4),
        confidence=round(drift.confidence, 4),
        recommendation=drift.recommendation,
        history_size=history_size,
    )


def log_pipeline_result(result: PipelineResult, strict: bool, trace_id: str) -> None:
    logger.info(
        "validation_pipeline",
        trace_id=trace_id,
        overall_valid=result.overall_valid,
        overall_confidence=round(result.overall_confidence, 4),
        can_proceed=result.can_proceed,
        strict=strict,
        components=[c.component_name for c in result.components],
        failed=[c.component_name for c in result.components if not c.valid],
        duration_ms=result.total_processing_time_ms,
    )
