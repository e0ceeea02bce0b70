"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Recommendation = Literal["maintain", "adjust", "retrain"]
Trend = Literal["improving", "stable", "declining"]


@dataclass
class SearchResult:
    id: str
    title: str
    snippet: str
    url: str
    source: str
    published_date: str | None = None
    add_score: float | None = None  # externally supplied quality score


@dataclass
class UserFeedback:
    relevant: bool
    rating: int | None = None  # 1-5


@dataclass(frozen=True)
class QualityScore:
    overall_score: float
    relevance_score: float
    diversity_score: float
    freshness_score: float
    consistency_score: float
    timestamp: int  # epoch ms


@dataclass
class DriftAnalysis:
    is_drifting: bool
    drift_magnitude: float  # signed, negative = degradation
    confidence: float
    recommendation: Recommendation
    details: str


@dataclass
class QualityMetrics:
    current_score: QualityScore
    historical_average: float
    recent_trend: Trend
    drift_detected: bool
    drift_analysis: DriftAnalysis


@dataclass
class ReasoningStep:
    input: str
    output: str
    confidence: float


@dataclass
class ValidationInput:
    query: str
    search_results: list[SearchResult]
    reasoning_steps: list[ReasoningStep]
    final_response: str


@dataclass
class ValidationResult:
    component_name: str
    valid: bool
    confidence: float
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    metrics: dict[str, float] = field(default_factory=dict)
    duration_ms: int = 0


@dataclass
class PipelineResult:
    components: list[ValidationResult]
    overall_valid: bool
    overall_confidence: float
    can_proceed: bool
    errors: list[str]
    total_processing_time_ms: int


@dataclass
class AuditLogEntry:
    timestamp: int  # epoch ms
    result: PipelineResult


@dataclass
class ValidationStatistics:
    total_validations: int  # logged (failed) runs only
    failed_validations: int
    avg_processing_time_ms: float
    component_failure_counts: dict[str, int]
    total_runs: int = 0  # every validate() call
