"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from search_quality.models import domain


class SearchResultModel(BaseModel):
    id: str
    title: str = ""
    snippet: str = ""
    url: str = ""
    source: str = ""
    published_date: str | None = None
    add_score: float | None = Field(default=None, ge=0.0, le=1.0)

    def to_domain(self) -> domain.SearchResult:
        return domain.SearchResult(**self.model_dump())


class FeedbackModel(BaseModel):
    relevant: bool
    rating: int | None = Field(default=None, ge=1, le=5)


class ScoreRequest(BaseModel):
    query: str
    results: list[SearchResultModel] = Field(default_factory=list)
    feedback: FeedbackModel | None = None


class QualityScoreModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    overall_score: float
    relevance_score: float
    diversity_score: float
    freshness_score: float
    consistency_score: float
    timestamp: int

    def to_domain(self) -> domain.QualityScore:
        return domain.QualityScore(**self.model_dump())


class DriftAnalysisModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_drifting: bool
    drift_magnitude: float
    confidence: float
    recommendation: Literal["maintain", "adjust", "retrain"]
    details: str


class MetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_score: QualityScoreModel
    historical_average: float
    recent_trend: Literal["improving", "stable", "declining"]
    drift_detected: bool
    drift_analysis: DriftAnalysisModel


class HistoryImportResponse(BaseModel):
    session_id: str
    imported: int
    retained: int


class ReasoningStepModel(BaseModel):
    input: str = ""
    output: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class ValidateRequest(BaseModel):
    query: str
    search_results: list[SearchResultModel] = Field(default_factory=list)
    reasoning_steps: list[ReasoningStepModel] = Field(default_factory=list)
    final_response: str = ""

    def to_domain(self) -> domain.ValidationInput:
        return domain.ValidationInput(
            query=self.query,
            search_results=[r.to_domain() for r in self.search_results],
            reasoning_steps=[domain.ReasoningStep(**s.model_dump()) for s in self.reasoning_steps],
            final_response=self.final_response,
        )


class ValidationResultModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    component_name: str
    valid: bool
    confidence: float
    errors: list[str]
    warnings: list[str]
    metrics: dict[str, float]
    duration_ms: int


class PipelineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    components: list[ValidationResultModel]
    overall_valid: bool
    overall_confidence: float
    can_proceed: bool
    errors: list[str]
    total_processing_time_ms: int


class AuditLogEntryModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    timestamp: int
    result: PipelineResponse


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_validations: int
    failed_validations: int
    avg_processing_time_ms: float
    component_failure_counts: dict[str, int]
    total_runs: int


class HealthResponse(BaseModel):
    status: str
    sessions: int
    audit_log_size: int
