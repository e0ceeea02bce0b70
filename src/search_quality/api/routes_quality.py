"""Quality scoring, drift and history endpoints, scoped per session."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from search_quality.api.dependencies import get_registry
from search_quality.exceptions import SessionLimitError, SessionNotFoundError
from search_quality.models.domain import UserFeedback
from search_quality.models.schemas import (
    DriftAnalysisModel,
    HistoryImportResponse,
    MetricsResponse,
    QualityScoreModel,
    ScoreRequest,
)
from search_quality.scoring.discriminator import QualityDiscriminator
from search_quality.scoring.sessions import SessionRegistry

router = APIRouter(prefix="/sessions/{session_id}")


def _existing(registry: SessionRegistry, session_id: str) -> QualityDiscriminator:
    try:
        return registry.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _session(registry: SessionRegistry, session_id: str) -> QualityDiscriminator:
    try:
        return registry.get_or_create(session_id)
    except SessionLimitError as e:
        raise HTTPException(status_code=429, detail=str(e))


@router.post("/score", response_model=QualityScoreModel)
async def score(
    session_id: str,
    request: ScoreRequest,
    registry: SessionRegistry = Depends(get_registry),
) -> QualityScoreModel:
    discriminator = _session(registry, session_id)
    feedback = (
        UserFeedback(relevant=request.feedback.relevant, rating=request.feedback.rating)
        if request.feedback is not None
        else None
    )
    result = discriminator.score_results(
        request.query, [r.to_domain() for r in request.results], feedback
    )
    return QualityScoreModel.model_validate(result)


@router.get("/metrics", response_model=MetricsResponse)
async def metrics(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> MetricsResponse:
    return MetricsResponse.model_validate(_existing(registry, session_id).get_metrics())


@router.get("/drift", response_model=DriftAnalysisModel)
async def drift(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> DriftAnalysisModel:
    return DriftAnalysisModel.model_validate(_existing(registry, session_id).analyze_drift())


@router.get("/history", response_model=list[QualityScoreModel])
async def export_history(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> list[QualityScoreModel]:
    scores = _existing(registry, session_id).export_historical_data()
    return [QualityScoreModel.model_validate(s) for s in scores]


@router.put("/history", response_model=HistoryImportResponse)
async def import_history(
    session_id: str,
    scores: list[QualityScoreModel],
    registry: SessionRegistry = Depends(get_registry),
) -> HistoryImportResponse:
    discriminator = _session(registry, session_id)
    discriminator.import_historical_data([s.to_domain() for s in scores])
    return HistoryImportResponse(
        session_id=session_id,
        imported=len(scores),
        retained=len(discriminator.history),
    )
