"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from search_quality.api.dependencies import get_registry, get_validation_pipeline
from search_quality.models.schemas import HealthResponse
from search_quality.scoring.sessions import SessionRegistry
from search_quality.validation.pipeline import ValidationPipeline

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    registry: SessionRegistry = Depends(get_registry),
    pipeline: ValidationPipeline = Depends(get_validation_pipeline),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        sessions=len(registry),
        audit_log_size=len(pipeline.get_audit_log()),
    )
