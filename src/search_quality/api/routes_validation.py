"""Validation pipeline endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from search_quality.api.dependencies import get_validation_pipeline
from search_quality.models.schemas import (
    AuditLogEntryModel,
    PipelineResponse,
    StatisticsResponse,
    ValidateRequest,
)
from search_quality.validation.pipeline import ValidationPipeline

router = APIRouter(prefix="/validate")


@router.post("", response_model=PipelineResponse)
async def validate(
    request: ValidateRequest,
    pipeline: ValidationPipeline = Depends(get_validation_pipeline),
) -> PipelineResponse:
    return PipelineResponse.model_validate(pipeline.validate(request.to_domain()))


@router.get("/audit", response_model=list[AuditLogEntryModel])
async def audit_log(
    pipeline: ValidationPipeline = Depends(get_validation_pipeline),
) -> list[AuditLogEntryModel]:
    return [AuditLogEntryModel.model_validate(e) for e in pipeline.get_audit_log()]


@router.delete("/audit", status_code=204)
async def clear_audit_log(
    pipeline: ValidationPipeline = Depends(get_validation_pipeline),
) -> None:
    pipeline.clear_audit_log()


@router.get("/statistics", response_model=StatisticsResponse)
async def statistics(
    pipeline: ValidationPipeline = Depends(get_validation_pipeline),
) -> StatisticsResponse:
    return StatisticsResponse.model_validate(pipeline.get_statistics())
