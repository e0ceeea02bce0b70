"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from search_quality.scoring.sessions import SessionRegistry
from search_quality.validation.pipeline import ValidationPipeline


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


def get_validation_pipeline(request: Request) -> ValidationPipeline:
    return request.app.state.validation_pipeline
