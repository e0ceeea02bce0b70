"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from search_quality.api.middleware import RequestContextMiddleware
from search_quality.api.routes_health import router as health_router
from search_quality.api.routes_quality import router as quality_router
from search_quality.api.routes_validation import router as validation_router
from search_quality.config.engine import DiscriminatorConfig, ValidationConfig
from search_quality.config.settings import Settings
from search_quality.exceptions import SessionLimitError
from search_quality.observability.logger import get_logger, setup_logging
from search_quality.scoring.sessions import SessionRegistry
from search_quality.storage.sqlite_score_store import SQLiteScoreStore
from search_quality.validation.pipeline import ValidationPipeline

logger = get_logger("app")

# Session whose history records every batch seen by the retrieval validator
VALIDATION_SESSION_ID = "validation"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_json)

    registry = SessionRegistry(
        DiscriminatorConfig.from_settings(settings), max_sessions=settings.max_sessions
    )
    validation_pipeline = ValidationPipeline(
        ValidationConfig.from_settings(settings),
        discriminator=registry.get_or_create(VALIDATION_SESSION_ID),
    )

    # Restore persisted histories
    score_store = None
    if settings.persist_history:
        Path(settings.score_db_path).parent.mkdir(parents=True, exist_ok=True)
        score_store = SQLiteScoreStore(settings.score_db_path)
        await score_store.initialize()
        for session_id in await score_store.list_sessions():
            scores = await score_store.load_history(session_id)
            try:
                registry.get_or_create(session_id).import_historical_data(scores)
            except SessionLimitError:
                logger.warning("session_not_restored", session_id=session_id)

    app.state.registry = registry
    app.state.validation_pipeline = validation_pipeline

    logger.info(
        "startup_complete",
        sessions=len(registry),
        persist_history=settings.persist_history,
    )

    yield

    # Shutdown: persist histories
    if score_store is not None:
        for session_id, discriminator in registry.items():
            await score_store.save_history(session_id, discriminator.export_historical_data())
    logger.info("shutdown_complete", sessions=len(registry))


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Search Quality Engine",
        version="1.0.0",
        description="Quality scoring, drift detection and validation gating for agentic search",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(quality_router, tags=["quality"])
    app.include_router(validation_router, tags=["validation"])
    return app
