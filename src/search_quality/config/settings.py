"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Drift detection
    drift_threshold: float = 0.15
    adjustment_threshold: float = 0.25
    retrain_threshold: float = 0.40
    historical_window: int = 100
    min_samples_for_analysis: int = 10

    # Validation pipeline
    min_confidence_threshold: float = 0.6
    enable_strict_mode: bool = False
    log_failures: bool = True
    max_processing_time_ms: int = 30000
    audit_log_max_entries: int = 1000
    response_confidence_gated: bool = False

    # Storage paths
    score_db_path: str = "data/scores.db"
    persist_history: bool = True
    max_sessions: int = 1000

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {"env_file": ".env", "env_prefix": "SQ_"}
