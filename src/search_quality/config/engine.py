"""Typed, validated configuration for the discriminator and validation pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from search_quality.config.settings import Settings
from search_quality.exceptions import ConfigurationError


@dataclass(frozen=True)
class DiscriminatorConfig:
    drift_threshold: float = 0.15
    adjustment_threshold: float = 0.25
    retrain_threshold: float = 0.40
    historical_window: int = 100
    min_samples_for_analysis: int = 10

    def __post_init__(self) -> None:
        if not 0 < self.drift_threshold < self.adjustment_threshold < self.retrain_threshold:
            raise ConfigurationError(
                "thresholds must satisfy 0 < drift < adjustment < retrain, got "
                f"{self.drift_threshold}/{self.adjustment_threshold}/{self.retrain_threshold}"
            )
        # floor(window / 3) must leave a non-empty recent window
        if self.historical_window < 3:
            raise ConfigurationError(
                f"historical_window must be >= 3, got {self.historical_window}"
            )
        if self.min_samples_for_analysis < 1:
            raise ConfigurationError(
                f"min_samples_for_analysis must be >= 1, got {self.min_samples_for_analysis}"
            )

    @property
    def recent_window(self) -> int:
        return self.historical_window // 3

    @property
    def max_history(self) -> int:
        return self.historical_window * 2

    @classmethod
    def from_settings(cls, settings: Settings) -> DiscriminatorConfig:
        return cls(
            drift_threshold=settings.drift_threshold,
            adjustment_threshold=settings.adjustment_threshold,
            retrain_threshold=settings.retrain_threshold,
            historical_window=settings.historical_window,
            min_samples_for_analysis=settings.min_samples_for_analysis,
        )


@dataclass(frozen=True)
class ValidationConfig:
    min_confidence_threshold: float = 0.6
    enable_strict_mode: bool = False
    log_failures: bool = True
    max_processing_time_ms: int = 30000
    audit_log_max_entries: int = 1000
    response_confidence_gated: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_confidence_threshold <= 1.0:
            raise ConfigurationError(
                f"min_confidence_threshold must be in [0, 1], got {self.min_confidence_threshold}"
            )
        if self.max_processing_time_ms <= 0:
            raise ConfigurationError(
                f"max_processing_time_ms must be positive, got {self.max_processing_time_ms}"
            )
        if self.audit_log_max_entries < 1:
            raise ConfigurationError(
                f"audit_log_max_entries must be >= 1, got {self.audit_log_max_entries}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> ValidationConfig:
        return cls(
            min_confidence_threshold=settings.min_confidence_threshold,
            enable_strict_mode=settings.enable_strict_mode,
            log_failures=settings.log_failures,
            max_processing_time_ms=settings.max_processing_time_ms,
            audit_log_max_entries=settings.audit_log_max_entries,
            response_confidence_gated=settings.response_confidence_gated,
        )
