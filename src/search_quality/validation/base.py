"""Shared scaffolding for component validators."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from search_quality.models.domain import ValidationInput, ValidationResult
from search_quality.observability.logger import get_logger

logger = get_logger("validation")


@dataclass
class Findings:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    metrics: dict[str, float] = field(default_factory=dict)


class BaseValidator(ABC):
    """Validates one pipeline stage. Problems are reported, never raised."""

    name: str

    def validate(self, data: ValidationInput) -> ValidationResult:
        start = time.monotonic()
        findings = Findings()
        try:
            valid, confidence = self._check(data, findings)
        except Exception as e:
            logger.exception("validator_error", component=self.name)
            findings.errors.append(f"{self.name.capitalize()} validation error: {e}")
            valid, confidence = False, 0.0

        return ValidationResult(
            component_name=self.name,
            valid=valid,
            confidence=confidence,
            errors=findings.errors,
            warnings=findings.warnings,
            metrics=findings.metrics,
            duration_ms=int((time.monotonic() - start) * 1000),
        )

    @abstractmethod
    def _check(self, data: ValidationInput, findings: Findings) -> tuple[bool, float]:
        """Populate findings and return (valid, confidence)."""
