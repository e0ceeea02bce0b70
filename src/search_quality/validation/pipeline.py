"""Component validation pipeline: retrieval -> reasoning -> response gating."""

from __future__ import annotations

import time

from search_quality.config.engine import ValidationConfig
from search_quality.models.domain import (
    AuditLogEntry,
    PipelineResult,
    ReasoningStep,
    SearchResult,
    ValidationInput,
    ValidationResult,
    ValidationStatistics,
)
from search_quality.observability.logger import get_logger
from search_quality.observability.metrics import log_pipeline_result
from search_quality.observability.tracing import TraceContext
from search_quality.scoring.discriminator import QualityDiscriminator
from search_quality.validation.audit import AuditLog
from search_quality.validation.base import BaseValidator
from search_quality.validation.reasoning import ReasoningValidator
from search_quality.validation.response import ResponseValidator
from search_quality.validation.retrieval import RetrievalValidator

logger = get_logger("validation_pipeline")


class ValidationPipeline:
    def __init__(
        self,
        config: ValidationConfig,
        discriminator: QualityDiscriminator,
        validators: list[BaseValidator] | None = None,
    ) -> None:
        self._config = config
        if validators is None:
            validators = [
                RetrievalValidator(discriminator),
                ReasoningValidator(),
                ResponseValidator(
                    gate_on_confidence=config.response_confidence_gated,
                    min_confidence=config.min_confidence_threshold,
                ),
            ]
        self._validators = validators
        self._audit_log = AuditLog(config.audit_log_max_entries)
        self._total_runs = 0

    def validate(self, data: ValidationInput) -> PipelineResult:
        """Run every validator in order and decide whether the caller may proceed.

        Strict mode stops at the first invalid component and forbids
        proceeding on confidence alone.
        """
        strict = self._config.enable_strict_mode
        trace = TraceContext()
        components: list[ValidationResult] = []
        errors: list[str] = []
        crashed = False

        for validator in self._validators:
            try:
                with trace.span(validator.name):
                    result = validator.validate(data)
            except Exception as e:
                logger.exception("validator_crashed", component=validator.name)
                errors.append(f"Validator error: {e}")
                crashed = True
                if strict:
                    break
                continue

            components.append(result)
            if strict and not result.valid:
                errors.append(f"Component {result.component_name} failed validation")
                break

        # A validator that crashed outright leaves no component; the run is not valid
        overall_valid = all(c.valid for c in components) and not crashed
        overall_confidence = (
            sum(c.confidence for c in components) / len(components) if components else 0.0
        )
        can_proceed = overall_valid or (
            not strict and overall_confidence >= self._config.min_confidence_threshold
        )

        result = PipelineResult(
            components=components,
            overall_valid=overall_valid,
            overall_confidence=overall_confidence,
            can_proceed=can_proceed,
            errors=errors,
            total_processing_time_ms=int(trace.elapsed_ms),
        )
        self._total_runs += 1

        if self._config.log_failures and not overall_valid:
            self._audit_log.append(int(time.time() * 1000), result)

        if result.total_processing_time_ms > self._config.max_processing_time_ms:
            logger.warning(
                "validation_slow",
                trace_id=trace.trace_id,
                duration_ms=result.total_processing_time_ms,
                budget_ms=self._config.max_processing_time_ms,
                spans=trace.span_summary(),
            )
        log_pipeline_result(result, strict, trace.trace_id)
        return result

    def validate_retrieval(self, query: str, results: list[SearchResult]) -> ValidationResult:
        return self._component("retrieval").validate(
            ValidationInput(query=query, search_results=results, reasoning_steps=[], final_response="")
        )

    def validate_reasoning(self, steps: list[ReasoningStep]) -> ValidationResult:
        return self._component("reasoning").validate(
            ValidationInput(query="", search_results=[], reasoning_steps=steps, final_response="")
        )

    def validate_response(
        self, query: str, response: str, sources: list[SearchResult]
    ) -> ValidationResult:
        return self._component("response").validate(
            ValidationInput(
                query=query, search_results=sources, reasoning_steps=[], final_response=response
            )
        )

    def get_audit_log(self) -> list[AuditLogEntry]:
        return self._audit_log.entries()

    def clear_audit_log(self) -> None:
        self._audit_log.clear()

    def get_statistics(self) -> ValidationStatistics:
        return self._audit_log.statistics(total_runs=self._total_runs)

    def _component(self, name: str) -> BaseValidator:
        for validator in self._validators:
            if validator.name == name:
                return validator
        raise KeyError(f"No '{name}' validator configured")
