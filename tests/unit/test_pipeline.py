"""Tests for pipeline orchestration, gating and the audit log."""

import pytest

from search_quality.config.engine import ValidationConfig
from search_quality.models.domain import (
    PipelineResult,
    ReasoningStep,
    ValidationInput,
    ValidationResult,
)
from search_quality.validation.audit import AuditLog
from search_quality.validation.base import BaseValidator, Findings
from search_quality.validation.pipeline import ValidationPipeline

GOOD_RESPONSE = (
    "This tutorial explains how Python asyncio schedules coroutines on an event loop [1]. " * 3
)


class _Fixed(BaseValidator):
    def __init__(self, name: str, valid: bool, confidence: float) -> None:
        self.name = name
        self._valid = valid
        self._confidence = confidence
        self.calls = 0

    def _check(self, data, findings: Findings):
        self.calls += 1
        return self._valid, self._confidence


class _Crashing:
    name = "crashing"

    def validate(self, data):
        raise RuntimeError("boom")


def _empty_input() -> ValidationInput:
    return ValidationInput(query="q", search_results=[], reasoning_steps=[], final_response="")


def _gating_validators():
    return [
        _Fixed("retrieval", True, 0.9),
        _Fixed("reasoning", False, 0.4),
        _Fixed("response", True, 0.9),
    ]


def test_non_strict_proceeds_on_confidence(discriminator):
    pipeline = ValidationPipeline(
        ValidationConfig(min_confidence_threshold=0.6), discriminator, _gating_validators()
    )
    result = pipeline.validate(_empty_input())
    assert [c.component_name for c in result.components] == ["retrieval", "reasoning", "response"]
    assert result.overall_valid is False
    assert result.overall_confidence == pytest.approx(0.7333, abs=1e-3)
    assert result.can_proceed is True
    assert result.errors == []


def test_strict_stops_at_first_failure(discriminator):
    validators = _gating_validators()
    pipeline = ValidationPipeline(
        ValidationConfig(min_confidence_threshold=0.6, enable_strict_mode=True),
        discriminator,
        validators,
    )
    result = pipeline.validate(_empty_input())
    assert [c.component_name for c in result.components] == ["retrieval", "reasoning"]
    assert validators[2].calls == 0
    assert result.overall_valid is False
    assert result.can_proceed is False
    assert result.errors == ["Component reasoning failed validation"]
    assert result.overall_confidence == pytest.approx(0.65)


def test_low_confidence_blocks_non_strict(discriminator):
    validators = [_Fixed("retrieval", False, 0.2), _Fixed("reasoning", True, 0.6)]
    pipeline = ValidationPipeline(ValidationConfig(), discriminator, validators)
    result = pipeline.validate(_empty_input())
    assert result.can_proceed is False


def test_all_valid_proceeds(discriminator):
    validators = [_Fixed("retrieval", True, 0.1), _Fixed("reasoning", True, 0.1)]
    pipeline = ValidationPipeline(
        ValidationConfig(enable_strict_mode=True), discriminator, validators
    )
    result = pipeline.validate(_empty_input())
    assert result.overall_valid is True
    assert result.can_proceed is True


def test_crashing_validator_is_recorded(discriminator):
    validators = [_Crashing(), _Fixed("response", True, 0.9)]
    pipeline = ValidationPipeline(ValidationConfig(), discriminator, validators)
    result = pipeline.validate(_empty_input())
    assert result.errors == ["Validator error: boom"]
    assert [c.component_name for c in result.components] == ["response"]
    assert result.overall_valid is False
    assert result.can_proceed is True


def test_crashing_validator_stops_strict_run(discriminator):
    validators = [_Crashing(), _Fixed("response", True, 0.9)]
    pipeline = ValidationPipeline(
        ValidationConfig(enable_strict_mode=True), discriminator, validators
    )
    result = pipeline.validate(_empty_input())
    assert result.components == []
    assert result.overall_confidence == 0.0
    assert result.can_proceed is False


def test_default_validators_end_to_end(discriminator, sample_results, reasoning_steps):
    pipeline = ValidationPipeline(ValidationConfig(), discriminator)
    result = pipeline.validate(
        ValidationInput(
            query="python asyncio tutorial",
            search_results=sample_results,
            reasoning_steps=reasoning_steps,
            final_response=GOOD_RESPONSE,
        )
    )
    assert [c.component_name for c in result.components] == ["retrieval", "reasoning", "response"]
    assert result.overall_valid is True
    assert result.can_proceed is True
    assert len(discriminator.history) == 1
    assert pipeline.get_audit_log() == []


def test_default_validators_on_empty_input(discriminator):
    pipeline = ValidationPipeline(ValidationConfig(), discriminator)
    result = pipeline.validate(_empty_input())
    assert all(not c.valid for c in result.components)
    assert result.overall_confidence == 0.0
    assert result.can_proceed is False


def test_response_gating_follows_config(discriminator):
    pipeline = ValidationPipeline(
        ValidationConfig(response_confidence_gated=True, min_confidence_threshold=0.8),
        discriminator,
    )
    result = pipeline.validate_response("python asyncio tutorial", "z" * 120, [])
    assert result.valid is False


def test_individual_stage_entry_points(discriminator, sample_results, reasoning_steps):
    pipeline = ValidationPipeline(ValidationConfig(), discriminator)
    assert pipeline.validate_retrieval("python", sample_results).component_name == "retrieval"
    assert pipeline.validate_reasoning(reasoning_steps).valid is True
    response = pipeline.validate_response("python asyncio tutorial", GOOD_RESPONSE, sample_results)
    assert response.valid is True


def test_failures_are_audited(discriminator):
    pipeline = ValidationPipeline(
        ValidationConfig(), discriminator, [_Fixed("retrieval", False, 0.3)]
    )
    pipeline.validate(_empty_input())
    entries = pipeline.get_audit_log()
    assert len(entries) == 1
    assert entries[0].result.overall_valid is False
    assert entries[0].timestamp > 0


def test_successes_are_not_audited(discriminator):
    pipeline = ValidationPipeline(
        ValidationConfig(), discriminator, [_Fixed("retrieval", True, 0.9)]
    )
    pipeline.validate(_empty_input())
    assert pipeline.get_audit_log() == []


def test_audit_disabled(discriminator):
    pipeline = ValidationPipeline(
        ValidationConfig(log_failures=False), discriminator, [_Fixed("retrieval", False, 0.3)]
    )
    pipeline.validate(_empty_input())
    assert pipeline.get_audit_log() == []


def test_clear_audit_log(discriminator):
    pipeline = ValidationPipeline(
        ValidationConfig(), discriminator, [_Fixed("retrieval", False, 0.3)]
    )
    pipeline.validate(_empty_input())
    pipeline.clear_audit_log()
    assert pipeline.get_audit_log() == []


def test_statistics_count_logged_runs_only(discriminator):
    validators = [_Fixed("retrieval", False, 0.3), _Fixed("reasoning", True, 0.9)]
    pipeline = ValidationPipeline(ValidationConfig(), discriminator, validators)
    pipeline.validate(_empty_input())
    pipeline.validate(_empty_input())

    ok = ValidationPipeline(ValidationConfig(), discriminator, [_Fixed("retrieval", True, 0.9)])
    ok.validate(_empty_input())

    stats = pipeline.get_statistics()
    assert stats.total_validations == 2
    assert stats.failed_validations == 2
    assert stats.component_failure_counts == {"retrieval": 2}
    assert stats.total_runs == 2
    assert ok.get_statistics().total_validations == 0
    assert ok.get_statistics().total_runs == 1


def _pipeline_result(valid: bool, time_ms: int, failing: list[str]) -> PipelineResult:
    return PipelineResult(
        components=[
            ValidationResult(component_name=name, valid=name not in failing, confidence=0.5)
            for name in ["retrieval", "reasoning", "response"]
        ],
        overall_valid=valid,
        overall_confidence=0.5,
        can_proceed=False,
        errors=[],
        total_processing_time_ms=time_ms,
    )


def test_audit_log_statistics():
    log = AuditLog()
    log.append(1, _pipeline_result(False, 10, ["retrieval"]))
    log.append(2, _pipeline_result(False, 30, ["retrieval", "response"]))
    stats = log.statistics(total_runs=5)
    assert stats.total_validations == 2
    assert stats.avg_processing_time_ms == pytest.approx(20.0)
    assert stats.component_failure_counts == {"retrieval": 2, "response": 1}
    assert stats.total_runs == 5


def test_audit_log_empty_statistics():
    stats = AuditLog().statistics()
    assert stats.total_validations == 0
    assert stats.avg_processing_time_ms == 0.0
    assert stats.component_failure_counts == {}


def test_audit_log_evicts_oldest():
    log = AuditLog(max_entries=2)
    for ts in range(3):
        log.append(ts, _pipeline_result(False, 1, []))
    assert [e.timestamp for e in log.entries()] == [1, 2]


def test_reasoning_step_shape():
    step = ReasoningStep(input="a", output="b", confidence=0.5)
    assert (step.input, step.output, step.confidence) == ("a", "b", 0.5)


def test_explicit_empty_validator_list_is_kept(discriminator):
    pipeline = ValidationPipeline(ValidationConfig(), discriminator, validators=[])
    result = pipeline.validate(_empty_input())
    assert result.components == []
    assert result.overall_confidence == 0.0
    assert len(discriminator.history) == 0
