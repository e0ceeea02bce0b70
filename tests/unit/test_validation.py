"""Tests for the component validators."""

import pytest

from search_quality.models.domain import ReasoningStep, SearchResult, ValidationInput
from search_quality.validation.base import BaseValidator, Findings
from search_quality.validation.reasoning import ReasoningValidator
from search_quality.validation.response import ResponseValidator
from search_quality.validation.retrieval import RetrievalValidator

GOOD_RESPONSE = (
    "This tutorial explains how Python asyncio schedules coroutines on an event loop [1]. " * 3
)


def _input(**kwargs) -> ValidationInput:
    defaults = {
        "query": "python asyncio tutorial",
        "search_results": [],
        "reasoning_steps": [],
        "final_response": "",
    }
    defaults.update(kwargs)
    return ValidationInput(**defaults)


# Retrieval


def test_retrieval_empty_results_fail(discriminator):
    result = RetrievalValidator(discriminator).validate(_input())
    assert result.valid is False
    assert result.confidence == 0.0
    assert result.errors == ["No search results provided"]
    assert result.component_name == "retrieval"


def test_retrieval_scores_through_discriminator(discriminator, sample_results):
    result = RetrievalValidator(discriminator).validate(_input(search_results=sample_results))
    latest = discriminator.history.latest()
    assert len(discriminator.history) == 1
    assert result.confidence == latest.overall_score
    assert result.metrics["relevance_score"] == latest.relevance_score
    assert result.metrics["result_count"] == 3
    assert result.valid is (result.confidence >= 0.5)


def test_retrieval_missing_fields(discriminator, sample_results):
    sample_results[0].title = ""
    sample_results[1].url = ""
    sample_results[2].snippet = ""
    result = RetrievalValidator(discriminator).validate(_input(search_results=sample_results))
    assert "Result 0 missing title" in result.warnings
    assert "Result 2 missing snippet" in result.warnings
    assert result.errors == ["Result 1 missing URL"]
    assert result.valid is False


def test_retrieval_duplicate_urls(discriminator, sample_results):
    sample_results[1].url = sample_results[0].url
    result = RetrievalValidator(discriminator).validate(_input(search_results=sample_results))
    assert "Duplicate URLs detected in results" in result.warnings


def test_retrieval_low_confidence_is_invalid(discriminator):
    results = [
        SearchResult(id=str(i), title="cooking", snippet="same words", url=f"https://x/{i}",
                     source="web", add_score=0.0)
        for i in range(2)
    ]
    result = RetrievalValidator(discriminator).validate(_input(search_results=results))
    # relevance 0, diversity 0.25, freshness 0, consistency 1 -> 0.25
    assert result.confidence == pytest.approx(0.25)
    assert result.errors == []
    assert result.valid is False


# Reasoning


def test_reasoning_no_steps():
    result = ReasoningValidator().validate(_input())
    assert result.valid is False
    assert result.errors == ["No reasoning steps provided"]


def test_reasoning_coherent_steps(reasoning_steps):
    result = ReasoningValidator().validate(_input(reasoning_steps=reasoning_steps))
    assert result.valid is True
    assert result.confidence == pytest.approx(0.85)
    assert result.warnings == []
    assert result.metrics["step_count"] == 2
    assert result.metrics["invalid_steps"] == 0


def test_reasoning_missing_output_counts_in_denominator():
    steps = [
        ReasoningStep(input="question", output="a sufficiently long answer", confidence=0.9),
        ReasoningStep(input="a sufficiently long answer then", output="", confidence=0.9),
    ]
    result = ReasoningValidator().validate(_input(reasoning_steps=steps))
    assert result.errors == ["Step 1 missing input or output"]
    assert result.confidence == pytest.approx(0.45)
    assert result.metrics["invalid_steps"] == 1
    assert result.valid is False


def test_reasoning_warnings():
    steps = [
        ReasoningStep(input="question", output="short", confidence=0.4),
        ReasoningStep(input="unrelated input", output="another long enough output", confidence=0.9),
    ]
    result = ReasoningValidator().validate(_input(reasoning_steps=steps))
    assert result.warnings == [
        "Step 0 has very short output",
        "Step 0 has low confidence (0.40)",
        "Step 1 may not build on previous step",
    ]
    assert result.errors == []
    assert result.confidence == pytest.approx(0.65)
    assert result.valid is True


def test_reasoning_low_average_confidence_is_invalid():
    steps = [ReasoningStep(input="question", output="a long enough output", confidence=0.55)]
    result = ReasoningValidator().validate(_input(reasoning_steps=steps))
    assert result.errors == []
    assert result.valid is False


def test_reasoning_carryover_uses_first_fifty_chars():
    first_output = "x" * 50 + " tail that is never quoted"
    steps = [
        ReasoningStep(input="start", output=first_output, confidence=0.9),
        ReasoningStep(input="building on " + "x" * 50, output="conclusion reached", confidence=0.9),
    ]
    result = ReasoningValidator().validate(_input(reasoning_steps=steps))
    assert result.warnings == []


# Response


def test_response_empty():
    result = ResponseValidator().validate(_input(final_response="   "))
    assert result.valid is False
    assert result.errors == ["No response provided"]


def test_response_too_short():
    result = ResponseValidator().validate(_input(final_response="python asyncio tutorial"))
    assert "Response too short (< 50 chars)" in result.errors
    assert result.valid is False


def test_response_quite_short_warning():
    response = "A python asyncio tutorial covers event loops and tasks."
    result = ResponseValidator().validate(_input(final_response=response))
    assert result.errors == []
    assert "Response is quite short" in result.warnings


def test_response_good(sample_results):
    result = ResponseValidator().validate(
        _input(final_response=GOOD_RESPONSE, search_results=sample_results)
    )
    assert result.valid is True
    assert result.warnings == []
    assert result.confidence == pytest.approx(1.0)
    assert result.metrics["query_term_coverage"] == pytest.approx(1.0)
    assert result.metrics["source_count"] == 3


def test_response_base_confidence_without_sources():
    response = "x" * 120
    result = ResponseValidator().validate(_input(final_response=response))
    assert result.confidence == pytest.approx(0.7)
    assert "Response may not fully address query (low term coverage)" in result.warnings
    assert "source_count" not in result.metrics


def test_response_attribution_by_url(sample_results):
    response = f"See {sample_results[0].url} for a python asyncio tutorial with examples."
    result = ResponseValidator().validate(
        _input(final_response=response, search_results=sample_results)
    )
    assert "Response lacks source attribution" not in result.warnings


def test_response_missing_attribution(sample_results):
    response = "A python asyncio tutorial covers event loops, tasks and cancellation scopes."
    result = ResponseValidator().validate(
        _input(final_response=response, search_results=sample_results)
    )
    assert "Response lacks source attribution" in result.warnings


def test_response_stock_phrases():
    response = "I cannot answer because the python asyncio tutorial lookup failed with an error."
    result = ResponseValidator().validate(_input(final_response=response))
    assert "Response indicates inability to answer" in result.warnings
    assert "Response mentions errors" in result.warnings


def test_response_low_confidence_still_valid_by_default():
    result = ResponseValidator().validate(_input(final_response="y" * 120))
    assert result.confidence == pytest.approx(0.7)
    assert result.valid is True


def test_response_confidence_gated_mode():
    validator = ResponseValidator(gate_on_confidence=True, min_confidence=0.8)
    result = validator.validate(_input(final_response="y" * 120))
    assert result.errors == []
    assert result.valid is False


# Base


class _Exploding(BaseValidator):
    name = "exploding"

    def _check(self, data, findings: Findings):
        findings.warnings.append("checked")
        raise RuntimeError("kaput")


def test_unexpected_exception_becomes_error():
    result = _Exploding().validate(_input())
    assert result.valid is False
    assert result.confidence == 0.0
    assert result.errors == ["Exploding validation error: kaput"]
    assert result.warnings == ["checked"]
    assert result.duration_ms >= 0
