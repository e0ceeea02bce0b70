"""Response stage: length, query coverage, attribution and stock-phrase checks."""

from __future__ import annotations

import re

from search_quality.config.constants import (
    CITATION_PATTERN,
    ERROR_PHRASES,
    INABILITY_PHRASES,
    RESPONSE_BASE_CONFIDENCE,
    RESPONSE_CONFIDENCE_STEP,
    RESPONSE_GOOD_TERM_COVERAGE,
    RESPONSE_LONG_CHARS,
    RESPONSE_MIN_CHARS,
    RESPONSE_MIN_TERM_COVERAGE,
    RESPONSE_SHORT_CHARS,
)
from search_quality.models.domain import SearchResult, ValidationInput
from search_quality.scoring.score_calculator import tokenize_terms
from search_quality.validation.base import BaseValidator, Findings

_CITATION = re.compile(CITATION_PATTERN)


class ResponseValidator(BaseValidator):
    """Unlike the other validators, validity depends on errors only by default.

    ``gate_on_confidence=True`` additionally requires ``min_confidence``.
    """

    name = "response"

    def __init__(self, gate_on_confidence: bool = False, min_confidence: float = 0.6) -> None:
        self._gate_on_confidence = gate_on_confidence
        self._min_confidence = min_confidence

    def _check(self, data: ValidationInput, findings: Findings) -> tuple[bool, float]:
        response = data.final_response
        if not response or not response.strip():
            findings.errors.append("No response provided")
            return False, 0.0

        findings.metrics["response_length"] = len(response)
        findings.metrics["word_count"] = len(re.split(r"\s+", response))

        if len(response) < RESPONSE_MIN_CHARS:
            findings.errors.append(f"Response too short (< {RESPONSE_MIN_CHARS} chars)")
        elif len(response) < RESPONSE_SHORT_CHARS:
            findings.warnings.append("Response is quite short")

        query_terms = tokenize_terms(data.query)
        response_text = response.lower()
        coverage = sum(1 for t in query_terms if t in response_text) / len(query_terms)
        findings.metrics["query_term_coverage"] = coverage
        if coverage < RESPONSE_MIN_TERM_COVERAGE:
            findings.warnings.append("Response may not fully address query (low term coverage)")

        sources = data.search_results
        if sources:
            if not self._has_attribution(response, sources):
                findings.warnings.append("Response lacks source attribution")
            findings.metrics["source_count"] = len(sources)

        if any(phrase in response for phrase in INABILITY_PHRASES):
            findings.warnings.append("Response indicates inability to answer")
        if any(phrase in response for phrase in ERROR_PHRASES):
            findings.warnings.append("Response mentions errors")

        confidence = RESPONSE_BASE_CONFIDENCE
        if len(response) > RESPONSE_LONG_CHARS:
            confidence += RESPONSE_CONFIDENCE_STEP
        if coverage > RESPONSE_GOOD_TERM_COVERAGE:
            confidence += RESPONSE_CONFIDENCE_STEP
        if findings.metrics.get("source_count", 0) > 0:
            confidence += RESPONSE_CONFIDENCE_STEP
        confidence = min(1.0, confidence)

        valid = not findings.errors
        if self._gate_on_confidence:
            valid = valid and confidence >= self._min_confidence
        return valid, confidence

    @staticmethod
    def _has_attribution(response: str, sources: list[SearchResult]) -> bool:
        if _CITATION.search(response):
            return True
        return any(
            (s.url is not None and s.url in response)
            or (s.title is not None and s.title in response)
            for s in sources
        )
