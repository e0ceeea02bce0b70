"""Retrieval stage: structural checks plus discriminator quality scoring."""

from __future__ import annotations

from search_quality.config.constants import RETRIEVAL_MIN_CONFIDENCE
from search_quality.models.domain import ValidationInput
from search_quality.scoring.discriminator import QualityDiscriminator
from search_quality.validation.base import BaseValidator, Findings


class RetrievalValidator(BaseValidator):
    name = "retrieval"

    def __init__(self, discriminator: QualityDiscriminator) -> None:
        self._discriminator = discriminator

    def _check(self, data: ValidationInput, findings: Findings) -> tuple[bool, float]:
        results = data.search_results
        if not results:
            findings.errors.append("No search results provided")
            return False, 0.0

        for i, result in enumerate(results):
            if not result.title:
                findings.warnings.append(f"Result {i} missing title")
            if not result.url:
                findings.errors.append(f"Result {i} missing URL")
            if not result.snippet:
                findings.warnings.append(f"Result {i} missing snippet")

        # Validated batches feed the discriminator's drift history
        score = self._discriminator.score_results(data.query, results)

        findings.metrics["relevance_score"] = score.relevance_score
        findings.metrics["diversity_score"] = score.diversity_score
        findings.metrics["freshness_score"] = score.freshness_score
        findings.metrics["consistency_score"] = score.consistency_score
        findings.metrics["result_count"] = len(results)

        urls = [r.url for r in results]
        if len(urls) != len(set(urls)):
            findings.warnings.append("Duplicate URLs detected in results")

        confidence = score.overall_score
        valid = not findings.errors and confidence >= RETRIEVAL_MIN_CONFIDENCE
        return valid, confidence
