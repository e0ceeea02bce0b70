"""Reasoning stage: per-step completeness, confidence and continuity checks."""

from __future__ import annotations

from search_quality.config.constants import (
    REASONING_CARRYOVER_CHARS,
    REASONING_LOW_STEP_CONFIDENCE,
    REASONING_MIN_CONFIDENCE,
    REASONING_MIN_OUTPUT_CHARS,
)
from search_quality.models.domain import ValidationInput
from search_quality.validation.base import BaseValidator, Findings


class ReasoningValidator(BaseValidator):
    name = "reasoning"

    def _check(self, data: ValidationInput, findings: Findings) -> tuple[bool, float]:
        steps = data.reasoning_steps
        if not steps:
            findings.errors.append("No reasoning steps provided")
            return False, 0.0

        findings.metrics["step_count"] = len(steps)

        total_confidence = 0.0
        invalid_steps = 0
        for i, step in enumerate(steps):
            if not step.input or not step.output:
                findings.errors.append(f"Step {i} missing input or output")
                invalid_steps += 1
                continue

            if len(step.output) < REASONING_MIN_OUTPUT_CHARS:
                findings.warnings.append(f"Step {i} has very short output")

            if step.confidence < REASONING_LOW_STEP_CONFIDENCE:
                findings.warnings.append(
                    f"Step {i} has low confidence ({step.confidence:.2f})"
                )

            total_confidence += step.confidence

            # Crude continuity check: the input should quote the previous output's head
            if i > 0:
                carryover = (steps[i - 1].output or "")[:REASONING_CARRYOVER_CHARS]
                if carryover not in step.input:
                    findings.warnings.append(f"Step {i} may not build on previous step")

        # Skipped steps still count in the denominator
        avg_confidence = total_confidence / len(steps)
        findings.metrics["avg_confidence"] = avg_confidence
        findings.metrics["invalid_steps"] = invalid_steps

        valid = not findings.errors and avg_confidence >= REASONING_MIN_CONFIDENCE
        return valid, avg_confidence
