"""Post-hoc adjustment of an overall score from explicit user feedback."""

from __future__ import annotations

from search_quality.config.constants import (
    FEEDBACK_IRRELEVANT_PENALTY,
    FEEDBACK_RATING_SCALE,
    FEEDBACK_RATING_WEIGHT,
    FEEDBACK_RELEVANT_BOOST,
    FEEDBACK_SCORE_WEIGHT,
)
from search_quality.models.domain import UserFeedback


def adjust_for_feedback(score: float, feedback: UserFeedback) -> float:
    """An explicit rating takes precedence over the relevant flag."""
    if feedback.rating is not None:
        normalized_rating = feedback.rating / FEEDBACK_RATING_SCALE
        return FEEDBACK_SCORE_WEIGHT * score + FEEDBACK_RATING_WEIGHT * normalized_rating

    if feedback.relevant:
        return min(1.0, score * FEEDBACK_RELEVANT_BOOST)
    return max(0.0, score * FEEDBACK_IRRELEVANT_PENALTY)
