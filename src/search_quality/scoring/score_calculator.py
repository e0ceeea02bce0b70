"""Heuristic quality scoring: overall = 0.4*rel + 0.2*diversity + 0.2*freshness + 0.2*consistency."""

from __future__ import annotations

import re
import time
from itertools import combinations

from search_quality.config.constants import (
    NEUTRAL_FRESHNESS,
    W_CONSISTENCY,
    W_DIVERSITY,
    W_FRESHNESS,
    W_RELEVANCE,
)
from search_quality.drift.statistics import mean
from search_quality.models.domain import QualityScore, SearchResult, UserFeedback
from search_quality.scoring.feedback import adjust_for_feedback

_WHITESPACE = re.compile(r"\s+")


def tokenize_terms(text: str) -> list[str]:
    """Lowercase and split on whitespace runs.

    Leading/trailing whitespace yields empty edge tokens, which match any text.
    """
    return _WHITESPACE.split(text.lower())


def text_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity of the lowercase word sets."""
    words1 = set(tokenize_terms(text1))
    words2 = set(tokenize_terms(text2))
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def relevance_score(query: str, results: list[SearchResult]) -> float:
    if not results:
        return 0.0

    query_terms = tokenize_terms(query)
    total = 0.0
    for result in results:
        content = f"{result.title or ''} {result.snippet or ''}".lower()
        matching = sum(1 for term in query_terms if term in content)
        total += matching / len(query_terms)

    return min(1.0, total / len(results))


def diversity_score(results: list[SearchResult]) -> float:
    if len(results) < 2:
        return 1.0

    source_diversity = len({r.source for r in results}) / len(results)

    similarities = [
        text_similarity(a.snippet or "", b.snippet or "")
        for a, b in combinations(results, 2)
    ]
    content_diversity = 1.0 - mean(similarities)

    return (source_diversity + content_diversity) / 2


def freshness_score(results: list[SearchResult]) -> float:
    # add_score stands in for freshness at this layer; published_date is not read
    if not results:
        return NEUTRAL_FRESHNESS
    return mean(
        [r.add_score if r.add_score is not None else NEUTRAL_FRESHNESS for r in results]
    )


def consistency_score(results: list[SearchResult]) -> float:
    if len(results) < 2:
        return 1.0

    has_url = sum(1 for r in results if r.url)
    has_snippet = sum(1 for r in results if r.snippet)
    has_title = sum(1 for r in results if r.title)

    return (has_url + has_snippet + has_title) / (len(results) * 3)


def combine_scores(
    relevance: float, diversity: float, freshness: float, consistency: float
) -> float:
    return (
        W_RELEVANCE * relevance
        + W_DIVERSITY * diversity
        + W_FRESHNESS * freshness
        + W_CONSISTENCY * consistency
    )


def now_ms() -> int:
    return int(time.time() * 1000)


class ScoreCalculator:
    """Pure scorer; recording the score is left to the caller."""

    def compute(
        self,
        query: str,
        results: list[SearchResult],
        feedback: UserFeedback | None = None,
        timestamp: int | None = None,
    ) -> QualityScore:
        relevance = relevance_score(query, results)
        diversity = diversity_score(results)
        freshness = freshness_score(results)
        consistency = consistency_score(results)

        overall = combine_scores(relevance, diversity, freshness, consistency)
        if feedback is not None:
            overall = adjust_for_feedback(overall, feedback)

        return QualityScore(
            overall_score=overall,
            relevance_score=relevance,
            diversity_score=diversity,
            freshness_score=freshness,
            consistency_score=consistency,
            timestamp=timestamp if timestamp is not None else now_ms(),
        )
