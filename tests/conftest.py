"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from search_quality.config.engine import DiscriminatorConfig, ValidationConfig
from search_quality.config.settings import Settings
from search_quality.models.domain import QualityScore, ReasoningStep, SearchResult
from search_quality.scoring.discriminator import QualityDiscriminator


@pytest.fixture
def settings():
    """Test settings with temp paths."""
    tmp = tempfile.mkdtemp()
    return Settings(
        score_db_path=str(Path(tmp) / "test_scores.db"),
        log_json=False,
    )


@pytest.fixture
def sample_results():
    """Three complete results from distinct sources."""
    return [
        SearchResult(
            id="1",
            title="Python asyncio guide",
            snippet="Event loops schedule coroutines cooperatively",
            url="https://docs.example.com/asyncio",
            source="firecrawl",
            add_score=0.9,
        ),
        SearchResult(
            id="2",
            title="Concurrency in Python",
            snippet="Threads processes and tasks compared in depth",
            url="https://blog.example.com/concurrency",
            source="autumn",
            add_score=0.7,
        ),
        SearchResult(
            id="3",
            title="Asyncio pitfalls",
            snippet="Blocking calls stall every coroutine on the loop",
            url="https://wiki.example.com/pitfalls",
            source="web",
            add_score=0.8,
        ),
    ]


@pytest.fixture
def reasoning_steps():
    return [
        ReasoningStep(
            input="How does asyncio run coroutines?",
            output="Asyncio runs coroutines on a single event loop",
            confidence=0.9,
        ),
        ReasoningStep(
            input="Given that Asyncio runs coroutines on a single event loop, what blocks it?",
            output="Any synchronous blocking call stalls the whole loop",
            confidence=0.8,
        ),
    ]


@pytest.fixture
def small_config():
    """Window of 30: recent window of 10, history capped at 60."""
    return DiscriminatorConfig(historical_window=30, min_samples_for_analysis=10)


@pytest.fixture
def discriminator():
    return QualityDiscriminator(DiscriminatorConfig())


@pytest.fixture
def validation_config():
    return ValidationConfig()


def make_score(overall: float, timestamp: int = 0) -> QualityScore:
    return QualityScore(
        overall_score=overall,
        relevance_score=overall,
        diversity_score=1.0,
        freshness_score=0.5,
        consistency_score=1.0,
        timestamp=timestamp,
    )


@pytest.fixture
def score_factory():
    return make_score
