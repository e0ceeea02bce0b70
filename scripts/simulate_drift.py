"""Replay a gradually degrading search stream through a discriminator.

Usage:
    python scripts/simulate_drift.py [--batches N] [--decay RATE] [--window W]
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from search_quality.config.engine import DiscriminatorConfig
from search_quality.models.domain import QualityMetrics, SearchResult
from search_quality.observability.logger import setup_logging
from search_quality.scoring.discriminator import QualityDiscriminator

QUERY = "artificial intelligence safety"

BASE_RESULTS = [
    SearchResult(
        id="1",
        title="High Quality Result",
        snippet="Comprehensive, relevant content from trusted source with recent data",
        url="https://trusted-source.com/article",
        source="firecrawl",
        add_score=0.85,
    ),
    SearchResult(
        id="2",
        title="Medium Quality Result",
        snippet="Somewhat relevant content but older",
        url="https://example.com/old-article",
        source="firecrawl",
        add_score=0.6,
    ),
    SearchResult(
        id="3",
        title="Low Quality Result",
        snippet="Barely relevant, suspicious patterns detected",
        url="https://spam-site.com/ad",
        source="firecrawl",
        add_score=0.3,
    ),
]


def degraded_batch(factor: float) -> list[SearchResult]:
    return [replace(r, add_score=(r.add_score or 0.5) * factor) for r in BASE_RESULTS]


def print_header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_metrics(metrics: QualityMetrics) -> None:
    print_header("QUALITY METRICS")
    current = metrics.current_score
    print(f"  Current score:        {current.overall_score:.3f}")
    print(f"    relevance:          {current.relevance_score:.3f}")
    print(f"    diversity:          {current.diversity_score:.3f}")
    print(f"    freshness:          {current.freshness_score:.3f}")
    print(f"    consistency:        {current.consistency_score:.3f}")
    print(f"  Historical average:   {metrics.historical_average:.3f}")
    print(f"  Recent trend:         {metrics.recent_trend}")

    drift = metrics.drift_analysis
    print_header("DRIFT ANALYSIS")
    print(f"  Drifting:             {drift.is_drifting}")
    print(f"  Magnitude:            {drift.drift_magnitude:+.3f}")
    print(f"  Confidence:           {drift.confidence:.3f}")
    print(f"  Recommendation:       {drift.recommendation}")
    print(f"  Details:              {drift.details}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate quality drift")
    parser.add_argument("--batches", type=int, default=15, help="Number of search batches")
    parser.add_argument("--decay", type=float, default=0.03, help="Per-batch add_score decay")
    parser.add_argument("--window", type=int, default=100, help="Historical window size")
    parser.add_argument("--verbose", action="store_true", help="Emit structured logs")
    args = parser.parse_args()

    setup_logging("INFO" if args.verbose else "WARNING", json_logs=False)

    discriminator = QualityDiscriminator(DiscriminatorConfig(historical_window=args.window))
    for i in range(args.batches):
        factor = max(0.0, 1 - i * args.decay)
        score = discriminator.score_results(f"{QUERY} {i}", degraded_batch(factor))
        print(f"  batch {i:>3}  factor={factor:.2f}  overall={score.overall_score:.3f}")

    print_metrics(discriminator.get_metrics())


if __name__ == "__main__":
    main()
