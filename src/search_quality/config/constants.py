"""Fixed constants for scoring, drift and validation heuristics."""

from __future__ import annotations

# Overall score weights
W_RELEVANCE = 0.4
W_DIVERSITY = 0.2
W_FRESHNESS = 0.2
W_CONSISTENCY = 0.2

# Neutral prior when a result has no add_score (and for empty batches)
NEUTRAL_FRESHNESS = 0.5

# Feedback blending
FEEDBACK_SCORE_WEIGHT = 0.6
FEEDBACK_RATING_WEIGHT = 0.4
FEEDBACK_RATING_SCALE = 5
FEEDBACK_RELEVANT_BOOST = 1.1
FEEDBACK_IRRELEVANT_PENALTY = 0.8

# Trend classification
TREND_MIN_SAMPLES = 5
TREND_WINDOW = 10
TREND_SLOPE_THRESHOLD = 0.02

# Per-validator confidence gates
RETRIEVAL_MIN_CONFIDENCE = 0.5
REASONING_MIN_CONFIDENCE = 0.6

# Reasoning step checks
REASONING_MIN_OUTPUT_CHARS = 10
REASONING_LOW_STEP_CONFIDENCE = 0.5
REASONING_CARRYOVER_CHARS = 50

# Response checks
RESPONSE_MIN_CHARS = 50
RESPONSE_SHORT_CHARS = 100
RESPONSE_LONG_CHARS = 200
RESPONSE_MIN_TERM_COVERAGE = 0.5
RESPONSE_GOOD_TERM_COVERAGE = 0.7
RESPONSE_BASE_CONFIDENCE = 0.7
RESPONSE_CONFIDENCE_STEP = 0.1
CITATION_PATTERN = r"\[[\d,\s]+\]"
INABILITY_PHRASES = ("I cannot", "I'm unable")
ERROR_PHRASES = ("error", "failed")
