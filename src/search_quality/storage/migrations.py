"""Idempotent database schema creation."""

from __future__ import annotations

import aiosqlite

QUALITY_SCORES_TABLE = """
CREATE TABLE IF NOT EXISTS quality_scores (
    session_id TEXT NOT NULL,
    position INTEGER NOT NULL,
    overall_score REAL NOT NULL,
    relevance_score REAL NOT NULL,
    diversity_score REAL NOT NULL,
    freshness_score REAL NOT NULL,
    consistency_score REAL NOT NULL,
    timestamp INTEGER NOT NULL,
    PRIMARY KEY (session_id, position)
)
"""

QUALITY_SCORES_TIMESTAMP_INDEX = """
CREATE INDEX IF NOT EXISTS idx_quality_scores_timestamp ON quality_scores(session_id, timestamp)
"""


async def initialize_score_db(db_path: str) -> None:
    async with aiosqlite.connect(db_path) as db:
        await db.execute(QUALITY_SCORES_TABLE)
        await db.execute(QUALITY_SCORES_TIMESTAMP_INDEX)
        await db.commit()
