"""SQLite-backed persistence for per-session score history."""

from __future__ import annotations

import aiosqlite

from search_quality.exceptions import StorageError
from search_quality.models.domain import QualityScore
from search_quality.observability.logger import get_logger
from search_quality.storage.migrations import initialize_score_db

logger = get_logger("score_store")


class SQLiteScoreStore:
    """One row per score; a session's rows are replaced wholesale on save."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    async def initialize(self) -> None:
        await initialize_score_db(self._db_path)

    async def save_history(self, session_id: str, scores: list[QualityScore]) -> None:
        try:
            async with aiosqlite.connect(self._db_path) as db:
                await db.execute("DELETE FROM quality_scores WHERE session_id = ?", (session_id,))
                await db.executemany(
                    "INSERT INTO quality_scores "
                    "(session_id, position, overall_score, relevance_score, diversity_score, "
                    "freshness_score, consistency_score, timestamp) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    [
                        (
                            session_id,
                            position,
                            s.overall_score,
                            s.relevance_score,
                            s.diversity_score,
                            s.freshness_score,
                            s.consistency_score,
                            s.timestamp,
                        )
                        for position, s in enumerate(scores)
                    ],
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to save history for session '{session_id}': {e}") from e
        logger.info("history_saved", session_id=session_id, count=len(scores))

    async def load_history(self, session_id: str) -> list[QualityScore]:
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            async with db.execute(
                "SELECT * FROM quality_scores WHERE session_id = ? ORDER BY position",
                (session_id,),
            ) as cursor:
                rows = await cursor.fetchall()
                return [self._row_to_score(row) for row in rows]

    async def list_sessions(self) -> list[str]:
        async with aiosqlite.connect(self._db_path) as db:
            async with db.execute(
                "SELECT DISTINCT session_id FROM quality_scores ORDER BY session_id"
            ) as cursor:
                rows = await cursor.fetchall()
                return [row[0] for row in rows]

    @staticmethod
    def _row_to_score(row: aiosqlite.Row) -> QualityScore:
        return QualityScore(
            overall_score=row["overall_score"],
            relevance_score=row["relevance_score"],
            diversity_score=row["diversity_score"],
            freshness_score=row["freshness_score"],
            consistency_score=row["consistency_score"],
            timestamp=row["timestamp"],
        )
