"""Database repository for computed match results.

This module provides async SQLite storage for match results, keyed by
candidate, job and strategy, with an expiry after which results are stale.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from pathlib import Path

import aiosqlite

from ravyz_match.config.settings import get_settings
from ravyz_match.matching.models import (
    BehavioralMatchResult,
    LegacyMatchResult,
    MatchResult,
    match_result_adapter,
)
from ravyz_match.results.models import StoredMatch

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS match_results (
    candidate_id TEXT NOT NULL,
    job_id TEXT NOT NULL,
    strategy TEXT NOT NULL,
    final_score INTEGER NOT NULL,
    payload TEXT NOT NULL,
    calculated_at TEXT NOT NULL,
    expires_at TEXT NOT NULL,
    PRIMARY KEY (candidate_id, job_id, strategy)
)
"""

CREATE_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS idx_match_results_candidate ON match_results(candidate_id);
CREATE INDEX IF NOT EXISTS idx_match_results_job ON match_results(job_id);
CREATE INDEX IF NOT EXISTS idx_match_results_expires ON match_results(expires_at);
"""


def _timestamp(value: datetime) -> str:
    # Fixed precision keeps stored timestamps comparable as strings.
    return value.isoformat(timespec="microseconds")


class MatchResultRepository:
    """Async SQLite repository for match results."""

    def __init__(self, db_path: Path | str, validity_days: int | None = None):
        """Initialize the repository.

        Args:
            db_path: Path to the SQLite database file.
            validity_days: Days a saved result stays fresh. Defaults to the
                ``result_validity_days`` setting.
        """
        self.db_path = Path(db_path)
        days = validity_days if validity_days is not None else get_settings().result_validity_days
        if days <= 0:
            raise ValueError(f"validity_days must be positive, got {days}")
        self.validity = timedelta(days=days)
        self._connection: aiosqlite.Connection | None = None

    @asynccontextmanager
    async def _get_connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        if self._connection is None:
            self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
        yield self._connection

    async def initialize(self) -> None:
        """Initialize the database, creating tables if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        async with self._get_connection() as conn:
            await conn.execute(CREATE_TABLE_SQL)
            await conn.executescript(CREATE_INDEX_SQL)
            await conn.commit()

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None

    async def save(
        self,
        result: MatchResult | BehavioralMatchResult | LegacyMatchResult,
        calculated_at: datetime | None = None,
    ) -> StoredMatch:
        """Insert or replace the result for its candidate, job and strategy.

        Args:
            result: The match result to store.
            calculated_at: Computation time. Defaults to now.

        Returns:
            The stored record, including its expiry.
        """
        calculated = calculated_at or datetime.now()
        stored = StoredMatch(
            candidate_id=result.candidate_id,
            job_id=result.job_id,
            strategy=result.strategy,
            result=result,
            calculated_at=calculated,
            expires_at=calculated + self.validity,
        )

        async with self._get_connection() as conn:
            await conn.execute(
                """
                INSERT INTO match_results (
                    candidate_id, job_id, strategy, final_score, payload,
                    calculated_at, expires_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (candidate_id, job_id, strategy) DO UPDATE SET
                    final_score = excluded.final_score,
                    payload = excluded.payload,
                    calculated_at = excluded.calculated_at,
                    expires_at = excluded.expires_at
                """,
                (
                    stored.candidate_id,
                    stored.job_id,
                    stored.strategy,
                    stored.final_score,
                    result.model_dump_json(),
                    _timestamp(stored.calculated_at),
                    _timestamp(stored.expires_at),
                ),
            )
            await conn.commit()

        logger.info(
            "Saved %s match %s/%s (score=%d, expires %s)",
            stored.strategy,
            stored.candidate_id,
            stored.job_id,
            stored.final_score,
            _timestamp(stored.expires_at),
        )
        return stored

    async def get(self, candidate_id: str, job_id: str, strategy: str) -> StoredMatch | None:
        """Get a stored result whether or not it has expired."""
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM match_results
                WHERE candidate_id = ? AND job_id = ? AND strategy = ?
                """,
                (candidate_id, job_id, strategy),
            )
            row = await cursor.fetchone()

        if row is None:
            return None
        return self._row_to_match(row)

    async def get_fresh(
        self,
        candidate_id: str,
        job_id: str,
        strategy: str,
        now: datetime | None = None,
    ) -> StoredMatch | None:
        """Get a stored result only if it has not expired yet."""
        stored = await self.get(candidate_id, job_id, strategy)
        if stored is None or stored.is_expired(now):
            return None
        return stored

    async def list_for_candidate(
        self,
        candidate_id: str,
        strategy: str | None = None,
        now: datetime | None = None,
        min_score: int | None = None,
        limit: int | None = None,
    ) -> list[StoredMatch]:
        """Fresh results for a candidate, best score first.

        Args:
            candidate_id: Candidate to list results for.
            strategy: Only results from this strategy.
            now: Reference time for the expiry check.
            min_score: Only results scoring at least this much.
            limit: Return at most this many results.
        """
        return await self._list_fresh("candidate_id", candidate_id, strategy, now, min_score, limit)

    async def list_for_job(
        self,
        job_id: str,
        strategy: str | None = None,
        now: datetime | None = None,
        min_score: int | None = None,
        limit: int | None = None,
    ) -> list[StoredMatch]:
        """Fresh results for a job, best score first. Filters as in list_for_candidate."""
        return await self._list_fresh("job_id", job_id, strategy, now, min_score, limit)

    async def _list_fresh(
        self,
        column: str,
        value: str,
        strategy: str | None,
        now: datetime | None,
        min_score: int | None = None,
        limit: int | None = None,
    ) -> list[StoredMatch]:
        query = f"SELECT * FROM match_results WHERE {column} = ? AND expires_at > ?"
        params: list[str | int] = [value, _timestamp(now or datetime.now())]
        if strategy is not None:
            query += " AND strategy = ?"
            params.append(strategy)
        if min_score is not None:
            query += " AND final_score >= ?"
            params.append(min_score)
        query += " ORDER BY final_score DESC, calculated_at DESC"
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        async with self._get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()

        return [self._row_to_match(row) for row in rows]

    async def delete_expired(self, now: datetime | None = None) -> int:
        """Delete expired results.

        Returns:
            Number of rows removed.
        """
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                "DELETE FROM match_results WHERE expires_at <= ?",
                (_timestamp(now or datetime.now()),),
            )
            await conn.commit()
            removed = cursor.rowcount

        if removed:
            logger.info("Deleted %d expired match result(s)", removed)
        return removed

    def _row_to_match(self, row: aiosqlite.Row) -> StoredMatch:
        return StoredMatch(
            candidate_id=row["candidate_id"],
            job_id=row["job_id"],
            strategy=row["strategy"],
            result=match_result_adapter.validate_json(row["payload"]),
            calculated_at=datetime.fromisoformat(row["calculated_at"]),
            expires_at=datetime.fromisoformat(row["expires_at"]),
        )
