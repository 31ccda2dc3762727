"""Serve stored match results, recomputing stale ones."""

import logging
from collections.abc import Sequence
from datetime import datetime

from ravyz_match.matching.models import (
    BehavioralMatchResult,
    CandidateProfile,
    JobProfile,
    LegacyMatchResult,
    MatchResult,
)
from ravyz_match.matching.service import MatchingService
from ravyz_match.results.repository import MatchResultRepository

logger = logging.getLogger(__name__)


class MatchResultService:
    """Coordinates the matching service with the result repository.

    Scoring always finishes before anything is written, so persistence
    never observes or alters a half-computed result.
    """

    def __init__(
        self,
        repository: MatchResultRepository,
        matching: MatchingService | None = None,
    ):
        self.repository = repository
        self.matching = matching or MatchingService()

    async def get_or_compute(
        self,
        candidate: CandidateProfile,
        job: JobProfile,
        strategy: str | None = None,
        now: datetime | None = None,
        force: bool = False,
    ) -> MatchResult | BehavioralMatchResult | LegacyMatchResult:
        """Return a fresh stored result, or compute and store a new one.

        Args:
            candidate: Candidate to score.
            job: Job to score against.
            strategy: Strategy name; defaults to the matching service default.
            now: Reference time for expiry checks and the new record.
            force: Recompute even when a fresh result exists.
        """
        name = self.matching.strategy(strategy).name

        if not force:
            stored = await self.repository.get_fresh(candidate.id, job.id, name, now=now)
            if stored is not None:
                logger.debug("Serving stored %s match %s/%s", name, candidate.id, job.id)
                return stored.result

        result = self.matching.match(candidate, job, strategy=name)
        await self.repository.save(result, calculated_at=now)
        return result

    async def get_or_compute_many(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobProfile],
        strategy: str | None = None,
        now: datetime | None = None,
        force: bool = False,
        max_workers: int | None = None,
    ) -> list[MatchResult | BehavioralMatchResult | LegacyMatchResult]:
        """Like :meth:`get_or_compute` for many jobs, best score first.

        Jobs without a fresh stored result are scored together through
        ``MatchingService.match_jobs``, on a thread pool when
        ``max_workers`` is given, and then saved one by one.
        """
        name = self.matching.strategy(strategy).name

        results: list[MatchResult | BehavioralMatchResult | LegacyMatchResult] = []
        missing: list[JobProfile] = []
        for job in jobs:
            stored = None
            if not force:
                stored = await self.repository.get_fresh(candidate.id, job.id, name, now=now)
            if stored is None:
                missing.append(job)
            else:
                results.append(stored.result)

        if missing:
            logger.debug("Scoring %d of %d %s matches", len(missing), len(jobs), name)
            computed = self.matching.match_jobs(
                candidate, missing, strategy=name, max_workers=max_workers
            )
            for result in computed:
                await self.repository.save(result, calculated_at=now)
            results.extend(computed)

        return sorted(results, key=lambda result: result.final_score, reverse=True)
