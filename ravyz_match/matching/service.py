"""Matching service: single pairs and batch ranking."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

from ravyz_match.config.settings import get_settings
from ravyz_match.matching.config import MatchingConfig, get_matching_config
from ravyz_match.matching.models import (
    BehavioralMatchResult,
    CandidateProfile,
    JobProfile,
    LegacyMatchResult,
    MatchResult,
)
from ravyz_match.matching.strategies import STRATEGIES, MatchStrategy, get_strategy

logger = logging.getLogger(__name__)

AnyResult = MatchResult | BehavioralMatchResult | LegacyMatchResult


class MatchingService:
    """Service for scoring candidates against jobs.

    Holds only read-only configuration and strategies; every call is
    independent, so batch methods may score pairs on a thread pool when
    ``max_workers`` is given.
    """

    def __init__(
        self,
        config: MatchingConfig | None = None,
        default_strategy: str | None = None,
    ) -> None:
        self._config = config or get_matching_config()
        self._default_strategy = (default_strategy or get_settings().default_strategy).lower()
        self._strategies: Mapping[str, MatchStrategy] = MappingProxyType(
            {name: strategy_cls(config=self._config) for name, strategy_cls in STRATEGIES.items()}
        )

    @property
    def config(self) -> MatchingConfig:
        return self._config

    @property
    def default_strategy(self) -> str:
        return self._default_strategy

    def strategy(self, name: str | None = None) -> MatchStrategy:
        """Return the strategy registered under ``name`` (or the default).

        Raises:
            ValueError: If the name is not a known strategy.
        """
        key = (name or self.default_strategy).strip().lower()
        if key in self._strategies:
            return self._strategies[key]
        return get_strategy(key, self.config)

    def match(
        self, candidate: CandidateProfile, job: JobProfile, strategy: str | None = None
    ) -> AnyResult:
        return self.strategy(strategy).score(candidate, job)

    def _score_pairs(
        self,
        pairs: Sequence[tuple[CandidateProfile, JobProfile]],
        strategy: str | None,
        max_workers: int | None,
    ) -> list[AnyResult]:
        scorer = self.strategy(strategy)
        logger.debug(
            "Scoring %d pair(s) with %s strategy (max_workers=%s)",
            len(pairs),
            scorer.name,
            max_workers,
        )
        if max_workers and max_workers > 1 and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                return list(pool.map(lambda pair: scorer.score(*pair), pairs))
        return [scorer.score(candidate, job) for candidate, job in pairs]

    @staticmethod
    def _ranked(results: list[AnyResult]) -> list[AnyResult]:
        # sorted() is stable: equal scores keep input order
        return sorted(results, key=lambda result: result.final_score, reverse=True)

    def match_jobs(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobProfile],
        strategy: str | None = None,
        max_workers: int | None = None,
    ) -> list[AnyResult]:
        """Score one candidate against many jobs, best first."""
        pairs = [(candidate, job) for job in jobs]
        return self._ranked(self._score_pairs(pairs, strategy, max_workers))

    def match_candidates(
        self,
        candidates: Sequence[CandidateProfile],
        job: JobProfile,
        strategy: str | None = None,
        max_workers: int | None = None,
    ) -> list[AnyResult]:
        """Score many candidates against one job, best first."""
        pairs = [(candidate, job) for candidate in candidates]
        return self._ranked(self._score_pairs(pairs, strategy, max_workers))

    def compatibility_matrix(
        self,
        candidates: Sequence[CandidateProfile],
        jobs: Sequence[JobProfile],
        strategy: str | None = None,
        max_workers: int | None = None,
    ) -> list[list[AnyResult]]:
        """Results for every pair, one row per candidate in input order."""
        pairs = [(candidate, job) for candidate in candidates for job in jobs]
        flat = self._score_pairs(pairs, strategy, max_workers)
        width = len(jobs)
        return [flat[row * width : (row + 1) * width] for row in range(len(candidates))]

    def rank_all(
        self,
        candidates: Sequence[CandidateProfile],
        jobs: Sequence[JobProfile],
        strategy: str | None = None,
        max_workers: int | None = None,
        limit: int | None = None,
    ) -> list[AnyResult]:
        """Every candidate/job pair, flattened and sorted best first."""
        pairs = [(candidate, job) for candidate in candidates for job in jobs]
        ranked = self._ranked(self._score_pairs(pairs, strategy, max_workers))
        return ranked[:limit] if limit is not None else ranked
