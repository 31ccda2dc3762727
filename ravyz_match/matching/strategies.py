"""Selectable matching strategies behind a single interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Protocol

from ravyz_match.matching.config import MatchingConfig, get_matching_config
from ravyz_match.matching.explanation import generate_explanation
from ravyz_match.matching.hybrid import HybridStrategy, round_score, score_behavioral
from ravyz_match.matching.legacy import LegacyStrategy
from ravyz_match.matching.models import (
    BehavioralMatchResult,
    CandidateProfile,
    JobProfile,
    LegacyMatchResult,
    MatchResult,
)

logger = logging.getLogger(__name__)


class MatchStrategy(Protocol):
    """Scores one candidate against one job."""

    name: ClassVar[str]

    def score(
        self, candidate: CandidateProfile, job: JobProfile
    ) -> MatchResult | BehavioralMatchResult | LegacyMatchResult: ...


@dataclass(frozen=True)
class BehavioralStrategy:
    """Pillar compatibility plus archetype boost, nothing else."""

    config: MatchingConfig = field(default_factory=get_matching_config)
    name: ClassVar[str] = "behavioral"

    def score(self, candidate: CandidateProfile, job: JobProfile) -> BehavioralMatchResult:
        behavioral = score_behavioral(candidate, job)
        final_score = round_score(behavioral.score)
        logger.debug(
            "Behavioral match %s/%s: base=%.1f boost=%d final=%d",
            candidate.id,
            job.id,
            behavioral.base_score,
            behavioral.archetype_boost,
            final_score,
        )
        return BehavioralMatchResult(
            candidate_id=candidate.id,
            job_id=job.id,
            final_score=final_score,
            explanation=generate_explanation(final_score, behavioral),
            behavioral=behavioral,
        )


STRATEGIES: dict[str, type[HybridStrategy] | type[BehavioralStrategy] | type[LegacyStrategy]] = {
    HybridStrategy.name: HybridStrategy,
    BehavioralStrategy.name: BehavioralStrategy,
    LegacyStrategy.name: LegacyStrategy,
}


def get_strategy(name: str, config: MatchingConfig | None = None) -> MatchStrategy:
    """Instantiate a strategy by name.

    Raises:
        ValueError: If no strategy is registered under ``name``.
    """
    key = name.strip().lower()
    try:
        strategy_cls = STRATEGIES[key]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown matching strategy '{name}'. Expected one of: {known}") from None
    return strategy_cls(config=config or get_matching_config())
