"""Data models for persisted match results."""

from dataclasses import dataclass
from datetime import datetime

from ravyz_match.matching.models import BehavioralMatchResult, LegacyMatchResult, MatchResult


@dataclass(frozen=True)
class StoredMatch:
    """A computed match result together with its validity window.

    Attributes:
        candidate_id: Candidate the result belongs to.
        job_id: Job the result belongs to.
        strategy: Name of the strategy that produced the result.
        result: The match result itself.
        calculated_at: When the result was computed.
        expires_at: When the result must be recomputed instead of served.
    """

    candidate_id: str
    job_id: str
    strategy: str
    result: MatchResult | BehavioralMatchResult | LegacyMatchResult
    calculated_at: datetime
    expires_at: datetime

    @property
    def final_score(self) -> int:
        return self.result.final_score

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once ``now`` has reached ``expires_at``."""
        return (now or datetime.now()) >= self.expires_at

    def to_dict(self) -> dict:
        return {
            "candidate_id": self.candidate_id,
            "job_id": self.job_id,
            "strategy": self.strategy,
            "final_score": self.final_score,
            "calculated_at": self.calculated_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "result": self.result.model_dump(mode="json"),
        }
