"""Pillar-to-pillar compatibility between a candidate and a job.

Candidate and job pillars live in different spaces; they are bridged by a
fixed correspondence. The job's risk pillar has no candidate counterpart and
is scored against a neutral reference with a gentler penalty.
"""

from __future__ import annotations

from ravyz_match.assessment.models import JobPillarScores, PillarScores

# candidate pillar -> job pillar
PILLAR_CORRESPONDENCE: dict[str, str] = {
    "compensation": "ambition",
    "ambiente": "teamwork",
    "proposito": "leadership",
    "crescimento": "autonomy",
}

PILLAR_PENALTY = 20.0
RISK_PENALTY = 15.0
NEUTRAL_RISK = 3.0
NEUTRAL_BEHAVIORAL_SCORE = 50.0
RISK_KEY = "risk"


def pillar_compatibility(candidate_value: float, job_value: float) -> float:
    """Percentage closeness of two 1-5 values (20 points lost per unit)."""
    return max(0.0, 100.0 - abs(candidate_value - job_value) * PILLAR_PENALTY)


def risk_compatibility(job_risk: float) -> float:
    """Distance of the job's risk level from the neutral midpoint."""
    return max(0.0, 100.0 - abs(job_risk - NEUTRAL_RISK) * RISK_PENALTY)


def breakdown_key(candidate_pillar: str) -> str:
    return f"{candidate_pillar}_{PILLAR_CORRESPONDENCE[candidate_pillar]}"


def calculate_pillar_breakdown(
    candidate: PillarScores, job: JobPillarScores
) -> dict[str, float]:
    """Compatibility per mapped pillar pair, plus the job risk pillar.

    Pairs where either side is missing are left out rather than scored.
    """
    candidate_values = candidate.present()
    job_values = job.present()

    breakdown: dict[str, float] = {}
    for candidate_pillar, job_pillar in PILLAR_CORRESPONDENCE.items():
        if candidate_pillar in candidate_values and job_pillar in job_values:
            breakdown[breakdown_key(candidate_pillar)] = pillar_compatibility(
                candidate_values[candidate_pillar], job_values[job_pillar]
            )

    if RISK_KEY in job_values:
        breakdown[RISK_KEY] = risk_compatibility(job_values[RISK_KEY])

    return breakdown


def base_behavioral_score(breakdown: dict[str, float]) -> float:
    """Mean of the pillar compatibilities (neutral 50 when none apply)."""
    if not breakdown:
        return NEUTRAL_BEHAVIORAL_SCORE
    return sum(breakdown.values()) / len(breakdown)
