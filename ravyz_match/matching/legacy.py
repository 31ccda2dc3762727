"""Six-factor weighted matching model.

Kept alongside the hybrid model for results that were computed before
behavioral profiles existed. Each factor is scored on 0-100 independently
and combined with the ``legacy_weight_*`` settings.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar

from ravyz_match.matching.config import MatchingConfig, get_matching_config
from ravyz_match.matching.hybrid import REMOTE_WORK_MODELS, round_score
from ravyz_match.matching.matchers import fold_text, location_matches, skills_match
from ravyz_match.matching.models import (
    CandidateProfile,
    JobProfile,
    LegacyBreakdown,
    LegacyFactors,
    LegacyMatchResult,
)

logger = logging.getLogger(__name__)

# Expected years of experience per seniority level (inclusive bounds).
EXPERIENCE_LEVEL_RANGES: dict[str, tuple[float, float]] = {
    "Júnior": (0, 3),
    "Pleno": (2, 6),
    "Sênior": (5, 10),
    "Especialista": (7, 15),
    "Coordenador": (5, 12),
    "Gerente": (8, 20),
    "Diretor": (10, 25),
    "VP/C-Level": (15, 30),
}

UNDERQUALIFIED_PENALTY = 25.0
OVERQUALIFIED_PENALTY = 10.0
OVERQUALIFIED_FLOOR = 40.0
WORK_MODEL_POINTS = 60.0
LOCATION_POINTS = 40.0
NEUTRAL_SALARY_SCORE = 50.0
BASE_ALIGNMENT = 70.0
ALIGNMENT_BONUS = 15.0
HIGH_INTENSITY = 4.0


def level_range(level: str | None) -> tuple[float, float] | None:
    if not level:
        return None
    folded = fold_text(level)
    for name, bounds in EXPERIENCE_LEVEL_RANGES.items():
        if fold_text(name) == folded:
            return bounds
    return None


def score_legacy_skills(
    candidate: CandidateProfile, job: JobProfile, threshold: float
) -> tuple[float, dict[str, bool]]:
    required = job.all_required_skills()
    details = {
        skill: any(skills_match(skill, own, threshold=threshold) for own in candidate.skills)
        for skill in required
    }
    if not details:
        return 0.0, details
    return sum(details.values()) / len(details) * 100.0, details


def score_legacy_experience(candidate: CandidateProfile, job: JobProfile) -> tuple[float, bool]:
    """Score years against the seniority band of the job.

    Falls back to ``min_experience`` as an open-ended band when the level is
    unknown; a job with neither scores 0.
    """
    bounds = level_range(job.experience_level)
    if bounds is None and job.min_experience is not None:
        bounds = (job.min_experience, math.inf)
    if bounds is None:
        return 0.0, False

    low, high = bounds
    years = candidate.years_experience or 0.0
    if low <= years <= high:
        return 100.0, True
    if years < low:
        return max(0.0, 100.0 - UNDERQUALIFIED_PENALTY * (low - years)), False
    return max(OVERQUALIFIED_FLOOR, 100.0 - OVERQUALIFIED_PENALTY * (years - high)), False


def score_legacy_location(candidate: CandidateProfile, job: JobProfile) -> tuple[float, bool, bool]:
    remote = fold_text(job.work_model or "") in REMOTE_WORK_MODELS
    accepted = {fold_text(model) for model in candidate.work_model}

    work_model_match = remote or (job.work_model is not None and fold_text(job.work_model) in accepted)
    location_match = remote or location_matches(candidate.location, job.location)

    score = 0.0
    if work_model_match:
        score += WORK_MODEL_POINTS
    if location_match:
        score += LOCATION_POINTS
    return score, work_model_match, location_match


def score_legacy_salary(candidate: CandidateProfile, job: JobProfile) -> tuple[float, float]:
    """Score salary ranges by overlap relative to their average width.

    Returns ``(score, overlap)``. Missing ranges score a neutral 50.
    """
    bounds = (
        candidate.expected_salary_min,
        candidate.expected_salary_max,
        job.salary_min,
        job.salary_max,
    )
    if any(value is None for value in bounds):
        return NEUTRAL_SALARY_SCORE, 0.0
    candidate_min, candidate_max, job_min, job_max = bounds

    overlap = max(0.0, min(candidate_max, job_max) - max(candidate_min, job_min))
    avg_range = ((candidate_max - candidate_min) + (job_max - job_min)) / 2

    if overlap > 0:
        return min(100.0, overlap / avg_range * 100.0), overlap

    if candidate_min > job_max:
        gap = candidate_min - job_max
    else:
        gap = job_min - candidate_max
    if avg_range <= 0:
        return (100.0 if gap <= 0 else 0.0), 0.0
    return max(0.0, 100.0 - gap / avg_range * 100.0), 0.0


def score_legacy_culture(candidate: CandidateProfile, job: JobProfile) -> tuple[float, float, float]:
    def aligned(trait: str) -> bool:
        return (
            job.soft_skills_intensity.get(trait, 0) >= HIGH_INTENSITY
            and candidate.professional_responses.get(trait, 0) >= HIGH_INTENSITY
        )

    work_style = min(100.0, BASE_ALIGNMENT + (ALIGNMENT_BONUS if aligned("leadership") else 0.0))
    values = min(100.0, BASE_ALIGNMENT + (ALIGNMENT_BONUS if aligned("communication") else 0.0))
    return (work_style + values) / 2, work_style, values


def legacy_explanation(breakdown: LegacyBreakdown, factors: LegacyFactors) -> str:
    parts: list[str] = []

    if breakdown.total >= 85:
        parts.append("Excellent match: the candidate is highly compatible with the role.")
    elif breakdown.total >= 70:
        parts.append("Good match with solid overall compatibility.")
    elif breakdown.total >= 50:
        parts.append("Moderate match; some adjustments may be needed.")
    else:
        parts.append("Low match; significant differences identified.")

    if breakdown.skills >= 80:
        parts.append(f"Excellent skills fit ({breakdown.skills:.0f}%).")
    elif breakdown.skills >= 60:
        parts.append(f"Good skills fit ({breakdown.skills:.0f}%).")
    else:
        parts.append(f"Some skills need development ({breakdown.skills:.0f}%).")

    if factors.level_match:
        parts.append("Experience level is ideal for the role.")
    elif breakdown.experience >= 70:
        parts.append("Experience is compatible with minor gaps.")
    else:
        parts.append("Significant difference in experience level.")

    if factors.salary_overlap > 0:
        parts.append("Salary expectation aligns with the offer.")
    else:
        parts.append("Salary expectation needs negotiation.")

    if factors.work_model_match and factors.location_match:
        parts.append("Location and work model are a perfect fit.")
    elif factors.work_model_match:
        parts.append("Work model is compatible.")
    else:
        parts.append("Flexibility needed on location or work model.")

    return " ".join(parts)


@dataclass(frozen=True)
class LegacyStrategy:
    """Skills, experience, location, salary, culture and resume, weighted."""

    config: MatchingConfig = field(default_factory=get_matching_config)
    name: ClassVar[str] = "legacy"

    def score(self, candidate: CandidateProfile, job: JobProfile) -> LegacyMatchResult:
        skills, skill_details = score_legacy_skills(
            candidate, job, self.config.legacy_skill_threshold
        )
        experience, level_match = score_legacy_experience(candidate, job)
        location, work_model_match, location_match = score_legacy_location(candidate, job)
        salary, overlap = score_legacy_salary(candidate, job)
        culture, work_style, values = score_legacy_culture(candidate, job)
        resume = candidate.resume_score or 0.0

        scores = {
            "skills": skills,
            "experience": experience,
            "location": location,
            "salary": salary,
            "culture": culture,
            "resume": resume,
        }
        weights = self.config.legacy_weights()
        total = max(0.0, min(100.0, sum(scores[key] * weights[key] for key in scores)))

        breakdown = LegacyBreakdown(**scores, total=total)
        factors = LegacyFactors(
            skill_details=skill_details,
            level_match=level_match,
            years_experience=candidate.years_experience,
            work_model_match=work_model_match,
            location_match=location_match,
            salary_overlap=overlap,
            work_style_alignment=work_style,
            value_alignment=values,
        )
        final_score = round_score(total)
        logger.debug("Legacy match %s/%s: %s", candidate.id, job.id, scores)

        return LegacyMatchResult(
            candidate_id=candidate.id,
            job_id=job.id,
            final_score=final_score,
            explanation=legacy_explanation(breakdown, factors),
            breakdown=breakdown,
            factors=factors,
        )
