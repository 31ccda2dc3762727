"""Hybrid multi-factor scoring: behavioral, experience and skills."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import ClassVar

from ravyz_match.matching.boost import archetype_boost, archetype_relation, archetypes_compatible
from ravyz_match.matching.config import MatchingConfig, get_matching_config
from ravyz_match.matching.explanation import generate_explanation
from ravyz_match.matching.matchers import (
    canonicalize_skill,
    find_matching_skills,
    fold_text,
    location_matches,
    token_overlap,
)
from ravyz_match.matching.models import (
    AdjustmentsBreakdown,
    BehavioralBreakdown,
    CandidateProfile,
    EducationEntry,
    ExperienceBreakdown,
    HybridBreakdown,
    JobProfile,
    MatchResult,
    SkillsBreakdown,
)
from ravyz_match.matching.pillars import base_behavioral_score, calculate_pillar_breakdown

logger = logging.getLogger(__name__)

YEAR_GAP_PENALTY = 20.0
EDUCATION_STEP_PENALTY = 25.0
REMOTE_WORK_MODELS = frozenset({"remoto", "remote"})

# Checked in order; the first pattern found in the folded text wins.
_EDUCATION_PATTERNS: tuple[tuple[str, int], ...] = (
    (r"doutor|\bphd\b|doctor", 7),
    (r"mestrad|master", 6),
    (r"\bpos\b|\bmba\b|especializ|postgrad", 5),
    (r"superior|graduac|bacharel|licenciatura|bachelor", 4),
    (r"tecnic|technical", 3),
    (r"medio|high school", 2),
    (r"fundamental|elementary", 1),
)


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_score(value: float) -> int:
    """Round half up, as percentages are shown to users."""
    return int(math.floor(value + 0.5))


def score_behavioral(candidate: CandidateProfile, job: JobProfile) -> BehavioralBreakdown:
    """Pillar compatibility plus archetype boost, capped at 100."""
    pillar_breakdown = calculate_pillar_breakdown(candidate.pillar_scores, job.pillar_scores)
    base = base_behavioral_score(pillar_breakdown)
    boost = archetype_boost(candidate.archetype, job.archetype)
    return BehavioralBreakdown(
        score=min(100.0, base + boost),
        base_score=base,
        archetype_boost=boost,
        candidate_archetype=candidate.archetype,
        job_archetype=job.archetype,
        archetype_relation=archetype_relation(candidate.archetype, job.archetype),
        pillar_breakdown=pillar_breakdown,
    )


def score_years(years_experience: float | None, min_experience: float | None) -> float:
    """100 when the minimum is met, minus 20 points per missing year."""
    if min_experience is None:
        return 100.0
    years = years_experience or 0.0
    if years >= min_experience:
        return 100.0
    return max(0.0, 100.0 - YEAR_GAP_PENALTY * (min_experience - years))


def score_position(current_position: str | None, role_type: str | None) -> float:
    """Share of the role type's keywords present in the current position."""
    if not role_type or not role_type.strip():
        return 100.0
    return token_overlap(role_type, current_position) * 100.0


def education_level(value: str | None) -> int | None:
    """Map an education description onto the 1 (fundamental) .. 7 (doctorate) scale."""
    if not value:
        return None
    folded = fold_text(value)
    for pattern, level in _EDUCATION_PATTERNS:
        if re.search(pattern, folded):
            return level
    return None


def _highest_education_level(education: list[EducationEntry]) -> int | None:
    levels = [education_level(entry.level) or education_level(entry.degree) for entry in education]
    known = [level for level in levels if level is not None]
    if not known:
        return None
    return max(known)


def score_education(education: list[EducationEntry], required: list[str]) -> float:
    """Compare the candidate's highest level with the lowest accepted level."""
    required_levels = [education_level(item) for item in required]
    known_required = [level for level in required_levels if level is not None]
    if not known_required:
        return 100.0

    candidate_level = _highest_education_level(education)
    if candidate_level is None:
        return 0.0

    minimum = min(known_required)
    if candidate_level >= minimum:
        return 100.0
    return max(0.0, 100.0 - EDUCATION_STEP_PENALTY * (minimum - candidate_level))


def score_experience(
    candidate: CandidateProfile, job: JobProfile, config: MatchingConfig
) -> ExperienceBreakdown:
    years = score_years(candidate.years_experience, job.min_experience)
    position = score_position(candidate.current_position, job.role_type)
    education = score_education(candidate.education, job.education_required)
    total = (
        config.years_weight * years
        + config.position_weight * position
        + config.education_weight * education
    )
    return ExperienceBreakdown(
        score=_clamp(total),
        years_score=years,
        position_score=position,
        education_score=education,
    )


def score_skills(
    candidate: CandidateProfile, job: JobProfile, config: MatchingConfig
) -> SkillsBreakdown:
    """Fuzzy match rate of the job's skills, with a boost for high coverage."""
    required = job.all_required_skills()
    if not required:
        return SkillsBreakdown(score=100.0, match_rate=100.0)

    matched, missing = find_matching_skills(
        required=required,
        available=candidate.skills,
        threshold=config.skill_match_threshold,
    )
    match_rate = len(matched) / len(required) * 100.0
    score = match_rate
    if match_rate >= config.skills_boost_threshold:
        score = min(100.0, match_rate + config.skills_boost)

    return SkillsBreakdown(
        score=score,
        match_rate=match_rate,
        matched_skills=matched,
        missing_skills=missing,
    )


def _speaks_all(languages: list[str], required: list[str]) -> bool:
    spoken = {canonicalize_skill(language) for language in languages}
    return all(canonicalize_skill(language) in spoken for language in required)


def score_adjustments(
    candidate: CandidateProfile, job: JobProfile, config: MatchingConfig
) -> AdjustmentsBreakdown:
    """Additive bonuses for archetype, location and language fit."""
    archetype = (
        config.archetype_adjustment
        if archetypes_compatible(candidate.archetype, job.archetype)
        else 0.0
    )

    remote = fold_text(job.work_model or "") in REMOTE_WORK_MODELS
    location = (
        config.location_adjustment
        if remote or location_matches(candidate.location, job.location)
        else 0.0
    )

    language = (
        config.language_adjustment
        if _speaks_all(candidate.languages, job.languages_required)
        else 0.0
    )

    return AdjustmentsBreakdown(
        archetype=archetype,
        location=location,
        language=language,
        total=min(config.adjustment_cap, archetype + location + language),
    )


@dataclass(frozen=True)
class HybridStrategy:
    """Weighted behavioral/experience/skills score plus capped adjustments."""

    config: MatchingConfig = field(default_factory=get_matching_config)
    name: ClassVar[str] = "hybrid"

    def score(self, candidate: CandidateProfile, job: JobProfile) -> MatchResult:
        behavioral = score_behavioral(candidate, job)
        experience = score_experience(candidate, job, self.config)
        skills = score_skills(candidate, job, self.config)
        adjustments = score_adjustments(candidate, job, self.config)

        weighted = (
            self.config.weight_behavioral * behavioral.score
            + self.config.weight_experience * experience.score
            + self.config.weight_skills * skills.score
            + adjustments.total
        )
        final_score = round_score(_clamp(weighted))

        logger.debug(
            "Hybrid match %s/%s: behavioral=%.1f experience=%.1f skills=%.1f "
            "adjustments=%.1f final=%d",
            candidate.id,
            job.id,
            behavioral.score,
            experience.score,
            skills.score,
            adjustments.total,
            final_score,
        )

        return MatchResult(
            candidate_id=candidate.id,
            job_id=job.id,
            final_score=final_score,
            explanation=generate_explanation(final_score, behavioral),
            behavioral_score=behavioral.score,
            experience_score=experience.score,
            skills_score=skills.score,
            adjustments=adjustments.total,
            breakdown=HybridBreakdown(
                behavioral=behavioral,
                experience=experience,
                skills=skills,
                adjustments=adjustments,
            ),
        )
