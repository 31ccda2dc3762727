"""Data models for candidate/job matching."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from ravyz_match.assessment.models import JobPillarScores, PillarScores

Percentage = Annotated[float, Field(ge=0.0, le=100.0)]
ArchetypeRelation = Literal["exact", "compatible", "different"]


class _Input(BaseModel):
    # Accepts both snake_case and the camelCase keys used by stored profiles.
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class EducationEntry(_Input):
    """Education entry as produced by the resume parser."""

    level: str = Field(..., description="Education level, e.g. 'Superior'")
    degree: str | None = Field(default=None, description="Degree or course name")
    institution: str | None = Field(default=None, description="Institution name")


class CandidateProfile(_Input):
    """Candidate data consumed by the matching strategies."""

    id: str = Field(..., description="Candidate identifier")
    pillar_scores: PillarScores = Field(default_factory=PillarScores)
    archetype: str | None = Field(default=None, description="Candidate archetype label")

    years_experience: float | None = Field(default=None, ge=0)
    current_position: str | None = Field(default=None)
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)

    location: str | None = Field(default=None)
    work_model: list[str] = Field(default_factory=list, description="Accepted work models")
    expected_salary_min: float | None = Field(default=None, ge=0)
    expected_salary_max: float | None = Field(default=None, ge=0)

    # Legacy six-factor inputs
    resume_score: Percentage | None = Field(default=None)
    professional_responses: dict[str, float] = Field(default_factory=dict)

    @field_validator("education", mode="before")
    @classmethod
    def coerce_education(cls, v: object) -> object:
        """Allow plain level strings in place of education entries."""
        if isinstance(v, list):
            return [{"level": item} if isinstance(item, str) else item for item in v]
        return v


class JobProfile(_Input):
    """Job data consumed by the matching strategies."""

    id: str = Field(..., description="Job identifier")
    title: str | None = Field(default=None)
    pillar_scores: JobPillarScores = Field(default_factory=JobPillarScores)
    archetype: str | None = Field(default=None, description="Job archetype label")

    min_experience: float | None = Field(default=None, ge=0)
    required_skills: list[str] = Field(default_factory=list)
    technical_skills: list[str] = Field(default_factory=list)
    education_required: list[str] = Field(default_factory=list)
    languages_required: list[str] = Field(default_factory=list)
    role_type: str | None = Field(default=None)

    location: str | None = Field(default=None)
    work_model: str | None = Field(default=None)
    salary_min: float | None = Field(default=None, ge=0)
    salary_max: float | None = Field(default=None, ge=0)

    # Legacy six-factor inputs
    experience_level: str | None = Field(default=None, description="e.g. 'Pleno'")
    soft_skills_intensity: dict[str, float] = Field(default_factory=dict)

    def all_required_skills(self) -> list[str]:
        """Required plus technical skills, de-duplicated case-insensitively."""
        seen: set[str] = set()
        merged: list[str] = []
        for skill in [*self.required_skills, *self.technical_skills]:
            key = skill.strip().lower()
            if key and key not in seen:
                seen.add(key)
                merged.append(skill)
        return merged


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class BehavioralBreakdown(_Result):
    """Pillar and archetype side of a match."""

    score: Percentage
    base_score: Percentage
    archetype_boost: int = Field(..., ge=0, le=10)
    candidate_archetype: str | None = None
    job_archetype: str | None = None
    archetype_relation: ArchetypeRelation = "different"
    pillar_breakdown: dict[str, float] = Field(default_factory=dict)


class ExperienceBreakdown(_Result):
    score: Percentage
    years_score: Percentage
    position_score: Percentage
    education_score: Percentage


class SkillsBreakdown(_Result):
    score: Percentage
    match_rate: Percentage
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)


class AdjustmentsBreakdown(_Result):
    archetype: float = 0.0
    location: float = 0.0
    language: float = 0.0
    total: float = 0.0


class HybridBreakdown(_Result):
    behavioral: BehavioralBreakdown
    experience: ExperienceBreakdown
    skills: SkillsBreakdown
    adjustments: AdjustmentsBreakdown


class _MatchResultBase(_Result):
    candidate_id: str
    job_id: str
    final_score: int = Field(..., ge=0, le=100)
    explanation: str = ""


class MatchResult(_MatchResultBase):
    """Hybrid multi-factor match result (behavioral, experience, skills)."""

    strategy: Literal["hybrid"] = "hybrid"
    behavioral_score: Percentage
    experience_score: Percentage
    skills_score: Percentage
    adjustments: float = Field(..., ge=0.0)
    breakdown: HybridBreakdown


class BehavioralMatchResult(_MatchResultBase):
    """Pillar + archetype only match result."""

    strategy: Literal["behavioral"] = "behavioral"
    behavioral: BehavioralBreakdown


class LegacyBreakdown(_Result):
    skills: Percentage
    experience: Percentage
    location: Percentage
    salary: Percentage
    culture: Percentage
    resume: Percentage
    total: Percentage


class LegacyFactors(_Result):
    """Per-factor details of the six-factor model."""

    skill_details: dict[str, bool] = Field(default_factory=dict)
    level_match: bool = False
    years_experience: float | None = None
    work_model_match: bool = False
    location_match: bool = False
    salary_overlap: float = 0.0
    work_style_alignment: Percentage = 70.0
    value_alignment: Percentage = 70.0


class LegacyMatchResult(_MatchResultBase):
    """Six-factor weighted-average match result."""

    strategy: Literal["legacy"] = "legacy"
    breakdown: LegacyBreakdown
    factors: LegacyFactors


AnyMatchResult = Annotated[
    MatchResult | BehavioralMatchResult | LegacyMatchResult,
    Field(discriminator="strategy"),
]

match_result_adapter: TypeAdapter[MatchResult | BehavioralMatchResult | LegacyMatchResult] = (
    TypeAdapter(AnyMatchResult)
)
