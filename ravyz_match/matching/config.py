"""Configuration settings for candidate/job matching."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Weight = Annotated[float, Field(ge=0.0, le=1.0)]
Points = Annotated[float, Field(ge=0.0, le=100.0)]


def _check_sum(name: str, weights: dict[str, float]) -> None:
    total = sum(weights.values())
    if abs(total - 1.0) > 1e-6:
        rendered = ", ".join(f"{key}={value}" for key, value in weights.items())
        raise ValueError(f"{name} weights must sum to 1.0. Got {total:.6f} ({rendered}).")


class MatchingConfig(BaseSettings):
    """Matching configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Hybrid model weights (must sum to 1.0)
    weight_behavioral: Weight = Field(
        default=0.40, description="Weight for behavioral (pillar + archetype) fit"
    )
    weight_experience: Weight = Field(
        default=0.35, description="Weight for experience and education fit"
    )
    weight_skills: Weight = Field(default=0.25, description="Weight for skills overlap")

    # Experience sub-weights (must sum to 1.0)
    years_weight: Weight = Field(default=0.5, description="Share of years of experience")
    position_weight: Weight = Field(default=0.3, description="Share of position match")
    education_weight: Weight = Field(default=0.2, description="Share of education level")

    # Skills
    skill_match_threshold: Weight = Field(
        default=0.7,
        description="Minimum similarity for a candidate skill to satisfy a requirement",
    )
    skills_boost_threshold: Points = Field(
        default=80.0, description="Match rate from which the skills boost applies"
    )
    skills_boost: Points = Field(default=5.0, description="Bonus for a high match rate")

    # Adjustments
    archetype_adjustment: Points = Field(
        default=5.0, description="Bonus when archetypes are identical or adjacent"
    )
    location_adjustment: Points = Field(
        default=3.0, description="Bonus for remote jobs or matching location"
    )
    language_adjustment: Points = Field(
        default=2.0, description="Bonus when all required languages are spoken"
    )
    adjustment_cap: Points = Field(default=10.0, description="Cap on summed adjustments")

    # Legacy six-factor model weights (must sum to 1.0)
    legacy_weight_skills: Weight = Field(default=0.25)
    legacy_weight_experience: Weight = Field(default=0.20)
    legacy_weight_location: Weight = Field(default=0.15)
    legacy_weight_salary: Weight = Field(default=0.15)
    legacy_weight_culture: Weight = Field(default=0.15)
    legacy_weight_resume: Weight = Field(default=0.10)
    legacy_skill_threshold: Weight = Field(
        default=0.8, description="Skill similarity threshold used by the legacy model"
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> MatchingConfig:
        """Ensure each weight group sums to 1.0 (within tolerance)."""
        _check_sum(
            "Hybrid",
            {
                "behavioral": self.weight_behavioral,
                "experience": self.weight_experience,
                "skills": self.weight_skills,
            },
        )
        _check_sum(
            "Experience",
            {
                "years": self.years_weight,
                "position": self.position_weight,
                "education": self.education_weight,
            },
        )
        _check_sum("Legacy", self.legacy_weights())
        return self

    def legacy_weights(self) -> dict[str, float]:
        return {
            "skills": self.legacy_weight_skills,
            "experience": self.legacy_weight_experience,
            "location": self.legacy_weight_location,
            "salary": self.legacy_weight_salary,
            "culture": self.legacy_weight_culture,
            "resume": self.legacy_weight_resume,
        }


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
