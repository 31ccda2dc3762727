"""Data models for the assessment scorer and archetype classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

PillarValue = Annotated[float, Field(ge=1.0, le=5.0)]
Confidence = Literal["high", "medium", "low"]


class ResponseValidationError(ValueError):
    """Raised when a questionnaire submission cannot be scored.

    Attributes:
        missing: Question ids with no answer.
        invalid: Question ids mapped to the offending answer (non-integer or
            outside the 1-5 scale).
    """

    def __init__(
        self,
        missing: list[str] | None = None,
        invalid: dict[str, object] | None = None,
    ) -> None:
        self.missing = list(missing or [])
        self.invalid = dict(invalid or {})

        parts: list[str] = []
        if self.missing:
            parts.append(f"missing answers: {', '.join(self.missing)}")
        if self.invalid:
            rendered = ", ".join(f"{qid}={value!r}" for qid, value in self.invalid.items())
            parts.append(f"answers outside 1-5: {rendered}")
        super().__init__("Invalid assessment responses (" + "; ".join(parts) + ")")


class PillarScores(BaseModel):
    """Candidate pillar vector, each value a mean on the 1-5 scale.

    Fields are optional so that partially filled profiles can still be
    matched; absent pillars are excluded from compatibility averages.
    Capitalised/accented keys used by older stored profiles are accepted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    compensation: PillarValue | None = Field(
        default=None, validation_alias=AliasChoices("compensation", "Compensation")
    )
    ambiente: PillarValue | None = Field(
        default=None, validation_alias=AliasChoices("ambiente", "Ambiente")
    )
    proposito: PillarValue | None = Field(
        default=None,
        validation_alias=AliasChoices("proposito", "Propósito", "propósito", "Proposito"),
    )
    crescimento: PillarValue | None = Field(
        default=None, validation_alias=AliasChoices("crescimento", "Crescimento")
    )

    def present(self) -> dict[str, float]:
        """Return the pillars that carry a value, in declaration order."""
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def is_complete(self) -> bool:
        return len(self.present()) == len(type(self).model_fields)


class JobPillarScores(BaseModel):
    """Job pillar vector (five role dimensions on the 1-5 scale)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    autonomy: PillarValue | None = Field(
        default=None, validation_alias=AliasChoices("autonomy", "Autonomia", "autonomia")
    )
    leadership: PillarValue | None = Field(
        default=None,
        validation_alias=AliasChoices("leadership", "Liderança", "lideranca"),
    )
    teamwork: PillarValue | None = Field(
        default=None,
        validation_alias=AliasChoices("teamwork", "TrabalhoGrupo", "trabalho_grupo"),
    )
    risk: PillarValue | None = Field(
        default=None, validation_alias=AliasChoices("risk", "Risco", "risco")
    )
    ambition: PillarValue | None = Field(
        default=None, validation_alias=AliasChoices("ambition", "Ambição", "ambicao")
    )

    def present(self) -> dict[str, float]:
        """Return the pillars that carry a value, in declaration order."""
        return {k: v for k, v in self.model_dump().items() if v is not None}


@dataclass(frozen=True)
class ArchetypeResult:
    """Outcome of classifying a candidate pillar vector."""

    archetype: str
    pillar_scores: PillarScores
    dominant_pillars: tuple[tuple[str, float], tuple[str, float]]
    confidence: Confidence
    description: str

    def __post_init__(self) -> None:
        if self.confidence not in {"high", "medium", "low"}:
            raise ValueError(
                f"confidence must be one of: high, medium, low (got {self.confidence})"
            )


@dataclass(frozen=True)
class AssessmentOutcome:
    """Everything derived from one candidate questionnaire submission."""

    pillar_scores: PillarScores
    archetype: ArchetypeResult
    warnings: list[str] = field(default_factory=list)
