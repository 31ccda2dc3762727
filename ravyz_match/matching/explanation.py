"""Human-readable explanation of a behavioral match."""

from __future__ import annotations

from ravyz_match.matching.models import BehavioralBreakdown

STRONG_PILLAR_THRESHOLD = 80.0
WEAK_PILLAR_THRESHOLD = 60.0

_TIERS: tuple[tuple[float, str], ...] = (
    (85.0, "excellent"),
    (70.0, "good"),
    (50.0, "moderate"),
)

_PILLAR_LABELS: dict[str, str] = {
    "compensation_ambition": "compensation and ambition",
    "ambiente_teamwork": "work environment and teamwork",
    "proposito_leadership": "purpose and leadership",
    "crescimento_autonomy": "growth and autonomy",
    "risk": "risk appetite",
}


def score_tier(score: float) -> str:
    """Return the qualitative tier for a 0-100 score."""
    for floor, tier in _TIERS:
        if score >= floor:
            return tier
    return "low"


def _relation_sentence(behavioral: BehavioralBreakdown) -> str:
    candidate = behavioral.candidate_archetype
    job = behavioral.job_archetype
    if not candidate or not job:
        return "Archetype comparison unavailable; behavioral fit rests on pillar scores."
    if behavioral.archetype_relation == "exact":
        return f"Candidate and role share the {candidate} archetype."
    if behavioral.archetype_relation == "compatible":
        return f"The {candidate} archetype works well alongside a {job} role."
    return f"The {candidate} archetype differs from the {job} profile of this role."


def explanation_sentences(final_score: float, behavioral: BehavioralBreakdown) -> list[str]:
    """Ordered sentences: tier, archetype relation, strongest and weakest pillar."""
    sentences = [f"{score_tier(final_score).capitalize()} compatibility ({final_score:.0f}/100)."]
    sentences.append(_relation_sentence(behavioral))

    pillars = behavioral.pillar_breakdown
    if pillars:
        # max/min keep the first key on ties
        strongest = max(pillars, key=lambda key: pillars[key])
        weakest = min(pillars, key=lambda key: pillars[key])
        if pillars[strongest] >= STRONG_PILLAR_THRESHOLD:
            sentences.append(
                f"Strongest alignment in {_PILLAR_LABELS.get(strongest, strongest)} "
                f"({pillars[strongest]:.0f}%)."
            )
        if pillars[weakest] < WEAK_PILLAR_THRESHOLD:
            sentences.append(
                f"Largest gap in {_PILLAR_LABELS.get(weakest, weakest)} "
                f"({pillars[weakest]:.0f}%)."
            )

    return sentences


def generate_explanation(final_score: float, behavioral: BehavioralBreakdown) -> str:
    return " ".join(explanation_sentences(final_score, behavioral))
