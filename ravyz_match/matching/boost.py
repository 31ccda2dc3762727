"""Archetype proximity and the behavioral archetype boost."""

from __future__ import annotations

from ravyz_match.assessment.archetypes import Archetype
from ravyz_match.matching.models import ArchetypeRelation

EXACT_MATCH_BOOST = 10
ADJACENT_MATCH_BOOST = 5

# Each archetype lists the job archetypes it works well with. The relation is
# directional: A listing B does not imply B lists A.
ARCHETYPE_PROXIMITY: dict[str, tuple[str, ...]] = {
    Archetype.PROTAGONISTA: (Archetype.TRANSFORMADOR, Archetype.MOBILIZADOR, Archetype.VISIONARIO),
    Archetype.CONSTRUTOR: (Archetype.MOBILIZADOR, Archetype.GUARDIAO, Archetype.COLABORADOR),
    Archetype.MOBILIZADOR: (Archetype.PROTAGONISTA, Archetype.CONSTRUTOR, Archetype.TRANSFORMADOR),
    Archetype.VISIONARIO: (Archetype.ESTRATEGISTA, Archetype.IDEALISTA),
    Archetype.IDEALISTA: (Archetype.IDEALISTA_PURO, Archetype.VISIONARIO, Archetype.COLABORADOR),
    Archetype.IDEALISTA_PURO: (Archetype.IDEALISTA,),
    Archetype.GUARDIAO: (Archetype.PRAGMATICO, Archetype.CONSTRUTOR),
    Archetype.PRAGMATICO: (Archetype.GUARDIAO, Archetype.ESTRATEGISTA),
    Archetype.ESTRATEGISTA: (Archetype.VISIONARIO, Archetype.PRAGMATICO),
    Archetype.COLABORADOR: (Archetype.CONSTRUTOR, Archetype.IDEALISTA, Archetype.EQUILIBRADO),
    Archetype.EQUILIBRADO: (Archetype.COLABORADOR,),
    Archetype.TRANSFORMADOR: (Archetype.PROTAGONISTA, Archetype.EXPLORADOR),
    Archetype.EXPLORADOR: (Archetype.TRANSFORMADOR, Archetype.PROATIVO),
    Archetype.PROATIVO: (Archetype.PROTAGONISTA, Archetype.EXPLORADOR),
}


def archetype_relation(
    candidate_archetype: str | None, job_archetype: str | None
) -> ArchetypeRelation:
    """Classify how a candidate archetype relates to a job archetype."""
    if not candidate_archetype or not job_archetype:
        return "different"
    if candidate_archetype == job_archetype:
        return "exact"
    if job_archetype in ARCHETYPE_PROXIMITY.get(candidate_archetype, ()):
        return "compatible"
    return "different"


def archetypes_compatible(candidate_archetype: str | None, job_archetype: str | None) -> bool:
    return archetype_relation(candidate_archetype, job_archetype) != "different"


def archetype_boost(candidate_archetype: str | None, job_archetype: str | None) -> int:
    """Behavioral bonus: 10 for identical, 5 for adjacent, otherwise 0."""
    relation = archetype_relation(candidate_archetype, job_archetype)
    if relation == "exact":
        return EXACT_MATCH_BOOST
    if relation == "compatible":
        return ADJACENT_MATCH_BOOST
    return 0
