"""Career assessment scoring and archetype classification.

Public API:
    - assess: Score, classify and consistency-check one submission
    - calculate_pillar_scores / calculate_job_pillar_scores
    - check_consistency: Advisory warnings for contradictory answers
    - classify_archetype / classify_job_archetype
    - get_archetype_narrative: Strengths, risks and recommendations
"""

from collections.abc import Mapping

from ravyz_match.assessment.archetypes import (
    Archetype,
    ArchetypeNarrative,
    classify_archetype,
    classify_job_archetype,
    get_archetype_narrative,
)
from ravyz_match.assessment.consistency import check_consistency
from ravyz_match.assessment.models import (
    ArchetypeResult,
    AssessmentOutcome,
    JobPillarScores,
    PillarScores,
    ResponseValidationError,
)
from ravyz_match.assessment.scorer import (
    calculate_job_pillar_scores,
    calculate_pillar_scores,
)


def assess(responses: Mapping[str, int]) -> AssessmentOutcome:
    """Score a candidate submission and classify its archetype.

    Raises:
        ResponseValidationError: If the submission is incomplete or off-scale.
    """
    pillar_scores = calculate_pillar_scores(responses)
    return AssessmentOutcome(
        pillar_scores=pillar_scores,
        archetype=classify_archetype(pillar_scores),
        warnings=check_consistency(responses),
    )


__all__ = [
    "assess",
    "Archetype",
    "ArchetypeNarrative",
    "ArchetypeResult",
    "AssessmentOutcome",
    "JobPillarScores",
    "PillarScores",
    "ResponseValidationError",
    "calculate_job_pillar_scores",
    "calculate_pillar_scores",
    "check_consistency",
    "classify_archetype",
    "classify_job_archetype",
    "get_archetype_narrative",
]
