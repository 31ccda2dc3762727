"""Convert raw questionnaire answers into pillar scores."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ravyz_match.assessment.models import (
    JobPillarScores,
    PillarScores,
    ResponseValidationError,
)
from ravyz_match.assessment.questions import (
    CANDIDATE_QUESTIONS,
    CONTRASTING_QUESTIONS,
    JOB_QUESTIONS,
    MAX_ANSWER,
    MIN_ANSWER,
    Question,
    questions_by_pillar,
)

logger = logging.getLogger(__name__)


def validate_responses(
    responses: Mapping[str, object],
    questions: tuple[Question, ...] = CANDIDATE_QUESTIONS,
) -> None:
    """Reject submissions that are incomplete or off-scale.

    Every question id must be answered with an ``int`` in [1, 5]. Unanswered
    questions are never defaulted, since a zero would drag the pillar mean
    below the scale and skew the archetype.

    Raises:
        ResponseValidationError: On any missing or invalid answer.
    """
    missing: list[str] = []
    invalid: dict[str, object] = {}

    for question in questions:
        if question.id not in responses or responses[question.id] is None:
            missing.append(question.id)
            continue
        value = responses[question.id]
        if isinstance(value, bool) or not isinstance(value, int):
            invalid[question.id] = value
        elif not MIN_ANSWER <= value <= MAX_ANSWER:
            invalid[question.id] = value

    if missing or invalid:
        raise ResponseValidationError(missing=missing, invalid=invalid)


def adjusted_score(question_id: str, raw_score: int) -> int:
    """Return the answer as it counts towards its pillar (6 - v if reversed)."""
    if question_id in CONTRASTING_QUESTIONS:
        return (MAX_ANSWER + MIN_ANSWER) - raw_score
    return raw_score


def _pillar_means(
    responses: Mapping[str, int],
    questions: tuple[Question, ...],
    *,
    reverse_contrasting: bool,
) -> dict[str, float]:
    means: dict[str, float] = {}
    for pillar, question_ids in questions_by_pillar(questions).items():
        total = 0
        for question_id in question_ids:
            raw = responses[question_id]
            total += adjusted_score(question_id, raw) if reverse_contrasting else raw
        means[pillar] = total / len(question_ids)
    return means


def calculate_pillar_scores(responses: Mapping[str, int]) -> PillarScores:
    """Score a candidate submission into the four career pillars.

    Answers to extra, unknown question ids are ignored.

    Raises:
        ResponseValidationError: If any of the 30 questions is missing or
            answered outside the 1-5 scale.
    """
    validate_responses(responses, CANDIDATE_QUESTIONS)
    means = _pillar_means(responses, CANDIDATE_QUESTIONS, reverse_contrasting=True)
    logger.debug("Candidate pillar scores: %s", means)
    return PillarScores(**means)


def calculate_job_pillar_scores(responses: Mapping[str, int]) -> JobPillarScores:
    """Score a job assessment into the five role pillars.

    The job questionnaire has no reverse-scored questions.

    Raises:
        ResponseValidationError: If any of the 30 questions is missing or
            answered outside the 1-5 scale.
    """
    validate_responses(responses, JOB_QUESTIONS)
    means = _pillar_means(responses, JOB_QUESTIONS, reverse_contrasting=False)
    logger.debug("Job pillar scores: %s", means)
    return JobPillarScores(**means)
