"""Advisory consistency checks on a candidate submission."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ravyz_match.assessment.questions import MAX_ANSWER, MIN_ANSWER

logger = logging.getLogger(__name__)

# Direct questions compared against each pillar's reverse-scored question.
CONSISTENCY_CHECKS: dict[str, tuple[tuple[str, ...], str]] = {
    "compensation": (("q1", "q2", "q3"), "q6"),
    "ambiente": (("q8", "q9", "q10"), "q14"),
    "proposito": (("q15", "q16", "q17"), "q20"),
    "crescimento": (("q22", "q23", "q24"), "q28"),
}

MAX_CONSISTENCY_GAP = 2.0


def check_consistency(responses: Mapping[str, object]) -> list[str]:
    """Return a warning per pillar whose direct and reversed answers disagree.

    A pillar is flagged when the mean of its direct answers differs from the
    inverted contrasting answer by more than two points. Pillars with an
    unanswered or non-numeric id in the check set are skipped; this function
    never raises and never blocks a submission.
    """
    warnings: list[str] = []

    for pillar, (direct_ids, contrasting_id) in CONSISTENCY_CHECKS.items():
        values = [responses.get(qid) for qid in (*direct_ids, contrasting_id)]
        if any(isinstance(v, bool) or not isinstance(v, int | float) for v in values):
            logger.debug("Skipping consistency check for %s: incomplete answers", pillar)
            continue

        *direct, contrasting = values
        direct_avg = sum(direct) / len(direct)
        contrasting_adjusted = (MAX_ANSWER + MIN_ANSWER) - contrasting

        if abs(direct_avg - contrasting_adjusted) > MAX_CONSISTENCY_GAP:
            message = f"Inconsistency detected in pillar {pillar}"
            logger.warning(message)
            warnings.append(message)

    return warnings
