"""Pytest configuration and shared fixtures."""

import pytest

_PILLAR_QUESTIONS = {
    "compensation": range(1, 8),
    "ambiente": range(8, 15),
    "proposito": range(15, 22),
    "crescimento": range(22, 31),
}
_CONTRASTING = {"q6", "q14", "q20", "q28"}


def build_responses(
    compensation: int = 3,
    ambiente: int = 3,
    proposito: int = 3,
    crescimento: int = 3,
) -> dict[str, int]:
    """Answers whose pillar means equal the given values.

    Reverse-scored questions receive ``6 - value`` so they count as ``value``.
    """
    targets = {
        "compensation": compensation,
        "ambiente": ambiente,
        "proposito": proposito,
        "crescimento": crescimento,
    }
    responses: dict[str, int] = {}
    for pillar, numbers in _PILLAR_QUESTIONS.items():
        for number in numbers:
            qid = f"q{number}"
            value = targets[pillar]
            responses[qid] = 6 - value if qid in _CONTRASTING else value
    return responses


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Give every test fresh settings, matching configuration and logging."""
    from ravyz_match.config.settings import reset_settings
    from ravyz_match.matching.config import reset_matching_config
    from ravyz_match.utils.logging import reset_logging

    reset_settings()
    reset_matching_config()
    reset_logging()
    yield
    reset_settings()
    reset_matching_config()
    reset_logging()


@pytest.fixture
def responses_factory():
    """Factory building a full candidate submission from pillar means."""
    return build_responses


@pytest.fixture
def matching_config():
    """Matching configuration with defaults only (no .env lookup)."""
    from ravyz_match.matching.config import MatchingConfig

    return MatchingConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def candidate():
    """A mid-level frontend developer with a growth/purpose profile."""
    from ravyz_match.matching.models import CandidateProfile

    return CandidateProfile(
        id="cand-1",
        pillar_scores={"compensation": 3, "ambiente": 4, "proposito": 4, "crescimento": 5},
        archetype="Protagonista",
        years_experience=4,
        current_position="Frontend Developer",
        skills=["React", "TypeScript", "CSS"],
        education=[{"level": "Superior", "degree": "Computer Science"}],
        languages=["Português", "Inglês"],
        location="São Paulo, SP",
        work_model=["Remoto", "Híbrido"],
        expected_salary_min=8000,
        expected_salary_max=12000,
        resume_score=80,
    )


@pytest.fixture
def job():
    """A frontend role whose pillars mirror the candidate fixture."""
    from ravyz_match.matching.models import JobProfile

    return JobProfile(
        id="job-1",
        title="Frontend Developer",
        pillar_scores={
            "ambition": 3,
            "teamwork": 4,
            "leadership": 4,
            "autonomy": 5,
            "risk": 3,
        },
        archetype="Protagonista",
        min_experience=3,
        required_skills=["React", "TypeScript"],
        education_required=["Superior"],
        languages_required=["Inglês"],
        role_type="Frontend Developer",
        location="São Paulo",
        work_model="Remoto",
        salary_min=9000,
        salary_max=13000,
        experience_level="Pleno",
    )
