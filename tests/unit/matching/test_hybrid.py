"""Tests for the hybrid multi-factor scorer."""

import pytest


def _analyst_pair():
    """A pair with hand-computed sub-scores (final score 70)."""
    from ravyz_match.matching.models import CandidateProfile, JobProfile

    candidate = CandidateProfile(
        id="cand-analyst",
        pillar_scores={"compensation": 3, "ambiente": 3, "proposito": 3, "crescimento": 3},
        archetype="Guardião",
        years_experience=2,
        current_position="Data Engineer",
        skills=["SQL Server", "Python"],
        education=["Técnico em Informática"],
        location="São Paulo",
    )
    job = JobProfile(
        id="job-analyst",
        pillar_scores={"ambition": 4, "teamwork": 4, "leadership": 4, "autonomy": 4, "risk": 5},
        archetype="Explorador",
        min_experience=3,
        required_skills=["SQL", "Python", "Excel", "Power BI"],
        education_required=["Superior"],
        role_type="Data Analyst",
        location="Curitiba",
        work_model="Presencial",
    )
    return candidate, job


class TestScoreYears:
    """Test score_years."""

    def test_gap_costs_twenty_points_per_year(self):
        """Two years against five required should give 40."""
        from ravyz_match.matching.hybrid import score_years

        assert score_years(2, 5) == 40.0

    def test_meeting_the_minimum_gives_full_credit(self):
        """Equal or more years should give 100."""
        from ravyz_match.matching.hybrid import score_years

        assert score_years(5, 5) == 100.0
        assert score_years(12, 5) == 100.0

    def test_large_gap_floors_at_zero(self):
        """The score should never be negative."""
        from ravyz_match.matching.hybrid import score_years

        assert score_years(0, 8) == 0.0

    def test_no_minimum_and_missing_years(self):
        """No requirement gives 100; unknown years count as zero."""
        from ravyz_match.matching.hybrid import score_years

        assert score_years(None, None) == 100.0
        assert score_years(None, 2) == 60.0


class TestScorePosition:
    """Test score_position."""

    def test_keyword_overlap(self):
        """The share of role keywords in the current title is used."""
        from ravyz_match.matching.hybrid import score_position

        assert score_position("Senior Frontend Engineer", "Frontend Developer") == 50.0
        assert score_position("Frontend Developer", "frontend developer") == 100.0

    def test_missing_values(self):
        """No role type is a full match; no current position is none."""
        from ravyz_match.matching.hybrid import score_position

        assert score_position("Anything", None) == 100.0
        assert score_position(None, "Developer") == 0.0


class TestEducation:
    """Test education_level and score_education."""

    @pytest.mark.parametrize(
        ("text", "level"),
        [
            ("Ensino Fundamental", 1),
            ("Ensino Médio", 2),
            ("Técnico em Informática", 3),
            ("Superior Completo", 4),
            ("Bacharelado em Direito", 4),
            ("Pós-graduação", 5),
            ("MBA Executivo", 5),
            ("Mestrado", 6),
            ("Doutorado", 7),
            ("Curso livre", None),
            (None, None),
        ],
    )
    def test_education_level_scale(self, text, level):
        """Descriptions should map onto the ordinal scale."""
        from ravyz_match.matching.hybrid import education_level

        assert education_level(text) == level

    def test_meets_lowest_accepted_level(self):
        """Any accepted level met gives full credit."""
        from ravyz_match.matching.hybrid import score_education
        from ravyz_match.matching.models import EducationEntry

        education = [EducationEntry(level="Superior")]

        assert score_education(education, ["Mestrado", "Superior"]) == 100.0

    def test_partial_credit_by_distance(self):
        """Each level short costs 25 points."""
        from ravyz_match.matching.hybrid import score_education
        from ravyz_match.matching.models import EducationEntry

        assert score_education([EducationEntry(level="Ensino Médio")], ["Superior"]) == 50.0
        assert score_education([EducationEntry(level="Fundamental")], ["Doutorado"]) == 0.0

    def test_highest_candidate_level_counts(self):
        """The candidate's best entry is compared."""
        from ravyz_match.matching.hybrid import score_education
        from ravyz_match.matching.models import EducationEntry

        education = [EducationEntry(level="Médio"), EducationEntry(level="Mestrado")]

        assert score_education(education, ["Superior"]) == 100.0

    def test_no_or_unknown_requirement_and_no_education(self):
        """Unknown requirements are ignored; missing education scores zero."""
        from ravyz_match.matching.hybrid import score_education

        assert score_education([], []) == 100.0
        assert score_education([], ["Curso livre"]) == 100.0
        assert score_education([], ["Superior"]) == 0.0


class TestScoreSkills:
    """Test score_skills."""

    def test_partial_coverage_has_no_boost(self, matching_config):
        """Two of three skills gives a 66.7 match rate and no boost."""
        from ravyz_match.matching.hybrid import score_skills
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        candidate = CandidateProfile(id="c", skills=["React", "TypeScript"])
        job = JobProfile(id="j", required_skills=["React", "TypeScript", "Node.js"])

        skills = score_skills(candidate, job, matching_config)

        assert skills.match_rate == pytest.approx(66.67, abs=0.01)
        assert skills.score == pytest.approx(66.67, abs=0.01)
        assert skills.matched_skills == ["React", "TypeScript"]
        assert skills.missing_skills == ["Node.js"]

    def test_high_coverage_gets_boost(self, matching_config):
        """A match rate of 80% or more adds 5 points."""
        from ravyz_match.matching.hybrid import score_skills
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        candidate = CandidateProfile(id="c", skills=["Python", "SQL", "Docker", "Git"])
        job = JobProfile(
            id="j",
            required_skills=["Python", "SQL", "Docker"],
            technical_skills=["Git", "Kubernetes"],
        )

        skills = score_skills(candidate, job, matching_config)

        assert skills.match_rate == pytest.approx(80.0)
        assert skills.score == pytest.approx(85.0)

    def test_boost_is_capped_at_one_hundred(self, matching_config):
        """Full coverage stays at 100."""
        from ravyz_match.matching.hybrid import score_skills
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        candidate = CandidateProfile(id="c", skills=["Python"])
        job = JobProfile(id="j", required_skills=["python"])

        assert score_skills(candidate, job, matching_config).score == 100.0

    def test_required_and_technical_skills_are_deduplicated(self, matching_config):
        """A skill listed in both lists counts once."""
        from ravyz_match.matching.hybrid import score_skills
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        candidate = CandidateProfile(id="c", skills=["Python"])
        job = JobProfile(id="j", required_skills=["Python", "Go"], technical_skills=["python"])

        assert score_skills(candidate, job, matching_config).match_rate == 50.0

    def test_substring_skills_count_as_matched(self, matching_config):
        """Skills contained in a longer candidate skill are matched."""
        from ravyz_match.matching.hybrid import score_skills
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        candidate = CandidateProfile(id="c", skills=["MySQL", "PostgreSQL Admin"])
        job = JobProfile(id="j", required_skills=["SQL", "PostgreSQL"])

        skills = score_skills(candidate, job, matching_config)

        assert skills.match_rate == 100.0
        assert skills.missing_skills == []

    def test_no_required_skills(self, matching_config):
        """A job without skills is fully covered."""
        from ravyz_match.matching.hybrid import score_skills
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        skills = score_skills(CandidateProfile(id="c"), JobProfile(id="j"), matching_config)

        assert skills.score == 100.0


class TestScoreAdjustments:
    """Test score_adjustments."""

    def test_all_adjustments_sum_to_cap(self, candidate, job, matching_config):
        """Archetype, remote and language bonuses add up to 10."""
        from ravyz_match.matching.hybrid import score_adjustments

        adjustments = score_adjustments(candidate, job, matching_config)

        assert adjustments.archetype == 5.0
        assert adjustments.location == 3.0
        assert adjustments.language == 2.0
        assert adjustments.total == 10.0

    def test_location_match_without_remote(self, candidate, job, matching_config):
        """Matching locations count when the job is not remote."""
        from ravyz_match.matching.hybrid import score_adjustments

        onsite = job.model_copy(update={"work_model": "Presencial", "location": "São Paulo"})
        elsewhere = job.model_copy(update={"work_model": "Presencial", "location": "Recife"})

        assert score_adjustments(candidate, onsite, matching_config).location == 3.0
        assert score_adjustments(candidate, elsewhere, matching_config).location == 0.0

    def test_remote_is_case_insensitive(self, candidate, job, matching_config):
        """'remote' and 'Remoto' are both remote."""
        from ravyz_match.matching.hybrid import score_adjustments

        remote = job.model_copy(update={"work_model": "remote", "location": "Recife"})

        assert score_adjustments(candidate, remote, matching_config).location == 3.0

    def test_language_requires_every_entry(self, candidate, job, matching_config):
        """All required languages must be spoken."""
        from ravyz_match.matching.hybrid import score_adjustments

        spanish = job.model_copy(update={"languages_required": ["Inglês", "Espanhol"]})
        none_required = job.model_copy(update={"languages_required": []})

        assert score_adjustments(candidate, spanish, matching_config).language == 0.0
        assert score_adjustments(candidate, none_required, matching_config).language == 2.0

    def test_adjacent_archetype_counts_as_compatible(self, candidate, job, matching_config):
        """Adjacent archetypes get the full +5, not the boost value."""
        from ravyz_match.matching.hybrid import score_adjustments

        adjacent = job.model_copy(update={"archetype": "Transformador"})
        unrelated = job.model_copy(update={"archetype": "Guardião"})

        assert score_adjustments(candidate, adjacent, matching_config).archetype == 5.0
        assert score_adjustments(candidate, unrelated, matching_config).archetype == 0.0

    def test_cap_is_configurable(self, candidate, job):
        """The total should never exceed adjustment_cap."""
        from ravyz_match.matching.config import MatchingConfig
        from ravyz_match.matching.hybrid import score_adjustments

        config = MatchingConfig(_env_file=None, adjustment_cap=4)  # type: ignore[call-arg]

        adjustments = score_adjustments(candidate, job, config)

        assert adjustments.total == 4.0
        assert adjustments.archetype + adjustments.location + adjustments.language == 10.0


class TestHybridStrategy:
    """Test HybridStrategy.score end to end."""

    def test_weighted_final_score(self, matching_config):
        """Sub-scores combine with the 0.40/0.35/0.25 weights."""
        from ravyz_match.matching.hybrid import HybridStrategy

        candidate, job = _analyst_pair()

        result = HybridStrategy(config=matching_config).score(candidate, job)

        assert result.behavioral_score == pytest.approx(78.0)
        assert result.breakdown.behavioral.archetype_boost == 0
        assert result.breakdown.experience.years_score == pytest.approx(80.0)
        assert result.breakdown.experience.position_score == pytest.approx(50.0)
        assert result.breakdown.experience.education_score == pytest.approx(75.0)
        assert result.experience_score == pytest.approx(70.0)
        assert result.skills_score == pytest.approx(50.0)
        assert result.adjustments == pytest.approx(2.0)
        assert result.final_score == 70

    def test_final_score_is_clamped(self, candidate, job, matching_config):
        """A perfect pair plus adjustments should stop at 100."""
        from ravyz_match.matching.hybrid import HybridStrategy

        result = HybridStrategy(config=matching_config).score(candidate, job)

        assert result.behavioral_score == 100.0
        assert result.experience_score == 100.0
        assert result.skills_score == 100.0
        assert result.adjustments == 10.0
        assert result.final_score == 100

    def test_identical_archetypes_boost_behavioral(self, matching_config):
        """Identical archetypes add 10 to the behavioral score, capped at 100."""
        from ravyz_match.matching.hybrid import score_behavioral
        from ravyz_match.matching.models import CandidateProfile, JobProfile

        candidate = CandidateProfile(
            id="c",
            pillar_scores={"compensation": 4, "ambiente": 4, "proposito": 4, "crescimento": 4},
            archetype="Protagonista",
        )
        job = JobProfile(
            id="j",
            pillar_scores={"ambition": 4, "teamwork": 4, "leadership": 4, "autonomy": 3},
            archetype="Protagonista",
        )

        behavioral = score_behavioral(candidate, job)

        assert behavioral.base_score == pytest.approx(95.0)
        assert behavioral.archetype_boost == 10
        assert behavioral.archetype_relation == "exact"
        assert behavioral.score == 100.0

    def test_result_identifies_pair_and_explains(self, candidate, job, matching_config):
        """The result should carry ids, strategy and an explanation."""
        from ravyz_match.matching.hybrid import HybridStrategy

        result = HybridStrategy(config=matching_config).score(candidate, job)

        assert result.candidate_id == "cand-1"
        assert result.job_id == "job-1"
        assert result.strategy == "hybrid"
        assert result.explanation.startswith("Excellent compatibility (100/100).")

    def test_inputs_are_not_mutated(self, candidate, job, matching_config):
        """Scoring is pure: inputs are unchanged afterwards."""
        from ravyz_match.matching.hybrid import HybridStrategy

        before = (candidate.model_dump(), job.model_dump())

        first = HybridStrategy(config=matching_config).score(candidate, job)
        second = HybridStrategy(config=matching_config).score(candidate, job)

        assert (candidate.model_dump(), job.model_dump()) == before
        assert first == second

    def test_custom_weights(self, candidate, job):
        """Weights come from the configuration."""
        from ravyz_match.matching.config import MatchingConfig
        from ravyz_match.matching.hybrid import HybridStrategy

        config = MatchingConfig(
            _env_file=None,  # type: ignore[call-arg]
            weight_behavioral=1.0,
            weight_experience=0.0,
            weight_skills=0.0,
            adjustment_cap=0,
        )
        weak_skills = job.model_copy(update={"required_skills": ["Go", "Rust"]})

        result = HybridStrategy(config=config).score(candidate, weak_skills)

        assert result.skills_score == 0.0
        assert result.final_score == 100


class TestRoundScore:
    """Test round_score."""

    @pytest.mark.parametrize(("value", "expected"), [(70.5, 71), (70.49, 70), (0.5, 1), (99.5, 100)])
    def test_rounds_half_up(self, value, expected):
        """Halves round up."""
        from ravyz_match.matching.hybrid import round_score

        assert round_score(value) == expected
