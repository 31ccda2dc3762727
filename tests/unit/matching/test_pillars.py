"""Tests for pillar compatibility."""

import pytest


class TestPillarCompatibility:
    """Test the per-pair formulas."""

    @pytest.mark.parametrize(
        ("candidate", "job", "expected"),
        [(4, 4, 100.0), (5, 4, 80.0), (1, 5, 20.0), (2.5, 4, 70.0)],
    )
    def test_pillar_compatibility_loses_twenty_points_per_unit(self, candidate, job, expected):
        """Compatibility should be 100 - 20 * |diff|."""
        from ravyz_match.matching.pillars import pillar_compatibility

        assert pillar_compatibility(candidate, job) == pytest.approx(expected)

    def test_pillar_compatibility_never_negative(self):
        """Compatibility should floor at zero."""
        from ravyz_match.matching.pillars import pillar_compatibility

        assert pillar_compatibility(1, 7) == 0.0

    @pytest.mark.parametrize(("risk", "expected"), [(3, 100.0), (5, 70.0), (1, 70.0), (4, 85.0)])
    def test_risk_compatibility_centres_on_three(self, risk, expected):
        """Risk should lose 15 points per unit away from 3."""
        from ravyz_match.matching.pillars import risk_compatibility

        assert risk_compatibility(risk) == pytest.approx(expected)


class TestCalculatePillarBreakdown:
    """Test calculate_pillar_breakdown and base_behavioral_score."""

    def test_identical_profiles_score_one_hundred(self):
        """Matching pillars and neutral risk should give a perfect base score."""
        from ravyz_match.assessment.models import JobPillarScores, PillarScores
        from ravyz_match.matching.pillars import base_behavioral_score, calculate_pillar_breakdown

        candidate = PillarScores(compensation=4, ambiente=4, proposito=4, crescimento=4)
        job = JobPillarScores(ambition=4, teamwork=4, leadership=4, autonomy=4, risk=3)

        breakdown = calculate_pillar_breakdown(candidate, job)

        assert breakdown == {
            "compensation_ambition": 100.0,
            "ambiente_teamwork": 100.0,
            "proposito_leadership": 100.0,
            "crescimento_autonomy": 100.0,
            "risk": 100.0,
        }
        assert base_behavioral_score(breakdown) == 100.0

    def test_pairs_use_cross_domain_mapping(self):
        """Each candidate pillar should compare to its mapped job pillar."""
        from ravyz_match.assessment.models import JobPillarScores, PillarScores
        from ravyz_match.matching.pillars import calculate_pillar_breakdown

        candidate = PillarScores(compensation=5, ambiente=1, proposito=3, crescimento=2)
        job = JobPillarScores(ambition=1, teamwork=1, leadership=4, autonomy=2)

        breakdown = calculate_pillar_breakdown(candidate, job)

        assert breakdown["compensation_ambition"] == pytest.approx(20.0)
        assert breakdown["ambiente_teamwork"] == pytest.approx(100.0)
        assert breakdown["proposito_leadership"] == pytest.approx(80.0)
        assert breakdown["crescimento_autonomy"] == pytest.approx(100.0)
        assert "risk" not in breakdown

    def test_missing_pillars_are_excluded_from_the_mean(self):
        """Absent pillars should not count as zero."""
        from ravyz_match.assessment.models import JobPillarScores, PillarScores
        from ravyz_match.matching.pillars import base_behavioral_score, calculate_pillar_breakdown

        candidate = PillarScores(compensation=4, proposito=2)
        job = JobPillarScores(ambition=4, leadership=4)

        breakdown = calculate_pillar_breakdown(candidate, job)

        assert set(breakdown) == {"compensation_ambition", "proposito_leadership"}
        assert base_behavioral_score(breakdown) == pytest.approx(80.0)

    def test_no_comparable_pillars_is_neutral(self):
        """An empty breakdown should give the neutral score of 50."""
        from ravyz_match.assessment.models import JobPillarScores, PillarScores
        from ravyz_match.matching.pillars import base_behavioral_score, calculate_pillar_breakdown

        breakdown = calculate_pillar_breakdown(PillarScores(), JobPillarScores())

        assert breakdown == {}
        assert base_behavioral_score(breakdown) == 50.0
