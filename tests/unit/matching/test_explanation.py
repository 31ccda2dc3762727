"""Tests for match explanations."""

import pytest


def _behavioral(relation="exact", pillars=None, candidate="Protagonista", job="Protagonista"):
    from ravyz_match.matching.models import BehavioralBreakdown

    return BehavioralBreakdown(
        score=90.0,
        base_score=80.0,
        archetype_boost=10 if relation == "exact" else 0,
        candidate_archetype=candidate,
        job_archetype=job,
        archetype_relation=relation,
        pillar_breakdown=pillars or {},
    )


class TestScoreTier:
    """Test score_tier."""

    @pytest.mark.parametrize(
        ("score", "tier"),
        [(100, "excellent"), (85, "excellent"), (84.9, "good"), (70, "good"), (50, "moderate"), (49, "low")],
    )
    def test_tier_boundaries(self, score, tier):
        """Tiers start at 85, 70 and 50."""
        from ravyz_match.matching.explanation import score_tier

        assert score_tier(score) == tier


class TestExplanationSentences:
    """Test explanation_sentences and generate_explanation."""

    def test_tier_then_relation(self):
        """The first sentence is the tier, the second the archetype relation."""
        from ravyz_match.matching.explanation import explanation_sentences

        sentences = explanation_sentences(88, _behavioral())

        assert sentences[0] == "Excellent compatibility (88/100)."
        assert sentences[1] == "Candidate and role share the Protagonista archetype."
        assert len(sentences) == 2

    def test_compatible_and_different_relations(self):
        """Compatible and different archetypes get their own sentence."""
        from ravyz_match.matching.explanation import explanation_sentences

        compatible = explanation_sentences(
            60, _behavioral("compatible", candidate="Protagonista", job="Transformador")
        )
        different = explanation_sentences(
            40, _behavioral("different", candidate="Guardião", job="Explorador")
        )

        assert "works well alongside a Transformador role" in compatible[1]
        assert "differs from the Explorador profile" in different[1]

    def test_strongest_and_weakest_pillars(self):
        """Pillars >= 80 and < 60 are called out, strongest first."""
        from ravyz_match.matching.explanation import explanation_sentences

        sentences = explanation_sentences(
            72,
            _behavioral(
                pillars={
                    "compensation_ambition": 40.0,
                    "ambiente_teamwork": 100.0,
                    "risk": 70.0,
                }
            ),
        )

        assert sentences[2] == "Strongest alignment in work environment and teamwork (100%)."
        assert sentences[3] == "Largest gap in compensation and ambition (40%)."

    def test_middle_pillars_are_not_mentioned(self):
        """Pillars between 60 and 80 produce no extra sentence."""
        from ravyz_match.matching.explanation import explanation_sentences

        sentences = explanation_sentences(
            65, _behavioral(pillars={"risk": 70.0, "proposito_leadership": 60.0})
        )

        assert len(sentences) == 2

    def test_ties_pick_first_pillar(self):
        """On ties the first pillar in breakdown order is reported."""
        from ravyz_match.matching.explanation import explanation_sentences

        sentences = explanation_sentences(
            90,
            _behavioral(pillars={"compensation_ambition": 100.0, "ambiente_teamwork": 100.0}),
        )

        assert "compensation and ambition" in sentences[2]

    def test_missing_archetypes(self):
        """Without archetypes the relation sentence says so."""
        from ravyz_match.matching.explanation import explanation_sentences

        sentences = explanation_sentences(
            30, _behavioral("different", candidate=None, job=None)
        )

        assert sentences[0] == "Low compatibility (30/100)."
        assert "unavailable" in sentences[1]

    def test_generate_explanation_joins_sentences(self):
        """The explanation is the sentences joined with spaces."""
        from ravyz_match.matching.explanation import explanation_sentences, generate_explanation

        behavioral = _behavioral(pillars={"risk": 100.0})

        assert generate_explanation(90, behavioral) == " ".join(
            explanation_sentences(90, behavioral)
        )
