"""Archetype classification for candidate and job pillar vectors.

A candidate archetype is derived from the two dominant career pillars, with
two special cases checked first: a flat profile ("Equilibrado") and an
extreme purpose-driven profile ("Idealista Puro"). Jobs are classified from
their two dominant role pillars with a separate table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ravyz_match.assessment.models import (
    ArchetypeResult,
    Confidence,
    JobPillarScores,
    PillarScores,
)

logger = logging.getLogger(__name__)


class Archetype(str, Enum):
    """Closed set of archetype labels shared by candidates and jobs."""

    PROTAGONISTA = "Protagonista"
    CONSTRUTOR = "Construtor"
    MOBILIZADOR = "Mobilizador"
    VISIONARIO = "Visionário"
    IDEALISTA = "Idealista"
    IDEALISTA_PURO = "Idealista Puro"
    GUARDIAO = "Guardião"
    PRAGMATICO = "Pragmático"
    ESTRATEGISTA = "Estrategista"
    COLABORADOR = "Colaborador"
    EQUILIBRADO = "Equilibrado"
    TRANSFORMADOR = "Transformador"
    EXPLORADOR = "Explorador"
    PROATIVO = "Proativo"


CANDIDATE_FALLBACK = Archetype.COLABORADOR
JOB_FALLBACK = Archetype.EQUILIBRADO

BALANCED_SPREAD = 0.5
PURE_IDEALIST_MIN_FIRST = 4.5
PURE_IDEALIST_MAX_SECOND = 3.5
HIGH_CONFIDENCE_GAP = 0.7
MEDIUM_CONFIDENCE_GAP = 0.3

# Keyed by "<first>_<second>" dominant pillar names.
CANDIDATE_ARCHETYPE_TABLE: dict[str, Archetype] = {
    "crescimento_proposito": Archetype.PROTAGONISTA,
    "proposito_crescimento": Archetype.PROTAGONISTA,
    "ambiente_crescimento": Archetype.CONSTRUTOR,
    "crescimento_ambiente": Archetype.MOBILIZADOR,
    "proposito_ambiente": Archetype.VISIONARIO,
    "ambiente_proposito": Archetype.IDEALISTA,
    "compensation_ambiente": Archetype.GUARDIAO,
    "ambiente_compensation": Archetype.GUARDIAO,
    "compensation_crescimento": Archetype.PRAGMATICO,
    "crescimento_compensation": Archetype.PRAGMATICO,
    "compensation_proposito": Archetype.ESTRATEGISTA,
    "proposito_compensation": Archetype.ESTRATEGISTA,
}

JOB_ARCHETYPE_TABLE: dict[str, Archetype] = {
    "autonomy_leadership": Archetype.PROTAGONISTA,
    "leadership_autonomy": Archetype.PROTAGONISTA,
    "autonomy_teamwork": Archetype.MOBILIZADOR,
    "teamwork_autonomy": Archetype.CONSTRUTOR,
    "risk_ambition": Archetype.TRANSFORMADOR,
    "ambition_risk": Archetype.TRANSFORMADOR,
    "leadership_ambition": Archetype.VISIONARIO,
    "ambition_leadership": Archetype.VISIONARIO,
    "teamwork_risk": Archetype.EXPLORADOR,
    "risk_teamwork": Archetype.EXPLORADOR,
    "autonomy_risk": Archetype.PROATIVO,
    "risk_autonomy": Archetype.PROATIVO,
    "leadership_teamwork": Archetype.IDEALISTA,
    "teamwork_leadership": Archetype.IDEALISTA,
    "risk_leadership": Archetype.ESTRATEGISTA,
    "leadership_risk": Archetype.ESTRATEGISTA,
    "ambition_teamwork": Archetype.COLABORADOR,
    "teamwork_ambition": Archetype.COLABORADOR,
    "autonomy_ambition": Archetype.GUARDIAO,
    "ambition_autonomy": Archetype.GUARDIAO,
}

# Ordered pairs whose label is still awaiting product sign-off. The job
# entries mirror the candidate table through teamwork~ambiente and
# autonomy~crescimento; earlier job forms labelled both orders "Mobilizador"
# or swapped them.
CONTESTED_PAIRS: frozenset[str] = frozenset(
    {"ambiente_crescimento", "crescimento_ambiente", "autonomy_teamwork", "teamwork_autonomy"}
)

ARCHETYPE_DESCRIPTIONS: dict[str, str] = {
    Archetype.PROTAGONISTA: (
        "Combines personal development with a sense of mission. Seeks growth "
        "in environments with a clear purpose."
    ),
    Archetype.CONSTRUTOR: (
        "Values a solid culture and development opportunities. Builds a career "
        "inside high-performance teams."
    ),
    Archetype.MOBILIZADOR: (
        "Drives change and inspires teams. Leads transformations focused on "
        "people and results."
    ),
    Archetype.VISIONARIO: (
        "Joins a long-term view with appreciation for culture. Thinks "
        "strategically about organizational impact."
    ),
    Archetype.IDEALISTA: (
        "Prioritizes shared values and an aligned work culture. The "
        "environment matters as much as the cause."
    ),
    Archetype.IDEALISTA_PURO: (
        "Driven almost exclusively by purpose and impact. Organizational values "
        "are decisive; compensation is secondary."
    ),
    Archetype.GUARDIAO: (
        "Seeks financial stability in structured environments. Values security "
        "and relationships of trust."
    ),
    Archetype.PRAGMATICO: (
        "Focused on tangible results and personal return on investment. Growth "
        "must translate into financial reward."
    ),
    Archetype.ESTRATEGISTA: (
        "Balances financial pragmatism with a sense of purpose. Looks for "
        "sustainable impact with adequate return."
    ),
    Archetype.COLABORADOR: (
        "Versatile profile that adapts to different contexts. Balances several "
        "career priorities at once."
    ),
    Archetype.EQUILIBRADO: (
        "Balanced across all career pillars. Values compensation, environment, "
        "purpose and growth about equally."
    ),
}


@dataclass(frozen=True)
class ArchetypeNarrative:
    """Consultative narrative attached to an archetype."""

    title: str
    strengths: tuple[str, ...]
    risks: tuple[str, ...]
    recommendations: tuple[str, ...]


GENERIC_NARRATIVE = ArchetypeNarrative(
    title="Unique Profile",
    strengths=(
        "Combines priorities in a way that does not fit a single pattern",
        "Adapts to different team and company contexts",
    ),
    risks=("Career priorities may be harder to communicate to employers",),
    recommendations=(
        "Complete the assessment and profile to refine the archetype",
        "Compare offers against each pillar explicitly before deciding",
    ),
)

ARCHETYPE_NARRATIVES: dict[str, ArchetypeNarrative] = {
    Archetype.PROTAGONISTA: ArchetypeNarrative(
        title="The Protagonist",
        strengths=(
            "High intrinsic motivation and sense of purpose",
            "Able to inspire and engage teams",
            "Resilient during transformations",
            "Long-term vision aligned with personal values",
        ),
        risks=(
            "May get frustrated where purpose is unclear",
            "Burnout risk when putting the mission above balance",
            "Struggles to accept purely commercial decisions",
        ),
        recommendations=(
            "Look for companies with explicit mission and values",
            "Negotiate autonomy to work on high-impact projects",
            "Find mentors who share your values",
            "Set limits to preserve long-term energy",
        ),
    ),
    Archetype.CONSTRUTOR: ArchetypeNarrative(
        title="The Builder",
        strengths=(
            "Excellent at creating solid structures and processes",
            "Values the quality of relationships at work",
            "Focused on sustainable, consistent growth",
            "Develops high-performance teams",
        ),
        risks=(
            "May take too long on disruptive decisions",
            "Resists fast cultural change",
            "Frustrated by very volatile environments",
        ),
        recommendations=(
            "Choose companies with a consolidated, clear culture",
            "Look for environments that value process excellence",
            "Invest in long-term relationships",
            "Build tolerance for controlled experimentation",
        ),
    ),
    Archetype.MOBILIZADOR: ArchetypeNarrative(
        title="The Mobilizer",
        strengths=(
            "Leads by example and inspires change",
            "Strong ability to influence and engage people",
            "Thrives in dynamic environments",
            "Combines strategic vision with practical execution",
        ),
        risks=(
            "May come across as too assertive",
            "Impatient with slow or bureaucratic processes",
            "Risk of exhaustion when mobilizing alone",
        ),
        recommendations=(
            "Seek leadership or influence positions",
            "Develop active listening",
            "Balance urgency with sustainability",
            "Find environments that value innovation and agility",
        ),
    ),
    Archetype.VISIONARIO: ArchetypeNarrative(
        title="The Visionary",
        strengths=(
            "Long-term strategic thinking",
            "Anticipates trends",
            "Connects purpose with business vision",
            "Inspires teams with narratives about the future",
        ),
        risks=(
            "May seem disconnected from operational reality",
            "Frustrated by excessive short-term focus",
            "Struggles with practical details",
        ),
        recommendations=(
            "Position yourself in strategy or innovation",
            "Partner with execution-oriented profiles",
            "Validate your vision with data and market feedback",
            "Look for environments that value experimentation",
        ),
    ),
    Archetype.IDEALISTA: ArchetypeNarrative(
        title="The Idealist",
        strengths=(
            "Authenticity and coherence between values and actions",
            "Creates positive cultures",
            "High empathy and connection with teams",
            "Sustainable, purpose-based motivation",
        ),
        risks=(
            "Suffers in environments with conflicting values",
            "Finds pragmatic compromises difficult",
            "Risk of disillusionment with corporate realities",
        ),
        recommendations=(
            "Research the culture deeply before accepting offers",
            "Look at B Corps or companies with clear social impact",
            "Build resilience to deal with imperfection",
            "Find communities of people with similar values",
        ),
    ),
    Archetype.IDEALISTA_PURO: ArchetypeNarrative(
        title="The Pure Idealist",
        strengths=(
            "Absolute commitment to values and purpose",
            "Exceptional authenticity",
            "Able to inspire deep change",
            "Resilience rooted in strong convictions",
        ),
        risks=(
            "Categorically rejects misaligned environments",
            "May sacrifice too much compensation",
            "Intense frustration in traditional organizations",
        ),
        recommendations=(
            "Consider social entrepreneurship or NGOs",
            "Negotiate minimum conditions for financial sustainability",
            "Seek mentoring to balance idealism and pragmatism",
            "Target naturally aligned sectors (ESG, impact)",
        ),
    ),
    Archetype.GUARDIAO: ArchetypeNarrative(
        title="The Guardian",
        strengths=(
            "Values security and stability",
            "Excellent at risk management",
            "Builds long-term relationships of trust",
            "Focused on quality and consistency",
        ),
        risks=(
            "May avoid risks that growth requires",
            "Resists disruptive change",
            "Over-prioritizes benefits over development",
        ),
        recommendations=(
            "Look for established companies with a good reputation",
            "Value structured career plans",
            "Invest in certifications and specializations",
            "Develop a calculated tolerance for risk",
        ),
    ),
    Archetype.PRAGMATICO: ArchetypeNarrative(
        title="The Pragmatist",
        strengths=(
            "Clear focus on measurable results",
            "Excellent return on personal investment",
            "Strong negotiation skills",
            "Objective career decisions",
        ),
        risks=(
            "May be seen as overly transactional",
            "Tends to switch jobs for bigger offers",
            "Possible disconnect from organizational purpose",
        ),
        recommendations=(
            "Negotiate aggressive packages with clear goals",
            "Target high-paying sectors such as tech and finance",
            "Develop skills in high market demand",
            "Balance short-term gains with building a personal brand",
        ),
    ),
    Archetype.ESTRATEGISTA: ArchetypeNarrative(
        title="The Strategist",
        strengths=(
            "Balances purpose with financial pragmatism",
            "Sees sustainable value",
            "Negotiates win-win outcomes",
            "Systemic, holistic thinking",
        ),
        risks=(
            "May seem indecisive when weighing many factors",
            "Struggles where binary choices are required",
            "Frustrated in extremely commercial or idealistic settings",
        ),
        recommendations=(
            "Position yourself in corporate strategy",
            "Look for companies moving to sustainable models",
            "Develop consulting and influence skills",
            "Value packages that combine equity and purpose",
        ),
    ),
    Archetype.EQUILIBRADO: ArchetypeNarrative(
        title="The Balanced",
        strengths=(
            "Adapts to different contexts",
            "Holistic view of the career",
            "Prioritizes according to the moment in life",
            "Works easily with diverse profiles",
        ),
        risks=(
            "May find career decisions hard",
            "Lack of clarity about personal priorities",
            "Risk of accepting suboptimal situations out of indecision",
        ),
        recommendations=(
            "Do self-knowledge exercises to identify priorities",
            "Try different environments before committing",
            "Seek mentoring to clarify direction",
            "Value flexibility and variety of experiences",
        ),
    ),
    Archetype.COLABORADOR: ArchetypeNarrative(
        title="The Collaborator",
        strengths=(
            "Strong orientation to teamwork",
            "Able to mediate conflicts",
            "Values harmony and cooperation",
            "Excellent in matrix organizations",
        ),
        risks=(
            "May avoid necessary confrontation",
            "Finds it hard to stand out individually",
            "Risk of being overshadowed by more assertive profiles",
        ),
        recommendations=(
            "Develop self-promotion skills",
            "Look for environments that value collaboration",
            "Practice assertiveness in safe situations",
            "Identify unique contributions beyond teamwork",
        ),
    ),
}


def _confidence_from_gap(gap: float) -> Confidence:
    if gap > HIGH_CONFIDENCE_GAP:
        return "high"
    if gap > MEDIUM_CONFIDENCE_GAP:
        return "medium"
    return "low"


def classify_archetype(pillar_scores: PillarScores) -> ArchetypeResult:
    """Classify a complete candidate pillar vector into an archetype.

    Pillars are ranked by score; ties keep declaration order
    (compensation, ambiente, proposito, crescimento).

    Raises:
        ValueError: If any of the four pillars is missing.
    """
    if not pillar_scores.is_complete():
        raise ValueError("Archetype classification requires all four pillar scores")

    ranked = sorted(pillar_scores.present().items(), key=lambda item: item[1], reverse=True)
    (first, first_score), (second, second_score) = ranked[0], ranked[1]
    lowest_score = ranked[-1][1]
    dominant = (ranked[0], ranked[1])

    if first_score - lowest_score < BALANCED_SPREAD:
        return ArchetypeResult(
            archetype=Archetype.EQUILIBRADO.value,
            pillar_scores=pillar_scores,
            dominant_pillars=dominant,
            confidence="high",
            description=ARCHETYPE_DESCRIPTIONS[Archetype.EQUILIBRADO],
        )

    if (
        first == "proposito"
        and first_score > PURE_IDEALIST_MIN_FIRST
        and second_score < PURE_IDEALIST_MAX_SECOND
    ):
        return ArchetypeResult(
            archetype=Archetype.IDEALISTA_PURO.value,
            pillar_scores=pillar_scores,
            dominant_pillars=dominant,
            confidence="high",
            description=ARCHETYPE_DESCRIPTIONS[Archetype.IDEALISTA_PURO],
        )

    key = f"{first}_{second}"
    archetype = CANDIDATE_ARCHETYPE_TABLE.get(key)
    if archetype is None:
        logger.warning("No archetype for pillar pair %s, using %s", key, CANDIDATE_FALLBACK.value)
        archetype = CANDIDATE_FALLBACK
    elif key in CONTESTED_PAIRS:
        logger.debug("Pillar pair %s resolved to contested archetype %s", key, archetype.value)

    return ArchetypeResult(
        archetype=archetype.value,
        pillar_scores=pillar_scores,
        dominant_pillars=dominant,
        confidence=_confidence_from_gap(first_score - second_score),
        description=ARCHETYPE_DESCRIPTIONS[archetype],
    )


def classify_job_archetype(pillar_scores: JobPillarScores) -> str:
    """Classify a job pillar vector from its two dominant role pillars."""
    present = pillar_scores.present()
    if len(present) < 2:
        return JOB_FALLBACK.value

    ranked = sorted(present.items(), key=lambda item: item[1], reverse=True)
    key = f"{ranked[0][0]}_{ranked[1][0]}"
    archetype = JOB_ARCHETYPE_TABLE.get(key)
    if archetype is None:
        logger.warning("No job archetype for pillar pair %s, using %s", key, JOB_FALLBACK.value)
        return JOB_FALLBACK.value
    return archetype.value


def get_archetype_narrative(archetype: str) -> ArchetypeNarrative:
    """Return the narrative for an archetype, or a generic one if unmapped."""
    return ARCHETYPE_NARRATIVES.get(archetype, GENERIC_NARRATIVE)


def get_archetype_description(archetype: str | None) -> str:
    if not archetype:
        return "Archetype not yet computed. Complete the assessment to discover it."
    return ARCHETYPE_DESCRIPTIONS.get(
        archetype, "Distinct archetype identified from the career assessment."
    )
