"""Question banks for the candidate and job assessments.

Both questionnaires use a 1-5 Likert scale. The candidate bank feeds the four
career pillars; the job bank feeds the five role pillars a company fills in
when it creates a job.
"""

from __future__ import annotations

from dataclasses import dataclass

CANDIDATE_PILLARS: tuple[str, ...] = (
    "compensation",
    "ambiente",
    "proposito",
    "crescimento",
)
JOB_PILLARS: tuple[str, ...] = (
    "autonomy",
    "leadership",
    "teamwork",
    "risk",
    "ambition",
)

MIN_ANSWER = 1
MAX_ANSWER = 5

# Reverse-scored questions (one per candidate pillar).
CONTRASTING_QUESTIONS: frozenset[str] = frozenset({"q6", "q14", "q20", "q28"})


@dataclass(frozen=True)
class Question:
    """A single Likert question."""

    id: str
    pillar: str
    text: str
    is_contrasting: bool = False


def _candidate(qid: str, pillar: str, text: str) -> Question:
    return Question(
        id=qid,
        pillar=pillar,
        text=text,
        is_contrasting=qid in CONTRASTING_QUESTIONS,
    )


CANDIDATE_QUESTIONS: tuple[Question, ...] = (
    # Compensation (q1-q7)
    _candidate("q1", "compensation", "A competitive salary is key to my job satisfaction."),
    _candidate("q2", "compensation", "I prioritize financial benefits over other aspects of a job."),
    _candidate("q3", "compensation", "Profit sharing or equity matters to me."),
    _candidate("q4", "compensation", "Performance bonuses are important for my motivation."),
    _candidate("q5", "compensation", "I expect full transparency about the salary structure."),
    _candidate("q6", "compensation", "I would accept a lower salary for valuable non-monetary benefits."),
    _candidate("q7", "compensation", "Financial stability weighs heavily in my career decisions."),
    # Environment (q8-q14)
    _candidate("q8", "ambiente", "I prefer working in collaborative, close-knit teams."),
    _candidate("q9", "ambiente", "Open communication and constant feedback are essential."),
    _candidate("q10", "ambiente", "Diversity and inclusion are fundamental values for me."),
    _candidate("q11", "ambiente", "Flexible hours and location make a big difference to me."),
    _candidate("q12", "ambiente", "A relaxed, informal environment motivates me."),
    _candidate("q13", "ambiente", "The people I work with matter as much as the work itself."),
    _candidate("q14", "ambiente", "Company culture makes little difference as long as the job gets done."),
    # Purpose (q15-q21)
    _candidate("q15", "proposito", "My work should generate positive social impact."),
    _candidate("q16", "proposito", "I need to feel aligned with the company's mission."),
    _candidate("q17", "proposito", "My work must be connected to my personal values."),
    _candidate("q18", "proposito", "I value companies with environmental responsibility."),
    _candidate("q19", "proposito", "I prefer companies that contribute to social causes."),
    _candidate("q20", "proposito", "Salary matters more to me than the meaning of the work."),
    _candidate("q21", "proposito", "Feeling that I make a difference is fundamental."),
    # Growth (q22-q30)
    _candidate("q22", "crescimento", "Development opportunities are a priority in my career."),
    _candidate("q23", "crescimento", "I value mentoring and coaching programs."),
    _candidate("q24", "crescimento", "I look for roles with a clear career progression."),
    _candidate("q25", "crescimento", "I prefer companies that invest in employee training."),
    _candidate("q26", "crescimento", "Complex technical challenges motivate me."),
    _candidate("q27", "crescimento", "I prefer environments that promote continuous learning."),
    _candidate("q28", "crescimento", "I would rather stay in a stable role than grow quickly."),
    _candidate("q29", "crescimento", "I accept more responsibility to accelerate my growth."),
    _candidate("q30", "crescimento", "I want to be promoted faster than the market average."),
)

JOB_QUESTIONS: tuple[Question, ...] = (
    # Autonomy (q1-q6)
    Question("q1", "autonomy", "Will this person decide without constant approval?"),
    Question("q2", "autonomy", "Should they solve problems on their own rather than follow instructions?"),
    Question("q3", "autonomy", "Should they flag your mistakes even if it is uncomfortable?"),
    Question("q4", "autonomy", "Does the role require building solutions from scratch?"),
    Question("q5", "autonomy", "How far will you delegate critical responsibilities to this role?"),
    Question("q6", "autonomy", "Should they proactively change processes rather than run existing ones?"),
    # Leadership (q7-q12)
    Question("q7", "leadership", "Do you want this person to be your potential successor?"),
    Question("q8", "leadership", "Will they be free to disagree with you on strategic decisions?"),
    Question("q9", "leadership", "Do you prefer someone who challenges you over someone who follows?"),
    Question("q10", "leadership", "In a crisis, should this person take the lead?"),
    Question("q11", "leadership", "Would you hire someone more capable than you in some areas?"),
    Question("q12", "leadership", "Will this person have direct exposure to senior leadership?"),
    # Teamwork (q13-q18)
    Question("q13", "teamwork", "Should the ideal profile build harmony in the team?"),
    Question("q14", "teamwork", "Do you prefer an integrator who works well with the group?"),
    Question("q15", "teamwork", "Is performance measured by collective rather than individual results?"),
    Question("q16", "teamwork", "Should they inspire and mobilize the team?"),
    Question("q17", "teamwork", "Is collaboration more important than individual brilliance here?"),
    Question("q18", "teamwork", "Does the role require a diplomatic style?"),
    # Risk (q19-q24)
    Question("q19", "risk", "Does the role need someone who innovates and takes risks?"),
    Question("q20", "risk", "Should they question the status quo?"),
    Question("q21", "risk", "Is the expected pace intense and high-pressure?"),
    Question("q22", "risk", "Should they make bold decisions even when risky?"),
    Question("q23", "risk", "Do you prefer someone bold and visionary over prudent?"),
    Question("q24", "risk", "Is success measured by fast growth rather than stability?"),
    # Ambition (q25-q30)
    Question("q25", "ambition", "Is this role a stepping stone to something bigger?"),
    Question("q26", "ambition", "Do you want someone who grows and shines in the role?"),
    Question("q27", "ambition", "Would you hire someone who could one day take your position?"),
    Question("q28", "ambition", "Should the ideal candidate be a potential successor?"),
    Question("q29", "ambition", "Is this role meant to accelerate the occupant's career?"),
    Question("q30", "ambition", "Would you be comfortable if this person became more influential than you?"),
)


def questions_by_pillar(
    questions: tuple[Question, ...] = CANDIDATE_QUESTIONS,
) -> dict[str, list[str]]:
    """Group question ids by pillar, preserving declaration order."""
    grouped: dict[str, list[str]] = {}
    for question in questions:
        grouped.setdefault(question.pillar, []).append(question.id)
    return grouped
