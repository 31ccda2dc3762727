"""Skill and text matching utilities."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable

SKILL_MATCH_THRESHOLD = 0.7
CONTAINMENT_SIMILARITY = 0.8

SimilarityFn = Callable[[str, str], float]

_SKILL_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "python3": "python",
    "nodejs": "node.js",
    "node js": "node.js",
    "reactjs": "react",
    "react.js": "react",
    "react js": "react",
    "nextjs": "next.js",
    "next js": "next.js",
    "html5": "html",
    "css3": "css",
    "mongo db": "mongodb",
    "postgres": "postgresql",
    "ms excel": "excel",
    "microsoft excel": "excel",
    "power point": "powerpoint",
    "ingles": "english",
    "portugues": "portuguese",
    "espanhol": "spanish",
}

_STOPWORDS: frozenset[str] = frozenset(
    {"de", "da", "do", "das", "dos", "e", "em", "para", "a", "o", "of", "and", "the", "in", "for"}
)


def fold_text(value: str) -> str:
    """Lowercase, strip accents and collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return re.sub(r"\s+", " ", stripped.strip().lower())


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison.

    Performs lowercasing, accent folding, whitespace normalization, and trims
    common surrounding punctuation while preserving meaningful characters
    like "+", "#", and "." (e.g. "C++", "C#", "Node.js").
    """
    value = fold_text(skill)
    value = re.sub(r"\([^)]*\)", "", value)
    value = re.sub(r"\s+", " ", value)
    return value.strip(" ,;")


def canonicalize_skill(skill: str) -> str:
    normalized = normalize_skill(skill)
    return _SKILL_ALIASES.get(normalized, normalized)


def tokenize(value: str) -> set[str]:
    """Split text into folded word tokens, dropping connectives."""
    tokens = re.split(r"[\s/,;|-]+", fold_text(value))
    return {t for t in tokens if t and t not in _STOPWORDS}


def skill_similarity(skill1: str, skill2: str) -> float:
    """Similarity between two skill names in [0, 1].

    1.0 for identical canonical names, 0.8 when one name is a substring of
    the other ("SQL" in "MySQL"), otherwise the Jaccard index of their word
    tokens.
    """
    canonical1 = canonicalize_skill(skill1)
    canonical2 = canonicalize_skill(skill2)
    if not canonical1 or not canonical2:
        return 0.0
    if canonical1 == canonical2:
        return 1.0

    if canonical1 in canonical2 or canonical2 in canonical1:
        return CONTAINMENT_SIMILARITY

    words1 = tokenize(canonical1)
    words2 = tokenize(canonical2)
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def skills_match(
    skill1: str,
    skill2: str,
    threshold: float = SKILL_MATCH_THRESHOLD,
    similarity: SimilarityFn = skill_similarity,
) -> bool:
    """Return True if two skills are considered a match."""
    return similarity(skill1, skill2) >= threshold


def find_matching_skills(
    required: list[str],
    available: list[str],
    threshold: float = SKILL_MATCH_THRESHOLD,
    similarity: SimilarityFn = skill_similarity,
) -> tuple[list[str], list[str]]:
    """Return the subset of required skills that match, and those missing."""
    matched: list[str] = []
    missing: list[str] = []

    for requirement in required:
        if any(
            skills_match(requirement, skill, threshold=threshold, similarity=similarity)
            for skill in available
        ):
            matched.append(requirement)
        else:
            missing.append(requirement)

    return matched, missing


def token_overlap(reference: str | None, candidate: str | None) -> float:
    """Share of ``reference`` tokens that also appear in ``candidate``."""
    reference_tokens = tokenize(reference or "")
    if not reference_tokens:
        return 0.0
    candidate_tokens = tokenize(candidate or "")
    return len(reference_tokens & candidate_tokens) / len(reference_tokens)


def location_matches(location: str | None, target: str | None) -> bool:
    """Case/accent-insensitive containment in either direction."""
    left = fold_text(location or "")
    right = fold_text(target or "")
    if not left or not right:
        return False
    return left in right or right in left
