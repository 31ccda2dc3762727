"""Candidate/job compatibility scoring.

This module compares a candidate's behavioral profile, experience and skills
with a job's requirements and produces explainable 0-100 scores.

Public API:
    - MatchingService: Single-pair and batch matching
    - get_strategy: Hybrid, behavioral or legacy scoring by name
    - ProfileLoader: Load candidate/job profiles and responses from files
    - CandidateProfile / JobProfile: Input models
    - MatchResult / BehavioralMatchResult / LegacyMatchResult: Output models
    - MatchingConfig: Configuration settings
"""

from ravyz_match.matching.boost import archetype_boost, archetypes_compatible
from ravyz_match.matching.config import MatchingConfig, get_matching_config, reset_matching_config
from ravyz_match.matching.explanation import generate_explanation
from ravyz_match.matching.hybrid import HybridStrategy
from ravyz_match.matching.legacy import LegacyStrategy
from ravyz_match.matching.models import (
    BehavioralMatchResult,
    CandidateProfile,
    EducationEntry,
    JobProfile,
    LegacyMatchResult,
    MatchResult,
    match_result_adapter,
)
from ravyz_match.matching.pillars import calculate_pillar_breakdown
from ravyz_match.matching.profile import ProfileLoader
from ravyz_match.matching.service import MatchingService
from ravyz_match.matching.strategies import STRATEGIES, BehavioralStrategy, MatchStrategy, get_strategy

__all__ = [
    "MatchingService",
    "MatchStrategy",
    "HybridStrategy",
    "BehavioralStrategy",
    "LegacyStrategy",
    "STRATEGIES",
    "get_strategy",
    "ProfileLoader",
    "CandidateProfile",
    "JobProfile",
    "EducationEntry",
    "MatchResult",
    "BehavioralMatchResult",
    "LegacyMatchResult",
    "match_result_adapter",
    "MatchingConfig",
    "get_matching_config",
    "reset_matching_config",
    "archetype_boost",
    "archetypes_compatible",
    "calculate_pillar_breakdown",
    "generate_explanation",
]
