"""Persistence of computed match results.

Public API:
- MatchResultService: Serve fresh results, recompute expired ones
- MatchResultRepository: Async SQLite storage for results
- StoredMatch: A result with its calculation and expiry timestamps
"""

from ravyz_match.results.models import StoredMatch
from ravyz_match.results.repository import MatchResultRepository
from ravyz_match.results.service import MatchResultService

__all__ = [
    "MatchResultService",
    "MatchResultRepository",
    "StoredMatch",
]
