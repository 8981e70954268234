"""
RIASEC Matching Logic Module

Provides the deterministic ranking of programs against a vocational-interest code.
"""

from .contracts import (
    CandidateProgram,
    DimensionMatch,
    ScoredCandidate,
    MatchingDataSource,
)
from .engine import MatchingEngine, match_by_code, match_by_dimension
from .exceptions import (
    MatchingError,
    InvalidInputError,
    InvalidDimensionError,
    DataAccessError,
)
from .constants import RIASEC_DIMENSIONS

__all__ = [
    # Main engine
    "MatchingEngine",
    "match_by_code",
    "match_by_dimension",

    # Contracts
    "CandidateProgram",
    "DimensionMatch",
    "ScoredCandidate",
    "MatchingDataSource",

    # Errors
    "MatchingError",
    "InvalidInputError",
    "InvalidDimensionError",
    "DataAccessError",

    "RIASEC_DIMENSIONS",
]
