"""
Data Contracts for the RIASEC Matching Engine

Defines the records exchanged between the data access layer, the engine
and the HTTP routes.
"""

from typing import Protocol, Sequence
from pydantic import BaseModel, Field


# =============================================================================
# CANDIDATES / OUTPUT
# =============================================================================

class CandidateProgram(BaseModel):
    """
    A program offered by one institution, as returned by a code match.
    """
    program_name: str
    riasec_code: str
    institution_name: str
    institution_category: str

    class Config:
        from_attributes = True


class DimensionMatch(BaseModel):
    """A program whose code is exactly one dominant dimension."""
    program_name: str
    institution_name: str

    class Config:
        from_attributes = True


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredCandidate(BaseModel):
    """
    A candidate with its containment score.
    Used between scoring and ranking stages.
    """
    candidate: CandidateProgram
    score: int = Field(default=0, ge=0)


# =============================================================================
# DATA ACCESS CAPABILITY
# =============================================================================

class MatchingDataSource(Protocol):
    """Read operations the engine needs from the catalog store."""

    def list_candidate_programs(self, category: str) -> Sequence[CandidateProgram]:
        ...

    def list_programs_by_exact_dimension(self, dimension: str) -> Sequence[DimensionMatch]:
        ...
