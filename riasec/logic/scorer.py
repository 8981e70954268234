"""
Scorer

Normalizes client-supplied RIASEC input and scores candidates by letter
containment.
"""

from typing import Any, List, Sequence

from .contracts import CandidateProgram, ScoredCandidate
from .constants import RIASEC_DIMENSIONS, MAX_SCORED_LETTERS
from .exceptions import InvalidInputError, InvalidDimensionError


def normalize_code(code: Any) -> List[str]:
    """
    Validate a match code and return the letters that will be scored.

    Args:
        code: Raw code as received from the client (e.g. "sia")

    Returns:
        Up to MAX_SCORED_LETTERS uppercase letters, in input order

    Raises:
        InvalidInputError: code is not a string, is blank, or has
            characters outside the RIASEC alphabet
    """
    if not isinstance(code, str):
        raise InvalidInputError("RIASEC code must be a non-empty string")

    cleaned = code.strip().upper()
    if not cleaned:
        raise InvalidInputError("RIASEC code must be a non-empty string")

    invalid = sorted({ch for ch in cleaned if ch not in RIASEC_DIMENSIONS})
    if invalid:
        raise InvalidInputError(
            f"Invalid RIASEC code '{code}': unexpected letters {', '.join(invalid)}"
        )

    return list(cleaned[:MAX_SCORED_LETTERS])


def normalize_dimension(dimension: Any) -> str:
    """Return the uppercase dominant dimension or raise InvalidDimensionError."""
    if not isinstance(dimension, str):
        raise InvalidDimensionError("RIASEC dimension must be one of R, I, A, S, E, C")
    cleaned = dimension.strip().upper()
    if cleaned not in RIASEC_DIMENSIONS:
        raise InvalidDimensionError(
            f"Invalid RIASEC dimension '{dimension}': expected one of {', '.join(RIASEC_DIMENSIONS)}"
        )
    return cleaned


def score_candidate(letters: Sequence[str], riasec_code: str) -> int:
    # one point per scored position, repeated letters count again
    code = (riasec_code or "").upper()
    return sum(1 for letter in letters[:MAX_SCORED_LETTERS] if letter in code)


def score_all(
    letters: Sequence[str],
    candidates: Sequence[CandidateProgram]
) -> List[ScoredCandidate]:
    """
    Score every candidate against the client letters.

    Args:
        letters: Normalized letters from normalize_code
        candidates: Programs of a single institution category

    Returns:
        ScoredCandidate per input candidate, in input order
    """
    scored = []
    for candidate in candidates:
        scored.append(ScoredCandidate(
            candidate=candidate,
            score=score_candidate(letters, candidate.riasec_code),
        ))
    return scored
