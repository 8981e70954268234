"""
Ranker

Orders scored candidates inside one institution category and cuts the block
to its top entries.
"""

import unicodedata
from typing import List, Sequence

from .contracts import ScoredCandidate
from .constants import TOP_PER_CATEGORY


def collation_key(name: str) -> str:
    """Accent- and case-insensitive sort key, close to the store's ORDER BY."""
    decomposed = unicodedata.normalize("NFKD", name or "")
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _ranking_key(scored: ScoredCandidate):
    c = scored.candidate
    return (
        -scored.score,
        collation_key(c.program_name),
        collation_key(c.institution_name),
        c.program_name,
        c.institution_name,
    )


def drop_duplicate_rows(scored: Sequence[ScoredCandidate]) -> List[ScoredCandidate]:
    """
    Collapse rows that repeat the same program/institution record.

    A program linked twice to the same institution must not take two slots.
    """
    seen = set()
    unique = []
    for s in scored:
        c = s.candidate
        key = (c.program_name, c.riasec_code, c.institution_name, c.institution_category)
        if key in seen:
            continue
        seen.add(key)
        unique.append(s)
    return unique


def rank_candidates(scored: Sequence[ScoredCandidate]) -> List[ScoredCandidate]:
    """
    Rank by score (descending), then program name (ascending, ignoring
    case and accents).

    Institution name breaks the remaining ties so output is deterministic.
    """
    return sorted(scored, key=_ranking_key)


def select_top(
    scored: Sequence[ScoredCandidate],
    limit: int = TOP_PER_CATEGORY
) -> List[ScoredCandidate]:
    """Rank a single category block and keep its first `limit` entries."""
    return rank_candidates(drop_duplicate_rows(scored))[:limit]
