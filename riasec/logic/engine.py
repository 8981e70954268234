"""
Matching Engine

Ranks catalog programs against a client RIASEC code. Stateless: every call
reads fresh rows from the injected data source.
"""

import logging
from typing import List

from .contracts import CandidateProgram, DimensionMatch, MatchingDataSource
from .constants import MATCH_CATEGORIES, TOP_PER_CATEGORY
from .scorer import normalize_code, normalize_dimension, score_all
from .ranker import select_top

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    Pipeline flow for a code match:
    1. Normalize - validate and uppercase the code, keep the first 3 letters
    2. Candidate fetch - all programs of one institution category
    3. Scoring - one point per scored letter contained in the program code
    4. Ranking - score desc, program name asc, top 5 per category
    5. Concatenation - University block followed by Institute block
    """

    def __init__(self, source: MatchingDataSource, top_per_category: int = TOP_PER_CATEGORY):
        self.source = source
        self.top_per_category = top_per_category

    def match_by_code(self, code) -> List[CandidateProgram]:
        """
        Rank programs by similarity to a 1-3 letter RIASEC code.

        Args:
            code: Client code, case-insensitive (e.g. "sia")

        Returns:
            At most top_per_category programs per category, categories in
            MATCH_CATEGORIES order

        Raises:
            InvalidInputError: code empty, missing, or not RIASEC letters
            DataAccessError: store failure while fetching candidates
        """
        letters = normalize_code(code)

        results: List[CandidateProgram] = []
        for category in MATCH_CATEGORIES:
            candidates = self.source.list_candidate_programs(category.value)
            top = select_top(score_all(letters, candidates), self.top_per_category)
            logger.debug(
                "Category %s: %d candidates, kept %d", category.value, len(candidates), len(top)
            )
            results.extend(s.candidate for s in top)

        logger.info("Code match %s -> %d programs", "".join(letters), len(results))
        return results

    def match_by_dimension(self, dimension) -> List[DimensionMatch]:
        """
        List every program whose code is exactly the given dimension.

        Raises:
            InvalidDimensionError: dimension not one of R, I, A, S, E, C
            DataAccessError: store failure
        """
        dim = normalize_dimension(dimension)
        matches = list(self.source.list_programs_by_exact_dimension(dim))
        logger.info("Dimension match %s -> %d programs", dim, len(matches))
        return matches


# Convenience functions for simple usage
def match_by_code(source: MatchingDataSource, code) -> List[CandidateProgram]:
    return MatchingEngine(source).match_by_code(code)


def match_by_dimension(source: MatchingDataSource, dimension) -> List[DimensionMatch]:
    return MatchingEngine(source).match_by_dimension(dimension)
