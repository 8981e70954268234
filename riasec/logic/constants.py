"""
Matching Engine Constants

RIASEC alphabet, scoring arity and per-category limits used by the matcher.
"""

from typing import Tuple

from models.models import InstitutionCategory

# =============================================================================
# RIASEC ALPHABET
# =============================================================================

# Realistic, Investigative, Artistic, Social, Enterprising, Conventional
RIASEC_DIMENSIONS: Tuple[str, ...] = ("R", "I", "A", "S", "E", "C")

# =============================================================================
# SCORING / RANKING
# =============================================================================

# Only the first letters of a code are scored; absent positions add nothing
MAX_SCORED_LETTERS = 3

# Programs kept per institution category block
TOP_PER_CATEGORY = 5

# Category blocks in output order (never interleaved)
MATCH_CATEGORIES: Tuple[InstitutionCategory, ...] = (
    InstitutionCategory.UNIVERSITY,
    InstitutionCategory.INSTITUTE,
)

# Categories exposed by the institution lookup
LISTED_CATEGORIES: Tuple[InstitutionCategory, ...] = (
    InstitutionCategory.UNIVERSITY,
    InstitutionCategory.INSTITUTE,
    InstitutionCategory.POLICE_ACADEMY,
)
