"""
RIASEC Matching API Routes

Exposes the matching engine via REST API:
- GET /match_riasec?code=SIA  ranked programs per institution category
- GET /match/{dimension}      programs whose code is exactly one dimension
"""

import logging
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from utils.crud_catalog import CatalogRepository
from .logic.contracts import CandidateProgram, DimensionMatch
from .logic.engine import MatchingEngine
from .logic.exceptions import InvalidInputError, InvalidDimensionError, DataAccessError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["matching"])


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/match_riasec", response_model=List[CandidateProgram], summary="Match programs by RIASEC code")
def match_riasec(
    code: Optional[str] = Query(None, description="1-3 RIASEC letters, e.g. SIA"),
    db: Session = Depends(get_db)
):
    """
    Rank programs by how many of the code's letters their RIASEC code contains.

    **Response:**
    - Top 5 university programs followed by top 5 institute programs
    - Each block sorted by score (descending), then program name
    """
    try:
        return MatchingEngine(CatalogRepository(db)).match_by_code(code)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataAccessError as e:
        logger.error("Code match failed: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/match/{dimension}", response_model=List[DimensionMatch], summary="Match programs by dominant dimension")
def match_dimension(dimension: str, db: Session = Depends(get_db)):
    """Programs whose RIASEC code equals the dimension exactly, ordered by name."""
    try:
        return MatchingEngine(CatalogRepository(db)).match_by_dimension(dimension)
    except InvalidDimensionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataAccessError as e:
        logger.error("Dimension match failed: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})
