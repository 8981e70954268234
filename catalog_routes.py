"""
Catalog API Routes

Read-only lookups over the geographic hierarchy and the programs each
institution offers: departamentos -> provincias -> instituciones -> carreras.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from models.schemas_catalog import RegionOut, SubRegionOut, InstitutionOut, ProgramOut
from riasec.logic.constants import LISTED_CATEGORIES
from riasec.logic.exceptions import DataAccessError
from utils.crud_catalog import CatalogRepository

router = APIRouter(tags=["catalog"])


def _store_error(e: DataAccessError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/departamentos", response_model=list[RegionOut], summary="List regions")
def list_regions(db: Session = Depends(get_db)):
    try:
        return [RegionOut.model_validate(r) for r in CatalogRepository(db).list_regions()]
    except DataAccessError as e:
        return _store_error(e)


@router.get("/provincias/{region_id}", response_model=list[SubRegionOut], summary="List sub-regions of a region")
def list_sub_regions(region_id: int, db: Session = Depends(get_db)):
    """Empty list when the region has no sub-regions (or does not exist)."""
    try:
        return [SubRegionOut.model_validate(s) for s in CatalogRepository(db).list_sub_regions(region_id)]
    except DataAccessError as e:
        return _store_error(e)


@router.get("/instituciones/{sub_region_id}", response_model=list[InstitutionOut], summary="List institutions in a sub-region")
def list_institutions(sub_region_id: int, db: Session = Depends(get_db)):
    """
    Universities, institutes and police academies with at least one site in
    the sub-region. Each institution is listed once.
    """
    try:
        institutions = CatalogRepository(db).list_institutions(
            sub_region_id, [c.value for c in LISTED_CATEGORIES]
        )
        return [InstitutionOut.model_validate(i) for i in institutions]
    except DataAccessError as e:
        return _store_error(e)


@router.get("/carreras/{institution_id}", response_model=list[ProgramOut], summary="List programs of an institution")
def list_programs(institution_id: int, db: Session = Depends(get_db)):
    try:
        return [ProgramOut.model_validate(p) for p in CatalogRepository(db).list_programs(institution_id)]
    except DataAccessError as e:
        return _store_error(e)
