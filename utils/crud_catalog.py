import logging
from typing import Iterable
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.models import Region, SubRegion, Institution, Site, Program, InstitutionProgram
from riasec.logic.contracts import CandidateProgram, DimensionMatch
from riasec.logic.exceptions import DataAccessError

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Read-only queries over the vocational catalog. Every store failure becomes DataAccessError."""

    def __init__(self, db: Session):
        self.db = db

    def _all(self, stmt, what: str):
        try:
            return self.db.execute(stmt).all()
        except SQLAlchemyError as e:
            logger.error("Query for %s failed: %s", what, e)
            raise DataAccessError(str(e)) from e

    def _scalars(self, stmt, what: str):
        try:
            return self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Query for %s failed: %s", what, e)
            raise DataAccessError(str(e)) from e

    def list_regions(self) -> list[Region]:
        return self._scalars(select(Region).order_by(Region.id), "regions")

    def list_sub_regions(self, region_id: int) -> list[SubRegion]:
        stmt = select(SubRegion).where(SubRegion.region_id == region_id).order_by(SubRegion.id)
        return self._scalars(stmt, "sub-regions")

    def list_institutions(self, sub_region_id: int, categories: Iterable[str]) -> list[Institution]:
        # an institution with several sites in the sub-region appears once
        stmt = (
            select(Institution)
            .join(Site, Site.institution_id == Institution.id)
            .where(Site.sub_region_id == sub_region_id, Institution.category.in_(list(categories)))
            .distinct()
            .order_by(Institution.id)
        )
        return self._scalars(stmt, "institutions")

    def list_programs(self, institution_id: int) -> list[Program]:
        stmt = (
            select(Program)
            .join(InstitutionProgram, InstitutionProgram.program_id == Program.id)
            .where(InstitutionProgram.institution_id == institution_id)
        )
        return self._scalars(stmt, "programs")

    def list_programs_by_exact_dimension(self, dimension: str) -> list[DimensionMatch]:
        stmt = (
            select(Program.name, Institution.name)
            .join(InstitutionProgram, InstitutionProgram.program_id == Program.id)
            .join(Institution, Institution.id == InstitutionProgram.institution_id)
            .where(Program.riasec_code == dimension)
            .order_by(Program.name)
        )
        return [
            DimensionMatch(program_name=program_name, institution_name=institution_name)
            for program_name, institution_name in self._all(stmt, "dimension matches")
        ]

    def list_candidate_programs(self, category: str) -> list[CandidateProgram]:
        stmt = (
            select(Program.name, Program.riasec_code, Institution.name, Institution.category)
            .join(InstitutionProgram, InstitutionProgram.program_id == Program.id)
            .join(Institution, Institution.id == InstitutionProgram.institution_id)
            .where(Institution.category == category)
        )
        return [
            CandidateProgram(
                program_name=program_name,
                riasec_code=riasec_code or "",
                institution_name=institution_name,
                institution_category=institution_category,
            )
            for program_name, riasec_code, institution_name, institution_category in self._all(stmt, "candidates")
        ]
