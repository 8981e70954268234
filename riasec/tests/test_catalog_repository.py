"""
Test the catalog data access layer directly.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from riasec.logic.exceptions import DataAccessError
from utils.crud_catalog import CatalogRepository


def test_candidates_filtered_by_category(db_session):
    repo = CatalogRepository(db_session)
    institutes = repo.list_candidate_programs("Instituto")
    assert {c.institution_category for c in institutes} == {"Instituto"}
    assert {c.program_name for c in institutes} == {
        "Mechanics", "Electronics", "Graphic Design", "Accounting", "Cooking", "Nursing",
    }


def test_police_academy_never_a_candidate(db_session):
    repo = CatalogRepository(db_session)
    names = [c.program_name for c in repo.list_candidate_programs("Universidad")]
    assert "Police Science" not in names
    assert names.count("Psychology") == 2


def test_exact_dimension_ordered_by_name(db_session):
    matches = CatalogRepository(db_session).list_programs_by_exact_dimension("S")
    assert [m.program_name for m in matches] == ["Nursing", "Nursing", "Police Science"]


def test_institutions_category_filter(db_session):
    repo = CatalogRepository(db_session)
    assert [i.id for i in repo.list_institutions(10, ["Universidad"])] == [1]
    assert [i.id for i in repo.list_institutions(20, ["Universidad", "Instituto"])] == [4]


def test_unknown_ids_return_empty(db_session):
    repo = CatalogRepository(db_session)
    assert repo.list_sub_regions(99) == []
    assert repo.list_programs(99) == []


def test_store_errors_wrapped():
    # no tables: every query fails
    empty_engine = create_engine("sqlite://")
    with Session(empty_engine) as session:
        with pytest.raises(DataAccessError):
            CatalogRepository(session).list_regions()
    empty_engine.dispose()
