"""
Shared fixtures: an in-memory catalog seeded with a small, known dataset.
"""

import os
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base, get_db
from models.models import Region, SubRegion, Institution, Site, Program, InstitutionProgram


REGIONS = [(1, "Lima"), (2, "Cusco"), (3, "Tacna")]

SUB_REGIONS = [(10, "Lima", 1), (11, "Canete", 1), (20, "Cusco", 2)]

INSTITUTIONS = [
    (1, "Universidad Nacional Mayor", "Universidad"),
    (2, "Instituto Tecnologico Lima", "Instituto"),
    (3, "Escuela de Policia", "Escuela Policial"),
    (4, "Universidad del Cusco", "Universidad"),
    (5, "Colegio Mayor", "Colegio"),
]

# institution 1 has two sites in sub-region 10
SITES = [(1, 1, 10), (2, 1, 10), (3, 2, 10), (4, 3, 10), (5, 5, 10), (6, 4, 20), (7, 1, 11)]

PROGRAMS = [
    (1, "Psychology", "SIA"),
    (2, "Nursing", "S"),
    (3, "Art", "A"),
    (4, "Civil Engineering", "RI"),
    (5, "Mechanics", "R"),
    (6, "Accounting", "CE"),
    (7, "Medicine", "IS"),
    (8, "Education", "SA"),
    (9, "Business", "EC"),
    (10, "Graphic Design", "AR"),
    (11, "Electronics", "RI"),
    (12, "Cooking", "RA"),
    (13, "Police Science", "S"),
]

OFFERS = {
    1: [1, 2, 3, 4, 6, 7, 8],
    2: [5, 11, 10, 6, 12, 2],
    3: [13],
    4: [9, 1],
}


def seed(session):
    session.add_all(Region(id=i, name=n) for i, n in REGIONS)
    session.add_all(SubRegion(id=i, name=n, region_id=r) for i, n, r in SUB_REGIONS)
    session.add_all(Institution(id=i, name=n, category=c) for i, n, c in INSTITUTIONS)
    session.add_all(Site(id=i, institution_id=inst, sub_region_id=sr) for i, inst, sr in SITES)
    session.add_all(Program(id=i, name=n, riasec_code=c) for i, n, c in PROGRAMS)
    session.add_all(
        InstitutionProgram(institution_id=inst, program_id=p)
        for inst, programs in OFFERS.items()
        for p in programs
    )
    session.commit()


@pytest.fixture()
def session_factory():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    factory = sessionmaker(bind=test_engine, autoflush=False, future=True)
    with factory() as session:
        seed(session)
    yield factory
    test_engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture()
def client(session_factory):
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
