from enum import Enum
from sqlalchemy import Column, Integer, String, ForeignKey
from db import Base


class InstitutionCategory(str, Enum):
    """Institution types as stored in `instituciones.tipo`."""
    UNIVERSITY = "Universidad"
    INSTITUTE = "Instituto"
    POLICE_ACADEMY = "Escuela Policial"


class Region(Base):
    __tablename__ = "departamentos"
    id = Column("id_departamento", Integer, primary_key=True)
    name = Column("nombre", String(255), nullable=False)


class SubRegion(Base):
    __tablename__ = "provincias"
    id = Column("id_provincia", Integer, primary_key=True)
    name = Column("nombre", String(255), nullable=False)
    region_id = Column("id_departamento", Integer, ForeignKey("departamentos.id_departamento"), index=True)


class Institution(Base):
    __tablename__ = "instituciones"
    id = Column("id_institucion", Integer, primary_key=True)
    name = Column("nombre", String(255), nullable=False)
    category = Column("tipo", String(64), nullable=False)


class Site(Base):
    # an institution campus located in a sub-region
    __tablename__ = "sedes"
    id = Column("id_sede", Integer, primary_key=True)
    institution_id = Column("id_institucion", Integer, ForeignKey("instituciones.id_institucion"), index=True)
    sub_region_id = Column("id_provincia", Integer, ForeignKey("provincias.id_provincia"), index=True)


class Program(Base):
    __tablename__ = "carreras"
    id = Column("id_carrera", Integer, primary_key=True)
    name = Column("nombre", String(255), nullable=False)
    riasec_code = Column("riasec", String(6), nullable=False)


class InstitutionProgram(Base):
    __tablename__ = "institucion_carrera"
    institution_id = Column("id_institucion", Integer, ForeignKey("instituciones.id_institucion"), primary_key=True)
    program_id = Column("id_carrera", Integer, ForeignKey("carreras.id_carrera"), primary_key=True)
