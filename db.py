import os
from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from dotenv import load_dotenv

load_dotenv()


def _build_database_url():
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host = os.getenv("MYSQLHOST")
    if not host:
        raise RuntimeError("DATABASE_URL or MYSQLHOST env var not set")
    return URL.create(
        "mysql+pymysql",
        username=os.getenv("MYSQLUSER"),
        password=os.getenv("MYSQLPASSWORD"),
        host=host,
        port=int(os.getenv("MYSQLPORT") or 3306),
        database=os.getenv("MYSQLDATABASE"),
    )


DATABASE_URL = _build_database_url()

class Base(DeclarativeBase):
    pass

engine = create_engine(DATABASE_URL, future=True, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

def get_db():
    # read-only facade: sessions are never committed
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
