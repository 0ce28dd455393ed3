# backend/database/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.config.settings import get_settings

DATABASE_URL = get_settings().database_url


def create_database_engine(url: str = DATABASE_URL):
    kwargs = {"pool_pre_ping": True, "future": True}
    if url.startswith("mysql"):
        # one shared pool for every request, like the connectionLimit of the old server
        kwargs.update(pool_size=10, max_overflow=0, pool_recycle=3600)
    return create_engine(url, **kwargs)


engine = create_database_engine()

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
