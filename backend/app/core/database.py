from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.core.base import Base
from app.core.config import settings


def build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Sessions are handed to FastAPI's worker threads.
        connect_args = {"check_same_thread": False}
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,   # checks stale connections
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(bind: Engine | None = None) -> None:
    # Register every model with the metadata before creating.
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def is_unique_violation(exc: IntegrityError, *markers: str) -> bool:
    """
    True when ``exc`` was raised by one of the unique constraints named in
    ``markers``. Postgres reports the constraint name; SQLite reports
    "UNIQUE constraint failed: table.column, ...". Foreign key and NOT NULL
    failures never match.
    """
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None)
    if pgcode is not None and pgcode != "23505":
        return False
    message = str(orig or exc)
    return any(marker in message for marker in markers)
