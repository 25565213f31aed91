"""
Database engine and request-scoped sessions.

PostgreSQL in every deployed environment; a ``sqlite`` URL in
``DATABASE_URL_OVERRIDE`` is accepted for local experiments.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from cadence.core.config import settings


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


engine = create_engine(settings.DATABASE_URL, echo=settings.DEBUG, **_engine_options(settings.DATABASE_URL))


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request.

    Services decide when to commit; the session is closed (and anything
    uncommitted rolled back) when the request ends.
    """
    with Session(engine) as session:
        yield session
