"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
deployments use the Alembic migrations instead.
"""

from sqlmodel import SQLModel

from cadence.core.logging import get_logger
from cadence.db.session import engine

logger = get_logger(__name__)


def init_db() -> None:
    # Import all models so SQLModel.metadata has them
    import cadence.db.base  # noqa: F401

    logger.info("creating_tables", tables=sorted(SQLModel.metadata.tables))
    SQLModel.metadata.create_all(engine)
    logger.info("tables_created")


if __name__ == "__main__":
    init_db()
