"""
Create the scheduling tables straight from the models.

For throwaway development databases only; everything else goes through
``alembic upgrade head``.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from cadence.core.logging import configure_logging, get_logger
from cadence.db.init_db import init_db

if __name__ == "__main__":
    configure_logging()
    logger = get_logger("scripts.init_db")

    try:
        init_db()
    except SQLAlchemyError:
        logger.exception("init_db_failed")
        sys.exit(1)

    logger.info("init_db_done")
