"""
Transaction helper for multi-statement writes.

Everything executed inside :func:`transaction` commits together or not
at all.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from cadence.core.exceptions import ConflictError
from cadence.core.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit on success; roll back and re-raise on any failure.

    Uniqueness violations surface as :class:`ConflictError` so callers can
    tell a lost race (retryable) from a programming error.
    """
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning("transaction_rolled_back", reason="integrity_error", error=str(e.orig))
        raise ConflictError("The schedule changed concurrently; retry the operation.") from e
    except Exception:
        session.rollback()
        raise
