# utils/transactions.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from utils.db import SessionLocal

logger = logging.getLogger(__name__)


@contextmanager
def uow(session: Optional[Session] = None) -> Iterator[Session]:
    """
    Unit of work for scripts and batch jobs:

        with uow() as db:
            upsert_admin(db, email=..., password=...)

    Commits on success, rolls back and re-raises on error. A session passed
    in is committed but left open for its owner to close.
    """
    owned = session is None
    db = session or SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.exception("Unit of work rolled back")
        db.rollback()
        raise
    finally:
        if owned:
            db.close()
