from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base
from sqlalchemy.pool import StaticPool

from roombook.core.repositories.errors import DataAccessError

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str | URL) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    # One shared connection, so an in-memory database survives across sessions
    return create_engine(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@contextmanager
def data_access(session: Session, operation: str) -> Iterator[None]:
    """
    Run one repository call as its own transaction.

    The transaction is closed on exit so that the next call sees rows other
    processes committed meanwhile. Driver failures are rolled back and
    re-raised as DataAccessError.
    """
    try:
        yield
        if session.in_transaction():
            session.commit()
    except SQLAlchemyError as e:
        logger.exception("Database failure during %s", operation)
        session.rollback()
        raise DataAccessError(f"Erreur d'accès à la base de données ({operation}).") from e
