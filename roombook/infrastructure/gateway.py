from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from roombook.infrastructure.database import Base, build_engine
from roombook.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from roombook.infrastructure.repositories.room_repository_impl import RoomRepositoryImpl

logger = logging.getLogger(__name__)


class DatabaseUnavailableError(Exception):
    """Raise when the store cannot be reached at startup. Fatal."""


class DatabaseGateway:
    """
    Owns the single session used by the whole application and the repositories
    built on it. Open once at startup, close at shutdown.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self.rooms = RoomRepositoryImpl(session)
        self.reservations = ReservationRepositoryImpl(session)
        self._closed = False

    @classmethod
    def open(cls, database_url: str | URL, *, create_schema: bool = True) -> DatabaseGateway:
        try:
            engine = build_engine(database_url)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            if create_schema:
                Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as e:
            raise DatabaseUnavailableError(f"Cannot connect to the database: {e}") from e

        logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
        return cls(sessionmaker(bind=engine)())

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        bind = self._session.get_bind()
        self._session.close()
        bind.dispose()

    def __enter__(self) -> DatabaseGateway:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
