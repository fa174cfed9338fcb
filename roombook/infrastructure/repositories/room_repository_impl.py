from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from roombook.core.entities.room import Room
from roombook.core.repositories.room_repository import RoomRepository
from roombook.infrastructure.database import data_access
from roombook.infrastructure.models.models import RoomModel


class RoomRepositoryImpl(RoomRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def list_all(self) -> list[Room]:
        with data_access(self._db, "list rooms"):
            rows = self._db.scalars(select(RoomModel).order_by(RoomModel.id)).all()
            return [self._to_entity(row) for row in rows]

    def get_id_by_name(self, name: str) -> int | None:
        with data_access(self._db, "room lookup"):
            return self._db.scalar(select(RoomModel.id).where(RoomModel.name == name))

    def add(self, name: str, capacity: int) -> Room:
        row = RoomModel(name=name, capacity=capacity)
        with data_access(self._db, "add room"):
            self._db.add(row)
            self._db.commit()
            return self._to_entity(row)

    @staticmethod
    def _to_entity(row: RoomModel) -> Room:
        return Room(room_id=row.id, name=row.name, capacity=row.capacity)
