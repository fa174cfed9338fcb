from __future__ import annotations

from datetime import date, time

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session

from roombook.core.entities.reservation import Reservation
from roombook.core.repositories.reservation_repository import ReservationRepository
from roombook.infrastructure.database import data_access
from roombook.infrastructure.models.models import ReservationModel


def _intersects(start: time, end: time):
    """
    Existing [s1, e1) against candidate [s2, e2): s1 <= s2 < e1 OR s2 <= s1 < e2.

    With start == end == t the second clause can never hold and the whole
    condition becomes s1 <= t < e1.
    """
    return or_(
        and_(ReservationModel.start_time <= start, ReservationModel.end_time > start),
        and_(ReservationModel.start_time >= start, ReservationModel.start_time < end),
    )


class ReservationRepositoryImpl(ReservationRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def count_overlapping(self, room_id: int, day: date, start: time, end: time) -> int:
        return self._count(room_id, day, start, end, operation="overlap check")

    def count_covering(self, room_id: int, day: date, instant: time) -> int:
        return self._count(room_id, day, instant, instant, operation="time slot check")

    def list_for_room(self, room_id: int, day: date) -> list[Reservation]:
        q = (
            select(ReservationModel)
            .where(ReservationModel.room_id == room_id)
            .where(ReservationModel.date == day)
            .order_by(ReservationModel.start_time)
        )
        with data_access(self._db, "list reservations"):
            rows = self._db.scalars(q).all()
            return [self._to_entity(row) for row in rows]

    def add(self, room_id: int, day: date, start: time, end: time) -> Reservation:
        row = ReservationModel(room_id=room_id, date=day, start_time=start, end_time=end)
        with data_access(self._db, "insert reservation"):
            self._db.add(row)
            self._db.commit()
            return self._to_entity(row)

    def _count(self, room_id: int, day: date, start: time, end: time, *, operation: str) -> int:
        q = (
            select(func.count(ReservationModel.id))
            .where(ReservationModel.room_id == room_id)
            .where(ReservationModel.date == day)
            .where(_intersects(start, end))
        )
        with data_access(self._db, operation):
            return int(self._db.scalar(q) or 0)

    @staticmethod
    def _to_entity(row: ReservationModel) -> Reservation:
        return Reservation(
            reservation_id=row.id,
            room_id=row.room_id,
            date=row.date,
            start_time=row.start_time,
            end_time=row.end_time,
        )
