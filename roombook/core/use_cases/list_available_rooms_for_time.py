from __future__ import annotations

from datetime import date, time

from roombook.core.entities.room import Room
from roombook.core.repositories.reservation_repository import ReservationRepository
from roombook.core.repositories.room_repository import RoomRepository
from roombook.core.use_cases.check_availability import CheckAvailabilityUseCase


class ListAvailableRoomsForTimeUseCase:
    """Rooms free at a given instant. This is a point-in-time test, not a window test."""

    def __init__(self, *, room_repo: RoomRepository, reservation_repo: ReservationRepository) -> None:
        self._room_repo = room_repo
        self._availability = CheckAvailabilityUseCase(reservation_repo=reservation_repo)

    def execute(self, *, day: date, instant: time) -> list[Room]:
        return [
            room
            for room in self._room_repo.list_all()
            if self._availability.is_available_for_slot(room_id=room.room_id, day=day, instant=instant)
        ]
