from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from roombook.core.entities.reservation import Reservation
from roombook.core.repositories.reservation_repository import ReservationRepository


@dataclass(frozen=True, slots=True)
class RoomReservationsDTO:
    """
    Use-case return type for the room browser
    """
    room_id: int
    date: date
    reservations: tuple[Reservation, ...]


class ListRoomReservationsUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, room_id: int, day: date) -> RoomReservationsDTO:
        reservations = self._reservation_repo.list_for_room(room_id, day)
        return RoomReservationsDTO(room_id=room_id, date=day, reservations=tuple(reservations))
