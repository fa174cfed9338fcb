from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, time

from roombook.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    @abstractmethod
    def count_overlapping(self, room_id: int, day: date, start: time, end: time) -> int:
        """Number of reservations of the room on `day` whose window intersects [start, end)."""
        raise NotImplementedError

    @abstractmethod
    def count_covering(self, room_id: int, day: date, instant: time) -> int:
        """Number of reservations of the room on `day` with start <= instant < end."""
        raise NotImplementedError

    @abstractmethod
    def list_for_room(self, room_id: int, day: date) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def add(self, room_id: int, day: date, start: time, end: time) -> Reservation:
        raise NotImplementedError
