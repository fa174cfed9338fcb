from __future__ import annotations

from datetime import date, time

from roombook.core.repositories.reservation_repository import ReservationRepository


class CheckAvailabilityUseCase:
    """
    Two distinct checks against the same reservations:

      - is_available: does the window [start, end) intersect an existing reservation?
      - is_available_for_slot: does a single instant fall inside an existing reservation?

    Both use half-open windows, so a reservation ending at 10:00 frees the room at 10:00.
    """

    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def is_available(self, *, room_id: int, day: date, start: time, end: time) -> bool:
        return self._reservation_repo.count_overlapping(room_id, day, start, end) == 0

    def is_available_for_slot(self, *, room_id: int, day: date, instant: time) -> bool:
        return self._reservation_repo.count_covering(room_id, day, instant) == 0
