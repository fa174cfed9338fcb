from __future__ import annotations

import logging
from datetime import date, time

from roombook.core.entities.reservation import Reservation
from roombook.core.repositories.reservation_repository import ReservationRepository
from roombook.core.repositories.room_repository import RoomRepository
from roombook.core.use_cases.check_availability import CheckAvailabilityUseCase

logger = logging.getLogger(__name__)


class RoomNotFoundError(Exception):
    """Raise when no room carries the requested name."""


class RoomUnavailableError(Exception):
    """Raise when the requested window overlaps an existing reservation."""


class CreateReservationUseCase:
    """
    Resolve the room by name, check the window, then insert.

    The check and the insert run as two separate statements: a concurrent writer
    can slip a conflicting reservation in between.
    """

    def __init__(self, *, room_repo: RoomRepository, reservation_repo: ReservationRepository) -> None:
        self._room_repo = room_repo
        self._reservation_repo = reservation_repo
        self._availability = CheckAvailabilityUseCase(reservation_repo=reservation_repo)

    def execute(self, *, room_name: str, day: date, start: time, end: time) -> Reservation:
        room_id = self._room_repo.get_id_by_name(room_name)
        if room_id is None:
            raise RoomNotFoundError(f"Aucune salle nommée {room_name!r}.")

        if not self._availability.is_available(room_id=room_id, day=day, start=start, end=end):
            logger.info("Rejected reservation of room %s on %s %s-%s: overlap", room_id, day, start, end)
            raise RoomUnavailableError(
                "La salle sélectionnée n'est pas disponible pour la date et l'heure indiquées."
            )

        reservation = self._reservation_repo.add(room_id, day, start, end)
        logger.info("Created reservation %s for room %s", reservation.reservation_id, room_id)
        return reservation
