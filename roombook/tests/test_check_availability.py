from __future__ import annotations

from datetime import date, time

import pytest

from roombook.core.use_cases.check_availability import CheckAvailabilityUseCase
from roombook.infrastructure.gateway import DatabaseGateway

DAY = date(2024, 3, 4)


@pytest.fixture
def checker_and_room(gateway: DatabaseGateway) -> tuple[CheckAvailabilityUseCase, int]:
    """
    One room with two disjoint reservations: 09:00-10:00 and 14:00-15:30.
    """
    room = gateway.rooms.add("Salle A", 10)
    gateway.reservations.add(room.room_id, DAY, time(9, 0), time(10, 0))
    gateway.reservations.add(room.room_id, DAY, time(14, 0), time(15, 30))
    return CheckAvailabilityUseCase(reservation_repo=gateway.reservations), room.room_id


@pytest.mark.parametrize(
    "start, end",
    [
        (time(7, 0), time(9, 0)),  # ends exactly when the first one starts
        (time(10, 0), time(11, 0)),  # starts exactly when the first one ends
        (time(10, 0), time(14, 0)),  # fills the gap
        (time(15, 30), time(18, 0)),
    ],
)
def test_window_disjoint_from_every_reservation_is_available(checker_and_room, start: time, end: time) -> None:
    checker, room_id = checker_and_room
    assert checker.is_available(room_id=room_id, day=DAY, start=start, end=end) is True


@pytest.mark.parametrize(
    "start, end",
    [
        (time(9, 0), time(9, 30)),  # same start
        (time(8, 30), time(9, 30)),  # straddles the start
        (time(9, 30), time(10, 30)),  # straddles the end
        (time(9, 15), time(9, 45)),  # inside
        (time(8, 0), time(11, 0)),  # contains the whole reservation
        (time(9, 30), time(14, 30)),  # touches both reservations
    ],
)
def test_window_intersecting_a_reservation_is_not_available(checker_and_room, start: time, end: time) -> None:
    checker, room_id = checker_and_room
    assert checker.is_available(room_id=room_id, day=DAY, start=start, end=end) is False


def test_reservations_on_other_days_or_rooms_are_ignored(gateway: DatabaseGateway, checker_and_room) -> None:
    checker, room_id = checker_and_room
    other = gateway.rooms.add("Salle B", 2)

    assert checker.is_available(room_id=room_id, day=date(2024, 3, 5), start=time(9, 0), end=time(10, 0))
    assert checker.is_available(room_id=other.room_id, day=DAY, start=time(9, 0), end=time(10, 0))


@pytest.mark.parametrize(
    "instant, available",
    [
        (time(8, 59), True),
        (time(9, 0), False),  # start is included
        (time(9, 30), False),
        (time(10, 0), True),  # end is excluded
        (time(15, 29), False),
        (time(15, 30), True),
    ],
)
def test_point_in_time_check_uses_half_open_windows(checker_and_room, instant: time, available: bool) -> None:
    checker, room_id = checker_and_room
    assert checker.is_available_for_slot(room_id=room_id, day=DAY, instant=instant) is available
