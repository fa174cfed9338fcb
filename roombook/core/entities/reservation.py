from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True, slots=True)
class Reservation:
    """
    A booked [start_time, end_time) window for one room on one calendar day.
    start_time < end_time is not checked here.
    """
    reservation_id: int
    room_id: int
    date: date
    start_time: time
    end_time: time
