from __future__ import annotations

from datetime import date, time

from roombook.core.entities.reservation import Reservation
from roombook.core.entities.room import Room
from roombook.core.use_cases.create_reservation import CreateReservationUseCase
from roombook.core.use_cases.list_available_rooms_for_time import ListAvailableRoomsForTimeUseCase
from roombook.core.use_cases.list_room_reservations import ListRoomReservationsUseCase, RoomReservationsDTO
from roombook.core.use_cases.unimplemented import (
    CancelReservationUseCase,
    NotImplementedResult,
    ViewReservationsUseCase,
)
from roombook.infrastructure.gateway import DatabaseGateway


def list_rooms_service(gateway: DatabaseGateway) -> list[Room]:
    return gateway.rooms.list_all()


def create_reservation_service(
    gateway: DatabaseGateway, room_name: str, day: date, start: time, end: time
) -> Reservation:
    use_case = CreateReservationUseCase(room_repo=gateway.rooms, reservation_repo=gateway.reservations)
    return use_case.execute(room_name=room_name, day=day, start=start, end=end)


def list_available_rooms_for_time_service(gateway: DatabaseGateway, day: date, instant: time) -> list[Room]:
    use_case = ListAvailableRoomsForTimeUseCase(room_repo=gateway.rooms, reservation_repo=gateway.reservations)
    return use_case.execute(day=day, instant=instant)


def list_room_reservations_service(gateway: DatabaseGateway, room_id: int, day: date) -> RoomReservationsDTO:
    use_case = ListRoomReservationsUseCase(reservation_repo=gateway.reservations)
    return use_case.execute(room_id=room_id, day=day)


def cancel_reservation_service(gateway: DatabaseGateway) -> NotImplementedResult:
    return CancelReservationUseCase().execute()


def view_reservations_service(gateway: DatabaseGateway) -> NotImplementedResult:
    return ViewReservationsUseCase().execute()
