from __future__ import annotations

import enum
from typing import Callable

from roombook.core.repositories.errors import DataAccessError
from roombook.core.use_cases.create_reservation import RoomNotFoundError, RoomUnavailableError
from roombook.core.use_cases.parse_input import InputValidationError, parse_date, parse_time
from roombook.infrastructure.gateway import DatabaseGateway
from roombook.services.reservation_service import (
    cancel_reservation_service,
    create_reservation_service,
    list_available_rooms_for_time_service,
    list_room_reservations_service,
    list_rooms_service,
    view_reservations_service,
)

WELCOME = "Bienvenue sur le service de réservation en ligne"
FAREWELL = "Merci d'utiliser notre service !"
INVALID_OPTION = "Option invalide. Veuillez réessayer."
NOT_AVAILABLE_YET = "Cette fonctionnalité n'est pas encore disponible."

MAIN_MENU = (
    "-----------------------------------------------------",
    "1. Lister les salles disponibles",
    "2. Créer une réservation",
    "3. Annuler une réservation",
    "4. Voir les réservations",
    "5. Quitter",
)

NAVIGATION_MENU = (
    "1. Retourner au menu principal",
    "2. Quitter",
)

# Failures that abort the current operation and bring the user back to the main menu
RECOVERABLE_ERRORS = (InputValidationError, RoomNotFoundError, RoomUnavailableError, DataAccessError)


class MenuState(enum.Enum):
    MAIN = "main"
    NAVIGATION = "navigation"
    QUIT = "quit"


class ConsoleApp:
    """
    Line-oriented menu over the reservation services.

    `input_func` and `output` fall back to the builtins input and print.
    """

    def __init__(
        self,
        gateway: DatabaseGateway,
        *,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self._gateway = gateway
        self._input = input_func or input
        self._output = output or print

    def run(self) -> int:
        """Drive the menus until the user quits. Returns the process exit status."""
        self._output(WELCOME)

        state = MenuState.MAIN
        while state is not MenuState.QUIT:
            try:
                if state is MenuState.MAIN:
                    state = self._main_menu()
                else:
                    state = self._navigation_menu()
            except EOFError:
                state = MenuState.QUIT

        self._output(FAREWELL)
        return 0

    def _main_menu(self) -> MenuState:
        for line in MAIN_MENU:
            self._output(line)
        choice = self._read_choice()

        if choice == 5:
            return MenuState.QUIT

        actions: dict[int, Callable[[], MenuState]] = {
            1: self.list_available_rooms_for_time,
            2: self.create_reservation,
            3: self.cancel_reservation,
            4: self.view_reservations,
        }
        action = actions.get(choice)
        if action is None:
            self._output(INVALID_OPTION)
            return MenuState.MAIN

        try:
            return action()
        except RECOVERABLE_ERRORS as e:
            self._output(str(e))
            return MenuState.MAIN

    def _navigation_menu(self) -> MenuState:
        for line in NAVIGATION_MENU:
            self._output(line)
        choice = self._read_choice()

        if choice == 1:
            return MenuState.MAIN
        if choice == 2:
            return MenuState.QUIT
        self._output(INVALID_OPTION)
        return MenuState.NAVIGATION

    def _read_choice(self) -> int | None:
        raw = self._input("Choisissez une option : ")
        try:
            return int(raw.strip())
        except ValueError:
            return None

    # -----------------------------
    # Operations
    # -----------------------------
    def list_available_rooms_for_time(self) -> MenuState:
        raw_date = self._input("Entrez la date (YYYY-MM-DD) : ")
        raw_time = self._input("Entrez l'heure (HH:MM) : ")
        day = parse_date(raw_date)
        instant = parse_time(raw_time)

        rooms = list_available_rooms_for_time_service(self._gateway, day, instant)

        self._output(f"Salles disponibles pour le {day.isoformat()} à {instant.strftime('%H:%M')} :")
        for i, room in enumerate(rooms, start=1):
            self._output(f"{i}. {room.name} (Capacité : {room.capacity})")
        if not rooms:
            self._output("Aucune salle disponible pour ce créneau horaire.")
        return MenuState.MAIN

    def create_reservation(self) -> MenuState:
        self._output("Création d'une réservation...")
        room_name = self._input("Nom de la salle : ").strip()
        raw_date = self._input("Date (AAAA-MM-JJ) : ")
        raw_start = self._input("Heure de début (HH:MM) : ")
        raw_end = self._input("Heure de fin (HH:MM) : ")

        day = parse_date(raw_date)
        start = parse_time(raw_start)
        end = parse_time(raw_end)

        create_reservation_service(self._gateway, room_name, day, start, end)
        self._output("Réservation créée avec succès !")
        return MenuState.NAVIGATION

    def cancel_reservation(self) -> MenuState:
        cancel_reservation_service(self._gateway)
        self._output(NOT_AVAILABLE_YET)
        return MenuState.MAIN

    def view_reservations(self) -> MenuState:
        view_reservations_service(self._gateway)
        self._output(NOT_AVAILABLE_YET)
        return MenuState.MAIN

    def browse_rooms(self) -> None:
        """List every room, then dump the reservations of the chosen room on the chosen day."""
        rooms = list_rooms_service(self._gateway)
        self._output("Salles :")
        for room in rooms:
            self._output(f"{room.room_id}. {room.name} (Capacité : {room.capacity})")

        raw_room = self._input("Sélectionnez une salle : ")
        try:
            room_id = int(raw_room.strip())
        except ValueError as e:
            raise InputValidationError(f"Numéro de salle invalide : {raw_room.strip()!r}") from e
        day = parse_date(self._input("Entrez la date (YYYY-MM-DD) : "))

        dto = list_room_reservations_service(self._gateway, room_id, day)
        self._output(f"Réservations pour la salle {dto.room_id} le {dto.date.isoformat()} :")
        for i, reservation in enumerate(dto.reservations, start=1):
            self._output(
                f"{i}. {reservation.start_time.strftime('%H:%M')} - {reservation.end_time.strftime('%H:%M')}"
            )
        if not dto.reservations:
            self._output("Aucune réservation pour cette date.")

    def run_browser(self) -> int:
        try:
            self.browse_rooms()
        except RECOVERABLE_ERRORS as e:
            self._output(str(e))
            return 1
        except EOFError:
            return 1
        return 0
