from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.core.entities.room import Room


class RoomRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[Room]:
        raise NotImplementedError

    @abstractmethod
    def get_id_by_name(self, name: str) -> int | None:
        """Return the id of the room called `name`, or None when there is none."""
        raise NotImplementedError

    @abstractmethod
    def add(self, name: str, capacity: int) -> Room:
        """Provision a room. Rooms are otherwise read-only for the application."""
        raise NotImplementedError
