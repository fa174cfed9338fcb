from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NotImplementedResult:
    operation: str


class CancelReservationUseCase:
    """Placeholder: cancellation is not available yet and touches nothing."""

    def execute(self) -> NotImplementedResult:
        return NotImplementedResult(operation="cancel_reservation")


class ViewReservationsUseCase:
    """Placeholder: viewing one's reservations is not available yet."""

    def execute(self) -> NotImplementedResult:
        return NotImplementedResult(operation="view_reservations")
