from __future__ import annotations

from datetime import time
from typing import Callable, Iterator

import pytest

from roombook.infrastructure.gateway import DatabaseGateway
from roombook.tests.helpers import BOOKED_DAY, IN_MEMORY_URL


@pytest.fixture
def gateway() -> Iterator[DatabaseGateway]:
    """
    Fresh in-memory database per test, tables created on open.
    """
    gw = DatabaseGateway.open(IN_MEMORY_URL)
    try:
        yield gw
    finally:
        gw.close()


@pytest.fixture
def seeded_gateway(gateway: DatabaseGateway) -> DatabaseGateway:
    """
    Alpha (capacity 4) booked on 2024-01-10 from 09:00 to 10:00; Beta (capacity 8) free all day.
    """
    alpha = gateway.rooms.add("Alpha", 4)
    gateway.rooms.add("Beta", 8)
    gateway.reservations.add(alpha.room_id, BOOKED_DAY, time(9, 0), time(10, 0))
    return gateway


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[str], str]]:
    """
    Build an input() replacement answering prompts in order; EOFError once exhausted.
    """

    def _build(*answers: str) -> Callable[[str], str]:
        remaining = iter(answers)

        def _input(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return _input

    return _build
