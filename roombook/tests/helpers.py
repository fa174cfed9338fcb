from __future__ import annotations

from datetime import date

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"

# Alpha is booked from 09:00 to 10:00 on this day in the seeded database
BOOKED_DAY = date(2024, 1, 10)
