from __future__ import annotations

import re
from datetime import date, datetime, time

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)


class InputValidationError(ValueError):
    """Raise when console input cannot be turned into a date or a time."""


def parse_date(value: str) -> date:
    """
    Parse a calendar day written as YYYY-MM-DD.

    The year must lie in [1, 9999]; year 0000 is reported as out of range
    rather than as a format error.
    """
    match = _DATE_RE.match(value.strip())
    if match is None:
        raise InputValidationError("Format de date invalide. Veuillez utiliser le format YYYY-MM-DD.")

    year, month, day = (int(part) for part in match.groups())
    if year < 1 or year > 9999:
        raise InputValidationError(f"L'année n'est pas dans l'intervalle [1, 9999] : {year}")

    try:
        return date(year, month, day)
    except ValueError as e:
        raise InputValidationError(f"Date invalide : {value.strip()} ({e})") from e


def parse_time(value: str) -> time:
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError as e:
        raise InputValidationError("Format d'heure invalide. Veuillez utiliser le format HH:MM.") from e
