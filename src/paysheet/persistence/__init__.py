"""Pluggable collaborator backends behind Protocol interfaces."""

from __future__ import annotations

from typing import Iterable

from paysheet.models.calendar import Holiday
from paysheet.persistence.memory_backend import MemoryHolidayCalendar


def create_holiday_calendar(holidays: Iterable[Holiday] = ()) -> MemoryHolidayCalendar:
    """Create the holiday calendar the salary service reads from.

    The calendar of record lives in the external backend; callers pass the
    holidays they fetched from it.
    """
    return MemoryHolidayCalendar(holidays)
