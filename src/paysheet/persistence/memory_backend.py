"""In-memory backends: list-backed fakes for tests and local runs."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from paysheet.models.calendar import Holiday


class MemoryHolidayCalendar:
    """List-backed IHolidayCalendar."""

    def __init__(self, holidays: Iterable[Holiday] = ()) -> None:
        self._holidays: dict[date, Holiday] = {h.date: h for h in holidays}

    def add(self, holiday: Holiday) -> None:
        self._holidays[holiday.date] = holiday

    def get_holidays(self, start: date | None, end: date | None) -> list[Holiday]:
        return sorted(
            (
                h for h in self._holidays.values()
                if (start is None or h.date >= start) and (end is None or h.date <= end)
            ),
            key=lambda h: h.date,
        )
