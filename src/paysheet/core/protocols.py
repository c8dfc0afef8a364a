"""Protocol interfaces for collaborators the calculator consumes.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

from paysheet.models.calendar import Holiday


# ---------------------------------------------------------------------------
# Holiday Calendar
# ---------------------------------------------------------------------------

@runtime_checkable
class IHolidayCalendar(Protocol):
    """Source of declared holidays (owned by the external backend)."""

    def get_holidays(self, start: date | None, end: date | None) -> list[Holiday]: ...
