"""Shared test doubles: re-export memory backends."""

from __future__ import annotations

from paysheet.persistence.memory_backend import MemoryHolidayCalendar

__all__ = ["MemoryHolidayCalendar"]
