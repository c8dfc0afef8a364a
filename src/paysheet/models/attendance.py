"""Attendance interval models, from raw clock-in/out through processed OT values.

Intervals are immutable. Each calculation stage returns a new, richer model
(AttendanceInterval -> NormalizedInterval -> ProcessedInterval) instead of
attaching fields to the caller's object.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import AliasChoices, BaseModel, Field, field_validator

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class HolidayKind(StrEnum):
    NONE = ""
    DOUBLE = "double"


class WorkingDayStatus(StrEnum):
    FULL = "full"
    HALF = "half"
    OFF = "off"


class Shift(BaseModel):
    """A company shift as wall-clock "HH:MM" start and end."""

    start: str
    end: str

    model_config = {"frozen": True}

    @field_validator("start", "end")
    @classmethod
    def _check_hhmm(cls, value: str) -> str:
        if not _HHMM.match(value):
            raise ValueError(f"expected HH:MM, got {value!r}")
        return value

    @property
    def start_minutes(self) -> int:
        hours, minutes = self.start.split(":")
        return int(hours) * 60 + int(minutes)

    @property
    def end_minutes(self) -> int:
        hours, minutes = self.end.split(":")
        return int(hours) * 60 + int(minutes)


class AttendanceInterval(BaseModel):
    """One clock-in/clock-out pair as imported from timekeeping."""

    clock_in: datetime = Field(validation_alias=AliasChoices("clock_in", "in"))
    clock_out: datetime = Field(validation_alias=AliasChoices("clock_out", "out"))
    holiday: HolidayKind = HolidayKind.NONE
    holiday_label: str = ""  # e.g. "Public Mercantile", display only
    day_status: WorkingDayStatus = WorkingDayStatus.FULL
    description: str = ""
    no_pay: Decimal = Field(default=Decimal("0"), ge=0)  # manually entered, never derived

    model_config = {"frozen": True, "str_strip_whitespace": True, "populate_by_name": True}


class NormalizedInterval(AttendanceInterval):
    """Interval with worked hours derived from the clock pair."""

    working_hours: Decimal


class ProcessedInterval(NormalizedInterval):
    """Interval with overtime classified and priced (full precision)."""

    ot_hours: Decimal = Decimal("0")
    ot_amount: Decimal = Decimal("0")


class PayPeriodAggregate(BaseModel):
    """Overtime and no-pay totals for one employee pay period."""

    overtime_amount: Decimal = Decimal("0")
    overtime_reason: str = ""
    no_pay_amount: Decimal = Decimal("0")
    no_pay_reason: str = ""
    intervals: list[ProcessedInterval] = Field(default_factory=list)

    model_config = {"frozen": True}
