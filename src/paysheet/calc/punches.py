"""Pair raw clock punches into attendance intervals using company shifts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from paysheet.models.attendance import AttendanceInterval, Shift

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def _minute_of_day(stamp: datetime) -> int:
    return stamp.hour * 60 + stamp.minute


def _signed_offset(target: int, stamp: datetime) -> int:
    """Minutes from ``stamp`` to the ``target`` time of day, in [-720, 720)."""
    diff = (target - _minute_of_day(stamp)) % MINUTES_PER_DAY
    return diff - MINUTES_PER_DAY if diff >= MINUTES_PER_DAY // 2 else diff


def match_shift(stamp: datetime, shifts: Iterable[Shift], tolerance: int) -> Shift | None:
    """First shift whose start lies within ``tolerance`` minutes of ``stamp``."""
    for shift in shifts:
        if abs(_signed_offset(shift.start_minutes, stamp)) <= tolerance:
            return shift
    return None


def shift_end_after(shift: Shift, clock_in: datetime) -> datetime:
    """The shift's end on the clock-in day, rolled forward when it precedes clock-in."""
    end = clock_in.replace(hour=shift.end_minutes // 60, minute=shift.end_minutes % 60,
                           second=0, microsecond=0)
    if end < clock_in:
        end += timedelta(days=1)
    return end


def pair_punches(
    punches: Iterable[datetime],
    shifts: list[Shift],
    *,
    start_tolerance: int = 180,
    end_early: int = 180,
    end_late: int = 360,
) -> list[AttendanceInterval]:
    """Turn a flat list of punch times into in/out intervals.

    A punch near a shift start opens an interval. The following punch closes
    it if it falls between ``end_early`` minutes before and ``end_late``
    minutes after the shift end; otherwise the interval closes at the shift
    end and that punch is considered as the next clock-in.
    """
    ordered = sorted(punches)
    intervals: list[AttendanceInterval] = []
    index = 0

    while index < len(ordered):
        clock_in = ordered[index]
        index += 1
        shift = match_shift(clock_in, shifts, start_tolerance)
        if shift is None:
            logger.info("No shift found for punch %s, skipping", clock_in.isoformat())
            continue

        default_out = shift_end_after(shift, clock_in)
        clock_out = default_out
        if index < len(ordered):
            candidate = ordered[index]
            offset = -_signed_offset(shift.end_minutes, candidate)  # minutes past shift end
            within_day = candidate - clock_in < timedelta(days=1)
            if candidate > clock_in and within_day and -end_early <= offset <= end_late:
                clock_out = candidate
                index += 1
            else:
                logger.debug(
                    "Punch %s outside end window of shift %s-%s, using shift end",
                    candidate.isoformat(), shift.start, shift.end,
                )

        intervals.append(AttendanceInterval(clock_in=clock_in, clock_out=clock_out))

    return intervals
