"""Interval normalization: clock pair -> fractional worked hours."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from paysheet.core.exceptions import InvalidInterval
from paysheet.models.attendance import AttendanceInterval, NormalizedInterval

SECONDS_PER_HOUR = Decimal(3600)


def parse_interval(raw: Mapping[str, Any] | AttendanceInterval) -> AttendanceInterval:
    """Build an AttendanceInterval from a raw record.

    Accepts ``in``/``out`` or ``clock_in``/``clock_out`` keys. Unparseable
    records raise InvalidInterval.
    """
    if isinstance(raw, AttendanceInterval):
        return raw
    try:
        return AttendanceInterval.model_validate(dict(raw))
    except ValidationError as exc:
        raise InvalidInterval(
            f"Unparseable attendance record: {exc.errors()[0]['msg']}",
            clock_in=raw.get("clock_in", raw.get("in")),
            clock_out=raw.get("clock_out", raw.get("out")),
        ) from exc


def normalize(interval: Mapping[str, Any] | AttendanceInterval) -> NormalizedInterval:
    """Return a new interval carrying ``working_hours``.

    Both stamps are subtracted as wall-clock values; they must share a
    reference frame (both naive or both aware).
    """
    interval = parse_interval(interval)
    try:
        delta = interval.clock_out - interval.clock_in
    except TypeError as exc:
        raise InvalidInterval(
            "clock_in and clock_out must both be naive or both be timezone-aware",
            clock_in=interval.clock_in,
            clock_out=interval.clock_out,
        ) from exc

    if delta.total_seconds() <= 0:
        raise InvalidInterval(
            f"clock_out {interval.clock_out.isoformat()} is not after "
            f"clock_in {interval.clock_in.isoformat()}",
            clock_in=interval.clock_in,
            clock_out=interval.clock_out,
        )

    seconds = Decimal(delta.days * 86400 + delta.seconds) + Decimal(delta.microseconds) / 10**6
    return NormalizedInterval(**interval.model_dump(), working_hours=seconds / SECONDS_PER_HOUR)
