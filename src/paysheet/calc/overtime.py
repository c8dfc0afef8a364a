"""Overtime tiering for a single normalized interval.

Tiers, with the default 8 hour day and 2 hour normal cap:

* holiday (double): every worked hour is OT at the double rate
* 8-10 hours: hours past 8 at the regular rate
* past 10 hours: the first 2 OT hours at the regular rate, the rest double
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from paysheet.calc.rates import HourlyRate
from paysheet.models.attendance import HolidayKind

DEFAULT_THRESHOLD_HOURS = Decimal("8")
DEFAULT_NORMAL_CAP_HOURS = Decimal("2")
ZERO = Decimal("0")

HOLIDAY_REASON = "Worked on holiday (double), double OT applied."


def format_hours(hours: Decimal) -> str:
    """Render hours for reason text: 2 -> "2", 1.5 -> "1.5", 1/3 -> "0.33"."""
    rounded = hours.quantize(Decimal("0.01"))
    text = format(rounded, "f")
    return text.rstrip("0").rstrip(".") if "." in text else text


class OvertimeResult(BaseModel):
    ot_hours: Decimal = ZERO
    normal_ot_hours: Decimal = ZERO
    double_ot_hours: Decimal = ZERO
    ot_amount: Decimal = ZERO
    reason_fragment: str = ""

    model_config = {"frozen": True}


def classify(
    hours: Decimal,
    holiday_kind: HolidayKind,
    rate: HourlyRate,
    *,
    threshold: Decimal = DEFAULT_THRESHOLD_HOURS,
    normal_cap: Decimal = DEFAULT_NORMAL_CAP_HOURS,
) -> OvertimeResult:
    """Split worked ``hours`` into normal and double OT and price them."""
    hours = Decimal(hours)
    if HolidayKind(holiday_kind) is HolidayKind.DOUBLE:
        return OvertimeResult(
            ot_hours=hours,
            double_ot_hours=hours,
            ot_amount=hours * rate.double,
            reason_fragment=HOLIDAY_REASON,
        )

    if hours <= threshold:
        return OvertimeResult()

    normal = min(hours - threshold, normal_cap)
    double = max(hours - (threshold + normal_cap), ZERO)
    fragment = f"Double OT for {format_hours(double)} hour(s)." if double > 0 else ""
    return OvertimeResult(
        ot_hours=normal + double,
        normal_ot_hours=normal,
        double_ot_hours=double,
        ot_amount=normal * rate.regular + double * rate.double,
        reason_fragment=fragment,
    )
