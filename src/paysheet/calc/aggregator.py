"""Fold a pay period's attendance intervals into overtime and no-pay totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel

from paysheet.calc.normalizer import normalize
from paysheet.calc.overtime import (
    DEFAULT_NORMAL_CAP_HOURS,
    ZERO,
    classify,
    format_hours,
)
from paysheet.calc.rates import RateConfig, resolve_config
from paysheet.core.config import OvertimeConfig
from paysheet.models.attendance import (
    AttendanceInterval,
    PayPeriodAggregate,
    ProcessedInterval,
    WorkingDayStatus,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


class OvertimePolicy(BaseModel):
    """Normal-hours threshold per working-day status plus the normal OT cap."""

    full_day_hours: Decimal = Decimal("8")
    half_day_hours: Decimal = Decimal("6")
    off_day_hours: Decimal = Decimal("0")
    normal_cap_hours: Decimal = DEFAULT_NORMAL_CAP_HOURS

    model_config = {"frozen": True}

    @classmethod
    def from_config(cls, config: OvertimeConfig) -> OvertimePolicy:
        return cls(
            full_day_hours=config.full_day_hours,
            half_day_hours=config.half_day_hours,
            off_day_hours=config.off_day_hours,
            normal_cap_hours=config.normal_ot_cap_hours,
        )

    def threshold(self, status: WorkingDayStatus) -> Decimal:
        if status is WorkingDayStatus.HALF:
            return self.half_day_hours
        if status is WorkingDayStatus.OFF:
            return self.off_day_hours
        return self.full_day_hours


def aggregate(
    intervals: Iterable[Mapping[str, Any] | AttendanceInterval],
    rate_config: RateConfig,
    *,
    policy: OvertimePolicy | None = None,
) -> PayPeriodAggregate:
    """Classify every interval in input order and total the period.

    Per-interval amounts keep full precision; only the period totals are
    rounded to cents. Any invalid interval aborts the whole call.
    """
    if policy is None:
        policy = OvertimePolicy()
    rate = resolve_config(rate_config)

    processed: list[ProcessedInterval] = []
    fragments: list[str] = []
    overtime_total = ZERO
    normal_hours_total = ZERO
    no_pay_total = ZERO
    no_pay_records = 0

    for raw in intervals:
        interval = normalize(raw)
        result = classify(
            interval.working_hours,
            interval.holiday,
            rate,
            threshold=policy.threshold(interval.day_status),
            normal_cap=policy.normal_cap_hours,
        )
        processed.append(
            ProcessedInterval(
                **interval.model_dump(),
                ot_hours=result.ot_hours,
                ot_amount=result.ot_amount,
            )
        )
        if result.reason_fragment:
            fragments.append(result.reason_fragment)
        overtime_total += result.ot_amount
        normal_hours_total += result.normal_ot_hours
        if interval.no_pay:
            no_pay_total += interval.no_pay
            no_pay_records += 1

    if normal_hours_total > 0:
        fragments.append(f"Normal OT for a total of {format_hours(normal_hours_total)} hour(s).")

    no_pay_reason = f"No pay for {no_pay_records} record(s)." if no_pay_records else ""

    logger.debug(
        "Aggregated %d interval(s): ot=%s no_pay=%s", len(processed), overtime_total, no_pay_total
    )
    return PayPeriodAggregate(
        overtime_amount=round_money(overtime_total),
        overtime_reason=" ".join(fragments).strip(),
        no_pay_amount=round_money(no_pay_total),
        no_pay_reason=no_pay_reason,
        intervals=processed,
    )
