"""SalaryService: punches and intervals through to a generated salary.

Pipeline per employee and period:

1. pair raw punches into intervals against the employee's shifts
2. tag each interval with its working-day status and declared holiday
3. aggregate overtime / no-pay for the period
4. compose the final salary with the payment structure
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from paysheet.calc.aggregator import OvertimePolicy, aggregate
from paysheet.calc.composer import compose
from paysheet.calc.normalizer import parse_interval
from paysheet.calc.punches import pair_punches
from paysheet.calc.rates import RateConfig, RateMode
from paysheet.calc.validators import check_salary_structure
from paysheet.core.config import AppSettings
from paysheet.core.protocols import IHolidayCalendar
from paysheet.models.attendance import AttendanceInterval, HolidayKind, PayPeriodAggregate
from paysheet.models.calendar import Holiday
from paysheet.models.salary import EmployeeProfile, PayComponent, SalaryRecord

logger = logging.getLogger(__name__)


class SalaryService:
    """Attendance-driven salary generation for one company's employees.

    Holds no per-request state: employee, period and attendance are passed to
    every call.
    """

    def __init__(self, *, settings: AppSettings, holidays: IHolidayCalendar) -> None:
        self._settings = settings
        self._holidays = holidays
        self._policy = OvertimePolicy.from_config(settings.overtime)

    def rate_config(self, employee: EmployeeProfile, mode: RateMode | None = None) -> RateConfig:
        ot = self._settings.overtime
        divide_by = employee.divide_by if employee.divide_by is not None else ot.default_divide_by
        return RateConfig(
            mode=mode or ot.rate_mode,
            basic=employee.basic,
            divide_by=divide_by,
            flat_regular=ot.flat_regular_rate,
            flat_double=ot.flat_double_rate,
        )

    def build_intervals(
        self,
        employee: EmployeeProfile,
        punches: Iterable[datetime],
    ) -> list[AttendanceInterval]:
        """Pair raw punches and tag them with day status and holidays."""
        punch = self._settings.punch
        paired = pair_punches(
            punches,
            employee.shifts,
            start_tolerance=punch.start_tolerance_minutes,
            end_early=punch.end_early_minutes,
            end_late=punch.end_late_minutes,
        )
        return self.tag_intervals(employee, paired)

    def tag_intervals(
        self,
        employee: EmployeeProfile,
        intervals: Iterable[Mapping[str, Any] | AttendanceInterval],
    ) -> list[AttendanceInterval]:
        """Attach working-day status and holiday details from the calendar."""
        parsed = [parse_interval(i) for i in intervals]
        if not parsed:
            return []
        start = min(i.clock_in for i in parsed).date()
        end = max(i.clock_in for i in parsed).date()
        by_date = {h.date: h for h in self._holidays.get_holidays(start, end)}

        tagged = []
        for interval in parsed:
            day = interval.clock_in.date()
            update: dict[str, Any] = {"day_status": employee.day_status(day.weekday())}
            holiday = by_date.get(day)
            if holiday is not None:
                update.update(self._holiday_fields(interval, holiday))
            tagged.append(interval.model_copy(update=update))
        return tagged

    def _holiday_fields(self, interval: AttendanceInterval, holiday: Holiday) -> dict[str, Any]:
        double_categories = set(self._settings.overtime.double_ot_holiday_categories)
        fields: dict[str, Any] = {"holiday_label": holiday.label}
        if double_categories & set(holiday.categories.names()):
            fields["holiday"] = HolidayKind.DOUBLE
        if holiday.summary and holiday.summary not in interval.description:
            fields["description"] = f"{interval.description} {holiday.summary}".strip()
        return fields

    def process_period(
        self,
        employee: EmployeeProfile,
        intervals: Iterable[Mapping[str, Any] | AttendanceInterval],
        *,
        mode: RateMode | None = None,
    ) -> PayPeriodAggregate:
        return aggregate(intervals, self.rate_config(employee, mode), policy=self._policy)

    def generate_salary(
        self,
        employee: EmployeeProfile,
        period: str,
        intervals: Iterable[Mapping[str, Any] | AttendanceInterval],
        *,
        advance_amount: Decimal = Decimal("0"),
        holiday_pay: Decimal = Decimal("0"),
        mode: RateMode | None = None,
    ) -> SalaryRecord:
        """Tag, aggregate and compose a salary for ``period``."""
        structure = employee.payment_structure
        check_salary_structure(structure)

        totals = self.process_period(employee, self.tag_intervals(employee, intervals), mode=mode)
        salary_cfg = self._settings.salary
        final = compose(
            employee.basic,
            totals.overtime_amount,
            structure.additions,
            structure.deductions,
            totals.no_pay_amount,
            advance_amount=advance_amount,
            deduct_advance=salary_cfg.deduct_advance,
            range_policy=salary_cfg.range_policy,
        )
        logger.info(
            "Generated salary for period %s: basic=%s ot=%s no_pay=%s final=%s",
            period, employee.basic, totals.overtime_amount, totals.no_pay_amount, final,
        )
        return SalaryRecord(
            period=period,
            basic=employee.basic,
            ot=PayComponent(amount=totals.overtime_amount, reason=totals.overtime_reason),
            no_pay=PayComponent(amount=totals.no_pay_amount, reason=totals.no_pay_reason),
            payment_structure=structure,
            advance_amount=advance_amount,
            holiday_pay=holiday_pay,
            final_salary=final,
            in_out=totals.intervals,
        )
