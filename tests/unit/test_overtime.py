"""Tests for overtime tier classification."""

from __future__ import annotations

from decimal import Decimal

import pytest

from paysheet.calc.overtime import HOLIDAY_REASON, classify, format_hours
from paysheet.calc.rates import HourlyRate
from paysheet.models.attendance import HolidayKind

FLAT = HourlyRate(regular=Decimal("100"), double=Decimal("200"))


@pytest.mark.parametrize("hours", ["0.5", "7.99", "8"])
def test_no_overtime_up_to_eight_hours(hours):
    result = classify(Decimal(hours), HolidayKind.NONE, FLAT)
    assert result.ot_hours == 0
    assert result.ot_amount == 0
    assert result.reason_fragment == ""


@pytest.mark.parametrize("hours", ["8.25", "9", "10"])
def test_regular_overtime_between_eight_and_ten(hours):
    hours = Decimal(hours)
    result = classify(hours, HolidayKind.NONE, FLAT)
    assert result.ot_hours == hours - 8
    assert result.normal_ot_hours == hours - 8
    assert result.double_ot_hours == 0
    assert result.ot_amount == (hours - 8) * 100
    assert result.reason_fragment == ""


def test_normal_overtime_capped_past_ten_hours():
    result = classify(Decimal("12"), HolidayKind.NONE, FLAT)
    assert result.normal_ot_hours == 2
    assert result.double_ot_hours == 2
    assert result.ot_amount == Decimal("600")
    assert result.reason_fragment == "Double OT for 2 hour(s)."


@pytest.mark.parametrize("hours", ["3", "8", "11"])
def test_double_holiday_makes_all_hours_double(hours):
    hours = Decimal(hours)
    result = classify(hours, HolidayKind.DOUBLE, FLAT)
    assert result.ot_hours == hours
    assert result.double_ot_hours == hours
    assert result.ot_amount == hours * 200
    assert result.reason_fragment == HOLIDAY_REASON


def test_custom_threshold_for_half_day():
    result = classify(Decimal("7"), HolidayKind.NONE, FLAT, threshold=Decimal("6"))
    assert result.ot_hours == 1
    assert result.ot_amount == Decimal("100")


def test_format_hours():
    assert format_hours(Decimal("2")) == "2"
    assert format_hours(Decimal("1.50")) == "1.5"
    assert format_hours(Decimal(1) / Decimal(3)) == "0.33"
