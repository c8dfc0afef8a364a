"""Tests for subscription pricing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from paysheet.calc.pricing import monthly_price, total_price


@pytest.mark.parametrize(
    ("active", "expected"),
    [(0, "3000"), (1, "3000"), (5, "3000"), (6, "3500"), (12, "4000")],
)
def test_monthly_price_by_employee_blocks(active, expected):
    assert monthly_price(active) == Decimal(expected)


def test_override_wins():
    assert monthly_price(40, override=Decimal("2500")) == Decimal("2500")


def test_no_discount_below_three_months():
    quote = total_price(Decimal("3000"), ["2024-01", "2024-02"])
    assert quote.total_price == quote.final_total_price == Decimal("6000.00")


def test_discount_from_three_months():
    quote = total_price(Decimal("3500"), ["2024-01", "2024-02", "2024-03"])
    assert quote.months == 3
    assert quote.total_price == Decimal("10500.00")
    assert quote.final_total_price == Decimal("9450.00")
    assert quote.discount == Decimal("1050.00")
