"""Tests for payment structure amount predicates."""

from __future__ import annotations

import pytest

from paysheet.calc.validators import check_salary_structure, is_range, validate_amount
from paysheet.core.exceptions import InvalidAmount
from paysheet.models.salary import PaymentStructure, PaymentStructureLine


@pytest.mark.parametrize(
    "value",
    ["", "150", "150.00", "0", "100-200", "100-200.00", "100.50-200.75"],
)
def test_structure_amount_accepts(value):
    assert validate_amount(value, False) is True


@pytest.mark.parametrize(
    "value",
    ["150.5", "150.", ".50", "-100", "100-", "abc", "100-200-300", "1,000", " 150", "150\n", "١٥٠"],
)
def test_structure_amount_rejects(value):
    assert validate_amount(value, False) is False


@pytest.mark.parametrize("value", ["", "150", "0", "16000"])
def test_salary_amount_accepts(value):
    assert validate_amount(value, True) is True


@pytest.mark.parametrize("value", ["150.00", "100-200", "-1", "1.5"])
def test_salary_amount_rejects(value):
    assert validate_amount(value, True) is False


def test_check_salary_structure_rejects_range_line():
    structure = PaymentStructure(additions=[PaymentStructureLine(name="Bonus", amount="2000-5000")])
    with pytest.raises(InvalidAmount) as exc:
        check_salary_structure(structure)
    assert exc.value.name == "Bonus"
    assert exc.value.is_salary is True


def test_check_salary_structure_accepts_whole_amounts():
    structure = PaymentStructure(
        additions=[PaymentStructureLine(name="Travel", amount="1000")],
        deductions=[PaymentStructureLine(name="EPF 8%", amount="1280")],
    )
    check_salary_structure(structure)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("100-200", True), ("100.50-200.75", True), ("-500", False), ("100-", False), ("150", False), ("1-2-3", False)],
)
def test_is_range(value, expected):
    assert is_range(value) is expected
