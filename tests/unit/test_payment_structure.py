"""Tests for payment structure and salary models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from paysheet.core.exceptions import ProtectedLineError
from paysheet.models.attendance import WorkingDayStatus
from paysheet.models.salary import (
    EPF_LINE_NAME,
    EmployeeProfile,
    PaymentStructure,
    PaymentStructureLine,
)


def test_default_structure_carries_epf():
    structure = PaymentStructure()
    assert [d.name for d in structure.deductions] == [EPF_LINE_NAME]
    assert structure.additions == []


def test_epf_restored_when_missing():
    structure = PaymentStructure(deductions=[PaymentStructureLine(name="Loan", amount="500")])
    assert [d.name for d in structure.deductions] == [EPF_LINE_NAME, "Loan"]


def test_epf_cannot_be_removed():
    with pytest.raises(ProtectedLineError):
        PaymentStructure().remove_deduction(EPF_LINE_NAME)


def test_other_lines_can_be_added_and_removed():
    structure = PaymentStructure().add_deduction(PaymentStructureLine(name="Loan", amount="500"))
    structure = structure.add_addition(PaymentStructureLine(name="Travel", amount="100-200"))
    assert [d.name for d in structure.deductions] == [EPF_LINE_NAME, "Loan"]
    trimmed = structure.remove_deduction("Loan").remove_addition("Travel")
    assert [d.name for d in trimmed.deductions] == [EPF_LINE_NAME]
    assert trimmed.additions == []
    assert len(structure.deductions) == 2


@pytest.mark.parametrize("name", ["", "   "])
def test_line_name_required(name):
    with pytest.raises(ValidationError):
        PaymentStructureLine(name=name, amount="100")


@pytest.mark.parametrize("amount", ["150.5", "abc", "-10"])
def test_line_amount_validated(amount):
    with pytest.raises(ValidationError):
        PaymentStructureLine(name="Bonus", amount=amount)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(1000, "1000"), (Decimal("1000.5"), "1000.50"), (1280.0, "1280"), (None, "")],
)
def test_numeric_amounts_normalized(raw, expected):
    assert PaymentStructureLine(name="X", amount=raw).amount == expected


def test_employee_working_days_default_and_lookup():
    employee = EmployeeProfile(basic=Decimal("16000"))
    assert employee.day_status(0) is WorkingDayStatus.FULL
    assert employee.day_status(5) is WorkingDayStatus.HALF
    assert employee.day_status(6) is WorkingDayStatus.OFF


def test_employee_unknown_weekday_rejected():
    with pytest.raises(ValidationError):
        EmployeeProfile(basic=Decimal("16000"), working_days={"funday": "off"})
