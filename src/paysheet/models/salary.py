"""Payment structure, employee pay profile and generated salary models."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from paysheet.calc.validators import validate_amount
from paysheet.core.exceptions import ProtectedLineError
from paysheet.models.attendance import ProcessedInterval, Shift, WorkingDayStatus

EPF_LINE_NAME = "EPF 8%"

WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


def _amount_to_str(value: Any) -> Any:
    """Numbers become "1000" or "1000.50"; strings pass through untouched."""
    if isinstance(value, bool) or value is None:
        return "" if value is None else value
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(str(value))
        if number == number.to_integral_value():
            return str(int(number))
        return format(number.quantize(Decimal("0.01")), "f")
    return value


class PaymentStructureLine(BaseModel):
    """A named addition or deduction."""

    name: str = Field(min_length=1)
    amount: str = ""
    affect_total_earnings: bool = False

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Any:
        return _amount_to_str(value)

    @field_validator("amount")
    @classmethod
    def _check_amount(cls, value: str) -> str:
        if not validate_amount(value, is_salary=False):
            raise ValueError(f"amount must be blank, 0.00 or 0.00-0.00, got {value!r}")
        return value


def _default_deductions() -> list[PaymentStructureLine]:
    return [PaymentStructureLine(name=EPF_LINE_NAME)]


class PaymentStructure(BaseModel):
    """Additions and deductions applied on top of basic pay.

    The EPF 8% deduction is always present; it is added when missing and
    cannot be removed.
    """

    additions: list[PaymentStructureLine] = Field(default_factory=list)
    deductions: list[PaymentStructureLine] = Field(default_factory=_default_deductions)

    @model_validator(mode="after")
    def _ensure_epf(self) -> PaymentStructure:
        if not any(line.name == EPF_LINE_NAME for line in self.deductions):
            self.deductions = [PaymentStructureLine(name=EPF_LINE_NAME), *self.deductions]
        return self

    def add_addition(self, line: PaymentStructureLine) -> PaymentStructure:
        return self.model_copy(update={"additions": [*self.additions, line]})

    def add_deduction(self, line: PaymentStructureLine) -> PaymentStructure:
        return self.model_copy(update={"deductions": [*self.deductions, line]})

    def remove_addition(self, name: str) -> PaymentStructure:
        return self.model_copy(
            update={"additions": [line for line in self.additions if line.name != name]}
        )

    def remove_deduction(self, name: str) -> PaymentStructure:
        if name == EPF_LINE_NAME:
            raise ProtectedLineError(name)
        return self.model_copy(
            update={"deductions": [line for line in self.deductions if line.name != name]}
        )


def _default_working_days() -> dict[str, WorkingDayStatus]:
    days = {day: WorkingDayStatus.FULL for day in WEEKDAYS}
    days["sat"] = WorkingDayStatus.HALF
    days["sun"] = WorkingDayStatus.OFF
    return days


class EmployeeProfile(BaseModel):
    """Pay inputs of one employee."""

    basic: Decimal = Field(ge=0)
    divide_by: Decimal | None = None  # falls back to OvertimeConfig.default_divide_by
    shifts: list[Shift] = Field(default_factory=list)
    working_days: dict[str, WorkingDayStatus] = Field(default_factory=_default_working_days)
    payment_structure: PaymentStructure = Field(default_factory=PaymentStructure)

    @field_validator("working_days")
    @classmethod
    def _check_days(cls, value: dict[str, WorkingDayStatus]) -> dict[str, WorkingDayStatus]:
        unknown = set(value) - set(WEEKDAYS)
        if unknown:
            raise ValueError(f"unknown weekdays: {sorted(unknown)}")
        return value

    def day_status(self, weekday: int) -> WorkingDayStatus:
        """Status for ``date.weekday()``; unset days are full days."""
        return self.working_days.get(WEEKDAYS[weekday], WorkingDayStatus.FULL)


class PayComponent(BaseModel):
    amount: Decimal = Decimal("0")
    reason: str = ""


class SalaryRecord(BaseModel):
    """A generated salary for one employee and period."""

    period: str
    basic: Decimal
    ot: PayComponent = Field(default_factory=PayComponent)
    no_pay: PayComponent = Field(default_factory=PayComponent)
    payment_structure: PaymentStructure = Field(default_factory=PaymentStructure)
    advance_amount: Decimal = Decimal("0")
    holiday_pay: Decimal = Decimal("0")
    final_salary: Decimal = Decimal("0")
    in_out: list[ProcessedInterval] = Field(default_factory=list)
