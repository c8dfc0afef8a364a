"""Salary calculation endpoints consumed by the admin panel."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from paysheet.calc.aggregator import aggregate
from paysheet.calc.composer import compose
from paysheet.calc.rates import RateConfig, RateMode
from paysheet.calc.validators import validate_amount
from paysheet.models.attendance import PayPeriodAggregate
from paysheet.models.salary import EmployeeProfile, PaymentStructureLine, SalaryRecord

router = APIRouter(tags=["salaries"])
structure_router = APIRouter(tags=["payment-structure"])


class AggregateRequest(BaseModel):
    intervals: list[dict[str, Any]] = Field(default_factory=list)
    rate: RateConfig


class ComposeRequest(BaseModel):
    basic: Decimal
    overtime_amount: Decimal = Decimal("0")
    additions: list[PaymentStructureLine] = Field(default_factory=list)
    deductions: list[PaymentStructureLine] = Field(default_factory=list)
    no_pay_amount: Decimal = Decimal("0")
    advance_amount: Decimal = Decimal("0")


class ComposeResponse(BaseModel):
    final_salary: Decimal


class GenerateRequest(BaseModel):
    employee: EmployeeProfile
    period: str
    intervals: list[dict[str, Any]] = Field(default_factory=list)
    advance_amount: Decimal = Decimal("0")
    holiday_pay: Decimal = Decimal("0")
    mode: Optional[RateMode] = None


class AmountCheck(BaseModel):
    value: str
    is_salary: bool = False


@router.post("/aggregate")
async def aggregate_period(body: AggregateRequest) -> PayPeriodAggregate:
    """Overtime and no-pay totals for a period's in/out records."""
    return aggregate(body.intervals, body.rate)


@router.post("/compose")
async def compose_salary(body: ComposeRequest, request: Request) -> ComposeResponse:
    """Recompute the final salary from edited salary fields."""
    salary_cfg = request.app.state.settings.salary
    final = compose(
        body.basic,
        body.overtime_amount,
        body.additions,
        body.deductions,
        body.no_pay_amount,
        advance_amount=body.advance_amount,
        deduct_advance=salary_cfg.deduct_advance,
        range_policy=salary_cfg.range_policy,
    )
    return ComposeResponse(final_salary=final)


@router.post("/generate")
async def generate_salary(body: GenerateRequest, request: Request) -> SalaryRecord:
    service = request.app.state.salary_service
    return service.generate_salary(
        body.employee,
        body.period,
        body.intervals,
        advance_amount=body.advance_amount,
        holiday_pay=body.holiday_pay,
        mode=body.mode,
    )


@structure_router.post("/validate")
async def validate_line_amount(body: AmountCheck) -> dict[str, bool]:
    return {"valid": validate_amount(body.value, body.is_salary)}
