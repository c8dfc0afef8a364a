"""EPF/ETF payment generation endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from paysheet.calc.contributions import generate_payment
from paysheet.models.outputs import ContributionTotals
from paysheet.models.salary import SalaryRecord

router = APIRouter(tags=["payments"])


class PaymentRequest(BaseModel):
    salaries: list[SalaryRecord] = Field(default_factory=list)


@router.post("/generate")
async def generate(body: PaymentRequest, request: Request) -> ContributionTotals:
    """Fund contributions due for the salaries of one period."""
    return generate_payment(body.salaries, request.app.state.settings.contribution)
