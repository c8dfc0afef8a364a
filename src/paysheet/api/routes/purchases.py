"""Subscription price endpoint."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Query, Request

from paysheet.calc.pricing import monthly_price, total_price
from paysheet.models.outputs import PriceQuote

router = APIRouter(tags=["purchases"])


@router.get("/price")
async def price(
    request: Request,
    active_employees: int = Query(0, ge=0),
    months: str = "",
    monthly_price_override: Optional[Decimal] = None,
) -> PriceQuote:
    """Quote for space-separated ``months`` (e.g. "2024-01 2024-02")."""
    config = request.app.state.settings.pricing
    per_month = monthly_price(active_employees, monthly_price_override, config)
    return total_price(per_month, months.split(), config)
