"""Output models: fund contributions and subscription price quotes."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class ContributionTotals(BaseModel):
    """EPF/ETF amounts payable for a company's salaries in one period."""

    total_earnings: Decimal = Decimal("0")
    epf_amount: Decimal = Decimal("0")
    etf_amount: Decimal = Decimal("0")


class PriceQuote(BaseModel):
    """Subscription price for a set of months."""

    months: int = 0
    price_per_month: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    final_total_price: Decimal = Decimal("0")

    @property
    def discount(self) -> Decimal:
        return self.total_price - self.final_total_price
