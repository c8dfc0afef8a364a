"""EPF/ETF contributions from generated salaries."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from paysheet.calc.aggregator import round_money
from paysheet.calc.composer import line_amount
from paysheet.core.config import ContributionConfig
from paysheet.models.outputs import ContributionTotals
from paysheet.models.salary import SalaryRecord


def total_earnings(salary: SalaryRecord) -> Decimal:
    """Basic plus holiday pay, adjusted by lines flagged to affect total earnings."""
    total = salary.basic + salary.holiday_pay
    for line in salary.payment_structure.additions:
        if line.affect_total_earnings:
            total += line_amount(line)
    for line in salary.payment_structure.deductions:
        if line.affect_total_earnings:
            total -= line_amount(line)
    return total


def generate_payment(
    salaries: Iterable[SalaryRecord],
    config: ContributionConfig | None = None,
) -> ContributionTotals:
    if config is None:
        config = ContributionConfig()
    earnings = sum((total_earnings(s) for s in salaries), Decimal("0"))
    return ContributionTotals(
        total_earnings=round_money(earnings),
        epf_amount=round_money(earnings * config.epf_rate),
        etf_amount=round_money(earnings * config.etf_rate),
    )
