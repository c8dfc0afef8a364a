"""Subscription pricing for companies."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from paysheet.calc.aggregator import round_money
from paysheet.core.config import PricingConfig
from paysheet.models.outputs import PriceQuote


def monthly_price(
    active_employees: int,
    override: Decimal | None = None,
    config: PricingConfig | None = None,
) -> Decimal:
    """Base price covers the first block of employees; each further block adds a fixed step."""
    if override is not None:
        return Decimal(override)
    if config is None:
        config = PricingConfig()
    blocks = max(math.ceil(active_employees / config.employees_per_block), 1)
    return config.base_price + (blocks - 1) * config.price_per_block


def total_price(
    price_per_month: Decimal,
    months: Sequence[str],
    config: PricingConfig | None = None,
) -> PriceQuote:
    if config is None:
        config = PricingConfig()
    count = len(months)
    total = Decimal(price_per_month) * count
    final = total * config.discount_factor if count >= config.discount_min_months else total
    return PriceQuote(
        months=count,
        price_per_month=Decimal(price_per_month),
        total_price=round_money(total),
        final_total_price=round_money(final),
    )
