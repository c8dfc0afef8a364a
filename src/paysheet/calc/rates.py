"""Hourly overtime rate resolution."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel

from paysheet.core.exceptions import InvalidRateConfig


class RateMode(StrEnum):
    """How overtime is priced.

    FLAT charges a fixed amount per OT hour. PROPORTIONAL_TO_BASIC derives the
    hourly rate from the employee's basic pay and divide-by setting.
    """

    FLAT = "flat"
    PROPORTIONAL_TO_BASIC = "proportional_to_basic"


class HourlyRate(BaseModel):
    regular: Decimal
    double: Decimal

    model_config = {"frozen": True}


class RateConfig(BaseModel):
    """Rate inputs for one employee pay period."""

    mode: RateMode
    basic: Decimal = Decimal("0")
    divide_by: Decimal = Decimal("240")
    flat_regular: Decimal = Decimal("100")
    flat_double: Decimal = Decimal("200")

    model_config = {"frozen": True}


def resolve(
    mode: RateMode,
    basic: Decimal,
    divide_by: Decimal,
    *,
    flat_regular: Decimal = Decimal("100"),
    flat_double: Decimal = Decimal("200"),
) -> HourlyRate:
    """Return the regular and double OT hourly rates for ``mode``."""
    if RateMode(mode) is RateMode.FLAT:
        return HourlyRate(regular=Decimal(flat_regular), double=Decimal(flat_double))
    if divide_by is None or Decimal(divide_by) <= 0:
        raise InvalidRateConfig(divide_by)
    basic = Decimal(basic)
    divide_by = Decimal(divide_by)
    return HourlyRate(regular=basic / divide_by, double=2 * basic / divide_by)


def resolve_config(config: RateConfig) -> HourlyRate:
    return resolve(
        config.mode,
        config.basic,
        config.divide_by,
        flat_regular=config.flat_regular,
        flat_double=config.flat_double,
    )
