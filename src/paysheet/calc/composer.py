"""Final salary composition."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import Literal

from paysheet.calc.aggregator import round_money
from paysheet.calc.validators import is_range, validate_amount
from paysheet.core.exceptions import AmbiguousRangeAmount, InvalidAmount
from paysheet.core.types import AmountLike
from paysheet.models.salary import PaymentStructureLine

logger = logging.getLogger(__name__)

RangePolicy = Literal["reject", "zero"]


def to_amount(name: str, value: AmountLike) -> Decimal:
    """Finite Decimal for a numeric input; NaN and Infinity are rejected."""
    try:
        number = Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidAmount(name, str(value), is_salary=False) from exc
    if not number.is_finite():
        raise InvalidAmount(name, str(value), is_salary=False)
    return number


def line_amount(
    item: PaymentStructureLine | AmountLike,
    range_policy: RangePolicy = "reject",
) -> Decimal:
    """Numeric value of one addition/deduction; blank counts as zero."""
    if isinstance(item, PaymentStructureLine):
        name, amount = item.name, item.amount
    else:
        name, amount = "", item

    if isinstance(amount, str):
        amount = amount.strip()
        if amount == "":
            return Decimal("0")
        if is_range(amount):
            if range_policy == "reject":
                raise AmbiguousRangeAmount(name, amount)
            logger.warning("Range amount %r on line %r counted as 0", amount, name)
            return Decimal("0")
        if not validate_amount(amount, is_salary=False):
            raise InvalidAmount(name, amount, is_salary=False)
        return Decimal(amount)

    number = to_amount(name, amount)
    if number < 0:
        raise InvalidAmount(name, str(amount), is_salary=False)
    return number


def compose(
    basic: AmountLike,
    overtime_amount: AmountLike,
    additions: Iterable[PaymentStructureLine | AmountLike],
    deductions: Iterable[PaymentStructureLine | AmountLike],
    no_pay_amount: AmountLike,
    *,
    advance_amount: AmountLike = 0,
    deduct_advance: bool = False,
    range_policy: RangePolicy = "reject",
) -> Decimal:
    """basic + overtime + additions - deductions - no-pay, rounded to cents.

    The advance is only subtracted when ``deduct_advance`` is set.
    """
    total = (
        to_amount("basic", basic)
        + to_amount("overtime", overtime_amount)
        + sum((line_amount(a, range_policy) for a in additions), Decimal("0"))
        - sum((line_amount(d, range_policy) for d in deductions), Decimal("0"))
        - to_amount("no pay", no_pay_amount)
    )
    if deduct_advance:
        total -= to_amount("advance", advance_amount)
    return round_money(total)
