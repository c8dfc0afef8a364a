"""Payment structure amount predicates.

A structure line amount is a string. In a payment structure it may be a
single value with optional two-digit cents, a "min-max" range, or blank. On a
generated salary only whole, non-negative numbers (or blank) are allowed.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from paysheet.core.exceptions import InvalidAmount

if TYPE_CHECKING:
    from paysheet.models.salary import PaymentStructure

_STRUCTURE_AMOUNT = re.compile(r"(\d+(\.\d{2})?|\d+(\.\d{2})?-\d+(\.\d{2})?)?", re.ASCII)
_SALARY_AMOUNT = re.compile(r"\d+", re.ASCII)
_RANGE_AMOUNT = re.compile(r"\d+(\.\d{2})?-\d+(\.\d{2})?", re.ASCII)


def validate_amount(value: str, is_salary: bool = False) -> bool:
    """Return True when ``value`` is an acceptable line amount."""
    if value == "":
        return True
    pattern = _SALARY_AMOUNT if is_salary else _STRUCTURE_AMOUNT
    return pattern.fullmatch(value) is not None


def is_range(value: str) -> bool:
    """True for a "min-max" structure amount such as ``2000-5000``."""
    return _RANGE_AMOUNT.fullmatch(value) is not None


def check_salary_structure(structure: PaymentStructure) -> None:
    """Raise InvalidAmount for the first line not usable on a salary."""
    for line in [*structure.additions, *structure.deductions]:
        if not validate_amount(line.amount, is_salary=True):
            raise InvalidAmount(line.name, line.amount, is_salary=True)
