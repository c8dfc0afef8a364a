"""Type aliases used across Paysheet."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

AmountLike = Union[Decimal, int, float, str]
