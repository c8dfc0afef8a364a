"""Paysheet exception hierarchy."""

from __future__ import annotations


class PaysheetError(Exception):
    """Base exception for all Paysheet errors."""


class InvalidInterval(PaysheetError):
    """Attendance interval is malformed or inverted."""

    def __init__(self, message: str, clock_in: object = None, clock_out: object = None) -> None:
        self.clock_in = clock_in
        self.clock_out = clock_out
        super().__init__(message)


class InvalidRateConfig(PaysheetError):
    """Hourly rate cannot be derived from the given configuration."""

    def __init__(self, divide_by: object) -> None:
        self.divide_by = divide_by
        super().__init__(f"divide_by must be greater than 0, got {divide_by!r}")


class AmbiguousRangeAmount(PaysheetError):
    """A range-valued line amount reached salary arithmetic without a resolution rule."""

    def __init__(self, name: str, amount: str) -> None:
        self.name = name
        self.amount = amount
        super().__init__(f"Line {name!r} has range amount {amount!r}; pick a single value first")


class InvalidAmount(PaysheetError):
    """Payment structure line amount fails the amount pattern."""

    def __init__(self, name: str, amount: str, is_salary: bool) -> None:
        self.name = name
        self.amount = amount
        self.is_salary = is_salary
        context = "salary" if is_salary else "payment structure"
        super().__init__(f"Invalid {context} amount for {name!r}: {amount!r}")


class ProtectedLineError(PaysheetError):
    """Attempt to remove a built-in payment structure line."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} deduction cannot be removed")
