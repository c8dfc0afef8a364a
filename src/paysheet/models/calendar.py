"""Holiday calendar models."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class HolidayCategories(BaseModel):
    public: bool = False
    bank: bool = False
    mercantile: bool = False

    def names(self) -> list[str]:
        """Category names that are set, in display order."""
        flags = (("public", self.public), ("mercantile", self.mercantile), ("bank", self.bank))
        return [name for name, flag in flags if flag]


class Holiday(BaseModel):
    """A declared holiday on a single date."""

    date: dt.date
    categories: HolidayCategories = Field(default_factory=HolidayCategories)
    summary: str = ""

    model_config = {"str_strip_whitespace": True}

    @property
    def label(self) -> str:
        return " ".join(name.capitalize() for name in self.categories.names())
