"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings

from paysheet.calc.rates import RateMode


class OvertimeConfig(BaseSettings):
    """Overtime rate basis and tier thresholds."""

    model_config = {"env_prefix": "PAYSHEET_OT_"}

    rate_mode: RateMode = RateMode.PROPORTIONAL_TO_BASIC
    flat_regular_rate: Decimal = Decimal("100")
    flat_double_rate: Decimal = Decimal("200")
    default_divide_by: Decimal = Decimal("240")

    # Normal hours per day before overtime starts, by working-day status
    full_day_hours: Decimal = Decimal("8")
    half_day_hours: Decimal = Decimal("6")
    off_day_hours: Decimal = Decimal("0")
    normal_ot_cap_hours: Decimal = Decimal("2")

    double_ot_holiday_categories: list[str] = ["public", "mercantile"]


class PunchConfig(BaseSettings):
    """Raw punch pairing windows, in minutes."""

    model_config = {"env_prefix": "PAYSHEET_PUNCH_"}

    start_tolerance_minutes: int = 180
    end_early_minutes: int = 180
    end_late_minutes: int = 360


class SalaryConfig(BaseSettings):
    """Final salary composition policy."""

    model_config = {"env_prefix": "PAYSHEET_SALARY_"}

    range_policy: Literal["reject", "zero"] = "reject"
    deduct_advance: bool = False


class ContributionConfig(BaseSettings):
    """Statutory fund contribution rates applied to total earnings."""

    model_config = {"env_prefix": "PAYSHEET_CONTRIB_"}

    epf_rate: Decimal = Decimal("0.20")
    etf_rate: Decimal = Decimal("0.03")


class PricingConfig(BaseSettings):
    """Subscription pricing per company."""

    model_config = {"env_prefix": "PAYSHEET_PRICING_"}

    base_price: Decimal = Decimal("3000")
    employees_per_block: int = 5
    price_per_block: Decimal = Decimal("500")
    discount_min_months: int = 3
    discount_factor: Decimal = Decimal("0.9")


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PAYSHEET_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    overtime: OvertimeConfig = OvertimeConfig()
    punch: PunchConfig = PunchConfig()
    salary: SalaryConfig = SalaryConfig()
    contribution: ContributionConfig = ContributionConfig()
    pricing: PricingConfig = PricingConfig()
