"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from decimal import Decimal

from paysheet.calc.rates import RateMode
from paysheet.core.config import AppSettings, OvertimeConfig, SalaryConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.overtime.rate_mode == RateMode.PROPORTIONAL_TO_BASIC
    assert settings.salary.range_policy == "reject"


def test_overtime_config_defaults():
    config = OvertimeConfig()
    assert config.default_divide_by == Decimal("240")
    assert config.full_day_hours == Decimal("8")
    assert config.normal_ot_cap_hours == Decimal("2")
    assert config.flat_regular_rate == Decimal("100")
    assert config.flat_double_rate == Decimal("200")


def test_env_override(monkeypatch):
    monkeypatch.setenv("PAYSHEET_OT_RATE_MODE", "flat")
    monkeypatch.setenv("PAYSHEET_SALARY_DEDUCT_ADVANCE", "true")
    assert OvertimeConfig().rate_mode == RateMode.FLAT
    assert SalaryConfig().deduct_advance is True
