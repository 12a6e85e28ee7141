"""Engine configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class NoticeConfig(BaseSettings):
    """Notice-period (aviso prévio) length rules."""

    model_config = {"env_prefix": "RESCISAO_NOTICE_"}

    base_days: int = 30
    days_per_year: int = 3
    max_days: int = 90
    year_length_days: float = 365.25


class ProrationConfig(BaseSettings):
    """Twelfths (avos) counting rules."""

    model_config = {"env_prefix": "RESCISAO_PRORATION_"}

    min_fragment_days: int = 15  # a partial month at or above this counts as a twelfth
    max_twelfths: int = Field(default=12, ge=1, le=12)


class FundConfig(BaseSettings):
    """Severance fund (FGTS) rates."""

    model_config = {"env_prefix": "RESCISAO_FUND_"}

    contribution_rate: float = 0.08
    penalty_rate: float = 0.40


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "RESCISAO_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    rules_version: str = "2025"  # minimum-wage and withholding table version

    notice: NoticeConfig = Field(default_factory=NoticeConfig)
    proration: ProrationConfig = Field(default_factory=ProrationConfig)
    fund: FundConfig = Field(default_factory=FundConfig)
