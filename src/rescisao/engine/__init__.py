"""Settlement engine entry points."""

from __future__ import annotations

from rescisao.core.config import AppSettings
from rescisao.engine.composer import compose_settlement, edit_settlement
from rescisao.engine.fund import (
    apply_fund_override,
    build_fund_history,
    fill_with_minimum_wage,
    manual_fund_balance,
)
from rescisao.engine.workbench import SettlementWorkbench


def create_workbench(settings: AppSettings | None = None) -> SettlementWorkbench:
    """Create a workbench wired with application settings."""
    if settings is None:
        settings = AppSettings()
    return SettlementWorkbench(settings=settings)


__all__ = [
    "SettlementWorkbench",
    "apply_fund_override",
    "build_fund_history",
    "compose_settlement",
    "create_workbench",
    "edit_settlement",
    "fill_with_minimum_wage",
    "manual_fund_balance",
]
