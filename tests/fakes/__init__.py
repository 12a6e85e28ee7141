"""Shared test doubles: contract and settlement factories."""

from __future__ import annotations

from typing import Any

from rescisao.models.contract import ContractInputs, NoticeModality
from rescisao.models.settlement import SettlementResult


def make_contract(**overrides: Any) -> ContractInputs:
    """Two-year contract used by the reference scenario, with overrides."""
    data: dict[str, Any] = {
        "base_salary": 3000.0,
        "allowance": 0.0,
        "hire_date": "2023-01-01",
        "termination_date": "2025-03-15",
        "notice": NoticeModality.WORKED,
        "overdue_vacation_periods": 0,
    }
    data.update(overrides)
    return ContractInputs(**data)


def make_settlement(**overrides: Any) -> SettlementResult:
    return SettlementResult(**overrides)


__all__ = ["make_contract", "make_settlement"]
