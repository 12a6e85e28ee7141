"""Caller-held settlement state between a calculation and its later edits.

The workbench keeps "no calculation yet" (EMPTY) apart from "last attempt
rejected" (REJECTED). A rejected attempt never discards the previously
accepted settlement. Whichever edit is applied last wins.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Mapping, Optional

from rescisao.core.config import AppSettings
from rescisao.core.exceptions import RescisaoError, SettlementNotCalculatedError
from rescisao.core.protocols import IFundEstimator
from rescisao.engine.composer import compose_settlement, edit_settlement, validate_contract
from rescisao.engine.fund import (
    apply_fund_override,
    build_fund_history,
    fill_with_minimum_wage,
    manual_fund_balance,
)
from rescisao.models.contract import ContractInputs
from rescisao.models.fund import ManualFundBalance, MonthlyFundHistory
from rescisao.models.settlement import SettlementResult
from rescisao.rules.registry import get_minimum_wage_table

logger = logging.getLogger(__name__)


class WorkbenchStatus(StrEnum):
    EMPTY = "EMPTY"
    CALCULATED = "CALCULATED"
    REJECTED = "REJECTED"


class SettlementWorkbench:
    """Holds the current contract and settlement for one interactive session.

    Settings are injected at construction time and shared by every operation.
    """

    def __init__(self, *, settings: AppSettings) -> None:
        self._settings = settings
        self._contract: Optional[ContractInputs] = None
        self._settlement: Optional[SettlementResult] = None
        self._last_error: Optional[RescisaoError] = None
        self._status = WorkbenchStatus.EMPTY

    @property
    def status(self) -> WorkbenchStatus:
        return self._status

    @property
    def contract(self) -> Optional[ContractInputs]:
        return self._contract

    @property
    def settlement(self) -> Optional[SettlementResult]:
        return self._settlement

    @property
    def last_error(self) -> Optional[RescisaoError]:
        return self._last_error

    def calculate(self, data: Mapping[str, Any] | ContractInputs) -> SettlementResult:
        """Compute a fresh settlement, replacing the current one on success.

        On failure the previous contract and settlement are kept as they were.
        """
        try:
            contract = validate_contract(data)
            settlement = compose_settlement(contract, self._settings)
        except RescisaoError as exc:
            logger.warning("Settlement calculation rejected: %s", exc)
            self._last_error = exc
            self._status = WorkbenchStatus.REJECTED
            raise

        self._contract, self._settlement = contract, settlement
        self._last_error = None
        self._status = WorkbenchStatus.CALCULATED
        return settlement

    def edit(self, changes: Mapping[str, Any]) -> SettlementResult:
        self._settlement = edit_settlement(self._require_settlement(), changes, self._settings)
        return self._settlement

    def override_fund(self, override: IFundEstimator) -> SettlementResult:
        self._settlement = apply_fund_override(self._require_settlement(), override, self._settings)
        return self._settlement

    def fund_history(self, salaries: Mapping[str, float] | None = None) -> MonthlyFundHistory:
        """Month-by-month history for the current contract, zero where not supplied."""
        contract = self._require_contract()
        return build_fund_history(contract.hire_date, contract.termination_date, salaries)

    def manual_fund_balance(self, balance: float) -> ManualFundBalance:
        """Statement balance override, validated as a positive finite amount."""
        return manual_fund_balance(balance)

    def minimum_wage_history(self) -> MonthlyFundHistory:
        """History for the current contract with every month at the minimum wage."""
        months = self.fund_history().months
        return fill_with_minimum_wage(months, get_minimum_wage_table(self._settings.rules_version))

    def _require_settlement(self) -> SettlementResult:
        if self._settlement is None:
            raise SettlementNotCalculatedError("Calculate a settlement before editing it")
        return self._settlement

    def _require_contract(self) -> ContractInputs:
        if self._contract is None:
            raise SettlementNotCalculatedError("Calculate a settlement before building fund history")
        return self._contract
