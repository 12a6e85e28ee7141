"""Fund (FGTS) balance estimation and override.

The settlement's fund sub-record is only ever replaced through
``apply_fund_override``; every other field of the settlement is left as is.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Mapping

from pydantic import ValidationError

from rescisao.core.calendar import month_key, months_between, parse_month_key, shift_months
from rescisao.core.config import AppSettings
from rescisao.core.exceptions import InvalidInput
from rescisao.core.protocols import IFundEstimator
from rescisao.models.fund import AutomaticFundEstimate, ManualFundBalance, MonthlyFundHistory
from rescisao.models.rules import MinimumWageTable
from rescisao.models.settlement import FundSummary, SettlementResult
from rescisao.rules.minimum_wage import minimum_wage_on

logger = logging.getLogger(__name__)


def termination_contribution(settlement: SettlementResult, contribution_rate: float) -> float:
    """Deposit due on this termination's own fund-bearing lines."""
    return settlement.fund_contribution_base * contribution_rate


def estimate_fund(
    estimator: IFundEstimator,
    contribution: float,
    *,
    contribution_rate: float,
    penalty_rate: float,
) -> FundSummary:
    balance = estimator.estimate_balance(contribution, contribution_rate)
    return FundSummary.from_balance(balance, penalty_rate)


def automatic_estimator(monthly_salary: float, hire_date: date, termination_date: date) -> AutomaticFundEstimate:
    return AutomaticFundEstimate(
        monthly_salary=monthly_salary,
        months_of_service=max(0, months_between(hire_date, termination_date)),
    )


def manual_fund_balance(balance: float) -> ManualFundBalance:
    """Statement balance override.

    Raises:
        InvalidInput: balance not a positive finite amount.
    """
    try:
        return ManualFundBalance(balance=balance)
    except ValidationError as exc:
        raise InvalidInput(f"Invalid fund balance {balance!r}: {exc}") from exc


def apply_fund_override(
    settlement: SettlementResult,
    override: IFundEstimator,
    settings: AppSettings | None = None,
) -> SettlementResult:
    """Return a copy of ``settlement`` with its fund recomputed from ``override``.

    The termination contribution is recomputed from the settlement's current
    lines, so a prior general edit of those lines is honoured.
    """
    if settings is None:
        settings = AppSettings()
    if not isinstance(override, IFundEstimator):
        raise InvalidInput(f"Unsupported fund override {type(override).__name__}")

    contribution = termination_contribution(settlement, settings.fund.contribution_rate)
    fund = estimate_fund(
        override,
        contribution,
        contribution_rate=settings.fund.contribution_rate,
        penalty_rate=settings.fund.penalty_rate,
    )
    logger.debug(
        "Fund override %s: balance=%.2f penalty=%.2f",
        type(override).__name__, fund.balance, fund.penalty,
    )
    return settlement.model_copy(update={"fund": fund})


# ---------------------------------------------------------------------------
# Month-by-month history helpers
# ---------------------------------------------------------------------------

def fund_history_months(hire_date: date, termination_date: date) -> list[str]:
    """Month keys from the hire month up to, not including, the termination month."""
    last = shift_months(date(termination_date.year, termination_date.month, 1), -1)
    months: list[str] = []
    cursor = date(hire_date.year, hire_date.month, 1)
    while cursor <= last:
        months.append(month_key(cursor))
        cursor = shift_months(cursor, 1)
    return months


def build_fund_history(
    hire_date: date,
    termination_date: date,
    salaries: Mapping[str, float] | None = None,
) -> MonthlyFundHistory:
    """History covering every month of the span; months not supplied are zero.

    Raises:
        InvalidInput: for malformed keys, negative salaries, or months outside
            the span.
    """
    months = fund_history_months(hire_date, termination_date)
    supplied = dict(salaries or {})
    outside = [
        key for key in supplied
        if month_key(parse_month_key(key)) not in months
    ]
    if outside:
        raise InvalidInput(f"Months outside the employment span: {', '.join(sorted(outside))}")

    try:
        provided = MonthlyFundHistory(salaries=supplied).salaries
        return MonthlyFundHistory(salaries={m: provided.get(m, 0.0) for m in months})
    except ValidationError as exc:
        raise InvalidInput(f"Invalid fund history: {exc}") from exc


def fill_with_minimum_wage(
    months: list[str],
    table: MinimumWageTable | None = None,
) -> MonthlyFundHistory:
    """Default every month to the minimum wage in force on its first day."""
    return MonthlyFundHistory(
        salaries={m: minimum_wage_on(parse_month_key(m), table) for m in months}
    )
