"""Settlement composer: turns contract inputs into a full SettlementResult.

Validation happens once on entry. After that the pipeline is plain arithmetic
and cannot fail. Only the withholding is rounded to cents; every other amount
is kept at full precision for the caller to format.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from rescisao.core.config import AppSettings
from rescisao.core.exceptions import InvalidDateRange, InvalidInput
from rescisao.engine.fund import automatic_estimator, estimate_fund, termination_contribution
from rescisao.engine.notice import notice_terms
from rescisao.engine.proration import (
    acquisition_period_start,
    projected_delta,
    thirteenth_period_start,
    thirteenth_twelfths,
    vacation_twelfths,
)
from rescisao.models.contract import ContractInputs, NoticeModality, parse_contract
from rescisao.models.settlement import PAYABLE_FIELDS, FundSummary, SettlementResult
from rescisao.rules.registry import get_withholding_table
from rescisao.rules.withholding import withholding

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30
VACATION_BONUS_FRACTION = 1 / 3

EDITABLE_FIELDS: frozenset[str] = frozenset(
    PAYABLE_FIELDS + ("withholding_base", "withholding", "fund_balance", "fund_penalty")
)


def validate_contract(data: Mapping[str, Any] | ContractInputs) -> ContractInputs:
    """Parse inputs and check the date range.

    Raises:
        InvalidInput: malformed dates or amounts.
        InvalidDateRange: termination before hire.
    """
    contract = parse_contract(data)
    if contract.termination_date < contract.hire_date:
        raise InvalidDateRange(contract.hire_date, contract.termination_date)
    return contract


def compose_settlement(
    data: Mapping[str, Any] | ContractInputs,
    settings: AppSettings | None = None,
) -> SettlementResult:
    """Compute every settlement line for a termination without cause."""
    if settings is None:
        settings = AppSettings()
    contract = validate_contract(data)
    proration = settings.proration
    hire, termination = contract.hire_date, contract.termination_date

    salary_total = contract.salary_total
    daily = salary_total / DAYS_PER_MONTH
    monthly_twelfth = salary_total / 12
    indemnified = contract.notice == NoticeModality.INDEMNIFIED

    # 1. Salary balance
    days_worked = termination.day
    salary_balance = daily * min(days_worked, DAYS_PER_MONTH)

    # 2. Notice
    notice = notice_terms(contract, settings.notice)
    notice_pay = daily * notice.paid_days

    # 3. 13th salary
    start_13 = thirteenth_period_start(hire, termination)
    twelfths_13 = thirteenth_twelfths(
        start_13, termination,
        min_days=proration.min_fragment_days, max_twelfths=proration.max_twelfths,
    )
    extra_13 = 0
    if indemnified:
        extra_13 = projected_delta(twelfths_13, thirteenth_twelfths(
            start_13, notice.projected_date,
            min_days=proration.min_fragment_days, max_twelfths=proration.max_twelfths,
        ))

    # 4. Vacation
    overdue_vacation = contract.overdue_vacation_periods * salary_total
    acquisition_start = acquisition_period_start(hire, termination)
    vacation = vacation_twelfths(
        acquisition_start, termination,
        min_days=proration.min_fragment_days, max_twelfths=proration.max_twelfths,
    )
    extra_vacation = 0
    if indemnified:
        extra_vacation = projected_delta(vacation, vacation_twelfths(
            acquisition_start, notice.projected_date,
            min_days=proration.min_fragment_days, max_twelfths=proration.max_twelfths,
        ))

    thirteenth_salary = monthly_twelfth * twelfths_13
    proportional_vacation = monthly_twelfth * vacation
    indemnified_vacation = monthly_twelfth * extra_vacation

    # 5. Withholding: notice and vacation stay out of the base
    withholding_base = salary_balance + thirteenth_salary

    result = SettlementResult(
        days_worked_in_month=days_worked,
        notice_days=notice.days,
        projected_termination_date=notice.projected_date,
        salary_balance=salary_balance,
        notice_pay=notice_pay,
        thirteenth_twelfths=twelfths_13,
        thirteenth_salary=thirteenth_salary,
        thirteenth_indemnified_twelfths=extra_13,
        thirteenth_indemnified=monthly_twelfth * extra_13,
        vacation_twelfths=vacation,
        overdue_vacation=overdue_vacation,
        overdue_vacation_bonus=overdue_vacation * VACATION_BONUS_FRACTION,
        proportional_vacation=proportional_vacation,
        proportional_vacation_bonus=proportional_vacation * VACATION_BONUS_FRACTION,
        vacation_indemnified_twelfths=extra_vacation,
        indemnified_vacation=indemnified_vacation,
        indemnified_vacation_bonus=indemnified_vacation * VACATION_BONUS_FRACTION,
        withholding_base=withholding_base,
        withholding=withholding(withholding_base, get_withholding_table(settings.rules_version)),
    )

    # 6. Fund: automatic estimate until an override replaces it
    contribution = termination_contribution(result, settings.fund.contribution_rate)
    fund = estimate_fund(
        automatic_estimator(salary_total, hire, termination),
        contribution,
        contribution_rate=settings.fund.contribution_rate,
        penalty_rate=settings.fund.penalty_rate,
    )
    result = result.model_copy(update={"fund": fund})

    logger.debug(
        "Composed settlement hire=%s termination=%s notice=%s net=%.2f fund=%.2f",
        hire, termination, contract.notice, result.net_settlement, fund.total,
    )
    return result


def edit_settlement(
    settlement: SettlementResult,
    changes: Mapping[str, Any],
    settings: AppSettings | None = None,
) -> SettlementResult:
    """Return a user-edited copy of ``settlement`` with totals derived again.

    Editing ``fund_balance`` without ``fund_penalty`` resets the penalty to the
    configured rate over the new balance.

    Raises:
        InvalidInput: unknown field, or a non-numeric or non-finite value.
    """
    if settings is None:
        settings = AppSettings()
    unknown = sorted(set(changes) - EDITABLE_FIELDS)
    if unknown:
        raise InvalidInput(f"Fields not editable: {', '.join(unknown)}")

    values: dict[str, float] = {}
    for name, raw in changes.items():
        if isinstance(raw, bool):
            raise InvalidInput(f"Value for {name} must be numeric, got {raw!r}")
        try:
            values[name] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Value for {name} must be numeric, got {raw!r}") from exc
        if not math.isfinite(values[name]):
            raise InvalidInput(f"Value for {name} must be finite, got {raw!r}")

    fund = settlement.fund
    if "fund_balance" in values or "fund_penalty" in values:
        balance = values.pop("fund_balance", fund.balance)
        if "fund_penalty" in values:
            penalty = values.pop("fund_penalty")
        elif balance != fund.balance:
            penalty = balance * settings.fund.penalty_rate
        else:
            penalty = fund.penalty
        fund = FundSummary(balance=balance, penalty=penalty)

    return settlement.model_copy(update={**values, "fund": fund})
