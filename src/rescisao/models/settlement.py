"""Settlement result: every payable and deductible line of a termination.

Totals are derived on access and never stored, so a record edited through
``model_copy`` always reports a consistent net settlement and fund total.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, computed_field

# Lines summed into the net settlement, in report order.
PAYABLE_FIELDS: tuple[str, ...] = (
    "salary_balance",
    "notice_pay",
    "thirteenth_salary",
    "thirteenth_indemnified",
    "overdue_vacation",
    "overdue_vacation_bonus",
    "proportional_vacation",
    "proportional_vacation_bonus",
    "indemnified_vacation",
    "indemnified_vacation_bonus",
)


class FundSummary(BaseModel):
    """Severance fund (FGTS) balance and its 40% penalty."""

    model_config = {"frozen": True}

    balance: float = 0.0
    penalty: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return self.balance + self.penalty

    @classmethod
    def from_balance(cls, balance: float, penalty_rate: float) -> FundSummary:
        return cls(balance=balance, penalty=balance * penalty_rate)


class SettlementResult(BaseModel):
    """Fully computed termination settlement."""

    model_config = {"frozen": True}

    # --- Period Fields ---
    days_worked_in_month: int = 0
    notice_days: int = 0
    projected_termination_date: Optional[date] = None  # termination + projected notice

    # --- Salary & Notice ---
    salary_balance: float = 0.0
    notice_pay: float = 0.0

    # --- 13th Salary ---
    thirteenth_twelfths: int = Field(default=0, ge=0, le=12)
    thirteenth_salary: float = 0.0
    thirteenth_indemnified_twelfths: int = Field(default=0, ge=0, le=12)
    thirteenth_indemnified: float = 0.0

    # --- Vacation ---
    vacation_twelfths: int = Field(default=0, ge=0, le=12)
    overdue_vacation: float = 0.0
    overdue_vacation_bonus: float = 0.0
    proportional_vacation: float = 0.0
    proportional_vacation_bonus: float = 0.0
    vacation_indemnified_twelfths: int = Field(default=0, ge=0, le=12)
    indemnified_vacation: float = 0.0
    indemnified_vacation_bonus: float = 0.0

    # --- Deductions ---
    withholding_base: float = 0.0
    withholding: float = 0.0

    fund: FundSummary = Field(default_factory=FundSummary)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_earnings(self) -> float:
        """Sum of all payable lines."""
        return sum(getattr(self, name) for name in PAYABLE_FIELDS)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net_settlement(self) -> float:
        return self.total_earnings - self.withholding

    @computed_field  # type: ignore[prop-decorator]
    @property
    def combined_payout(self) -> float:
        """Net settlement plus the fund total, paid through separate channels."""
        return self.net_settlement + self.fund.total

    @property
    def fund_contribution_base(self) -> float:
        """Lines that attract a fund deposit on termination (vacation excluded)."""
        return (
            self.salary_balance + self.thirteenth_salary
            + self.notice_pay + self.thirteenth_indemnified
        )
