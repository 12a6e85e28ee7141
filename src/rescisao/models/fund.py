"""Fund (FGTS) balance strategies: automatic estimate and the two overrides."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field, field_validator

from rescisao.core.calendar import month_key, parse_month_key


class FundHistoryEntry(BaseModel):
    """One month of historical salary used to derive a fund deposit."""

    model_config = {"frozen": True, "allow_inf_nan": False}

    month: str  # YYYY-MM
    salary: float = Field(default=0.0, ge=0)

    @field_validator("month")
    @classmethod
    def _check_month(cls, value: str) -> str:
        return month_key(parse_month_key(value))


class AutomaticFundEstimate(BaseModel):
    """Flat estimate: current salary deposited every month of service."""

    model_config = {"frozen": True, "allow_inf_nan": False}

    monthly_salary: float = Field(ge=0)
    months_of_service: int = Field(ge=0)

    def estimate_balance(self, termination_contribution: float, contribution_rate: float) -> float:
        accumulated = self.monthly_salary * contribution_rate * self.months_of_service
        return accumulated + termination_contribution


class ManualFundBalance(BaseModel):
    """Balance taken from the worker's fund statement."""

    model_config = {"frozen": True, "allow_inf_nan": False}

    balance: float = Field(gt=0)

    def estimate_balance(self, termination_contribution: float, contribution_rate: float) -> float:
        return self.balance + termination_contribution


class MonthlyFundHistory(BaseModel):
    """Salary per month from hire up to (not including) the termination month."""

    model_config = {"frozen": True, "allow_inf_nan": False}

    salaries: dict[str, float] = Field(default_factory=dict)

    @field_validator("salaries")
    @classmethod
    def _check_salaries(cls, value: dict[str, float]) -> dict[str, float]:
        checked: dict[str, float] = {}
        for key, salary in value.items():
            if salary < 0:
                raise ValueError(f"salary for {key} must be non-negative, got {salary}")
            checked[month_key(parse_month_key(key))] = float(salary)
        return dict(sorted(checked.items()))

    @property
    def entries(self) -> Iterator[FundHistoryEntry]:
        for key, salary in self.salaries.items():
            yield FundHistoryEntry(month=key, salary=salary)

    @property
    def months(self) -> list[str]:
        return list(self.salaries)

    def with_salary(self, month: str, salary: float) -> MonthlyFundHistory:
        """Return a copy with one month's salary replaced."""
        entry = FundHistoryEntry(month=month, salary=salary)
        return MonthlyFundHistory(salaries={**self.salaries, entry.month: entry.salary})

    def estimate_balance(self, termination_contribution: float, contribution_rate: float) -> float:
        deposits = sum(salary * contribution_rate for salary in self.salaries.values())
        return deposits + termination_contribution
