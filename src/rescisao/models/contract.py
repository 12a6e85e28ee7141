"""Contract inputs: the caller-supplied facts behind one settlement calculation."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from rescisao.core.calendar import parse_iso_date
from rescisao.core.exceptions import InvalidInput


class NoticeModality(StrEnum):
    WORKED = "worked"
    INDEMNIFIED = "indemnified"


class ContractInputs(BaseModel):
    """Employment contract facts for a termination without cause."""

    base_salary: float = Field(ge=0)
    allowance: float = Field(default=0.0, ge=0)  # health/hazard (insalubridade)
    hire_date: date
    termination_date: date
    notice: NoticeModality = NoticeModality.WORKED
    overdue_vacation_periods: int = Field(default=0, ge=0)

    model_config = {"frozen": True, "str_strip_whitespace": True, "allow_inf_nan": False}

    @field_validator("hire_date", "termination_date", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_iso_date(value)
        return value

    @property
    def salary_total(self) -> float:
        """Monthly remuneration used by every proration: salary plus allowance."""
        return self.base_salary + self.allowance


def parse_contract(data: Mapping[str, Any] | ContractInputs) -> ContractInputs:
    """Validate raw form data into ContractInputs.

    Raises:
        InvalidInput: on malformed dates or non-numeric/negative amounts.
    """
    if isinstance(data, ContractInputs):
        return data
    try:
        return ContractInputs.model_validate(dict(data))
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InvalidInput(f"Invalid contract inputs ({fields}): {exc}") from exc
