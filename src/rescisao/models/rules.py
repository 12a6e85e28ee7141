"""Versioned, effective-dated rule tables."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class MinimumWageRecord(BaseModel):
    """Minimum wage in force from ``effective_date`` onward."""

    model_config = {"frozen": True}

    effective_date: date
    wage: float = Field(gt=0)


class MinimumWageTable(BaseModel):
    """Minimum wage history, newest record first."""

    model_config = {"frozen": True}

    version: str
    records: tuple[MinimumWageRecord, ...]

    @model_validator(mode="after")
    def _check_descending(self) -> MinimumWageTable:
        if not self.records:
            raise ValueError("minimum wage table needs at least one record")
        for newer, older in zip(self.records, self.records[1:]):
            if newer.effective_date <= older.effective_date:
                raise ValueError(
                    f"records must be strictly descending: {newer.effective_date} "
                    f"listed before {older.effective_date}"
                )
        return self

    @property
    def oldest(self) -> MinimumWageRecord:
        return self.records[-1]

    @property
    def latest(self) -> MinimumWageRecord:
        return self.records[0]


class WithholdingBracket(BaseModel):
    """Marginal bracket; ``upper=None`` means up to the table ceiling."""

    model_config = {"frozen": True}

    upper: Optional[float] = Field(default=None, gt=0)
    rate: float = Field(ge=0, le=1)


class WithholdingTable(BaseModel):
    """Progressive social-security (INSS) withholding table."""

    model_config = {"frozen": True}

    version: str
    ceiling: float = Field(gt=0)
    brackets: tuple[WithholdingBracket, ...]

    @model_validator(mode="after")
    def _check_brackets(self) -> WithholdingTable:
        if not self.brackets:
            raise ValueError("withholding table needs at least one bracket")
        uppers = [b.upper if b.upper is not None else self.ceiling for b in self.brackets]
        if any(u is None for u in (b.upper for b in self.brackets[:-1])):
            raise ValueError("only the last bracket may omit its upper bound")
        if uppers != sorted(uppers) or uppers[-1] > self.ceiling:
            raise ValueError("bracket bounds must ascend and stay within the ceiling")
        return self
