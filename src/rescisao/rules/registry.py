"""Registry resolving rule tables by version."""

from __future__ import annotations

from rescisao.core.exceptions import RuleNotFoundError
from rescisao.models.rules import MinimumWageTable, WithholdingTable
from rescisao.rules.minimum_wage import MINIMUM_WAGE_2025
from rescisao.rules.withholding import INSS_2025

MINIMUM_WAGE_TABLES: dict[str, MinimumWageTable] = {
    MINIMUM_WAGE_2025.version: MINIMUM_WAGE_2025,
}

WITHHOLDING_TABLES: dict[str, WithholdingTable] = {
    INSS_2025.version: INSS_2025,
}


def get_minimum_wage_table(version: str) -> MinimumWageTable:
    try:
        return MINIMUM_WAGE_TABLES[version]
    except KeyError:
        raise RuleNotFoundError(f"No minimum wage table for version={version!r}") from None


def get_withholding_table(version: str) -> WithholdingTable:
    try:
        return WITHHOLDING_TABLES[version]
    except KeyError:
        raise RuleNotFoundError(f"No withholding table for version={version!r}") from None
