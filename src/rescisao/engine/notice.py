"""Notice period (aviso prévio) length, pay days, and date projection."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import NamedTuple

from rescisao.core.calendar import day_difference
from rescisao.core.config import NoticeConfig
from rescisao.models.contract import ContractInputs, NoticeModality


class NoticeTerms(NamedTuple):
    days: int  # statutory notice length
    paid_days: int  # days paid as indemnified notice
    projected_date: date


def years_of_service(hire_date: date, termination_date: date, year_length_days: float = 365.25) -> int:
    return math.floor(day_difference(termination_date, hire_date) / year_length_days)


def notice_terms(contract: ContractInputs, config: NoticeConfig | None = None) -> NoticeTerms:
    """Resolve notice length and how much of it is paid and projected.

    Indemnified notice is paid and projected in full. Worked notice only pays
    and projects the proportional days beyond the base 30.
    """
    if config is None:
        config = NoticeConfig()
    years = years_of_service(contract.hire_date, contract.termination_date, config.year_length_days)
    days = min(config.base_days + config.days_per_year * years, config.max_days)

    if contract.notice == NoticeModality.INDEMNIFIED:
        paid_days = days
    else:
        paid_days = max(0, days - config.base_days)

    return NoticeTerms(
        days=days,
        paid_days=paid_days,
        projected_date=contract.termination_date + timedelta(days=paid_days),
    )
