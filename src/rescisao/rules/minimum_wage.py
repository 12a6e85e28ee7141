"""Brazilian national minimum wage history and point-in-time lookup."""

from __future__ import annotations

from datetime import date

from rescisao.models.rules import MinimumWageRecord, MinimumWageTable

_HISTORY_2025 = [
    ("2025-01-01", 1518.00),
    ("2024-01-01", 1412.00),
    ("2023-05-01", 1320.00),
    ("2023-01-01", 1302.00),
    ("2022-01-01", 1212.00),
    ("2021-01-01", 1100.00),
    ("2020-02-01", 1045.00),
    ("2020-01-01", 1039.00),
    ("2019-01-01", 998.00),
    ("2018-01-01", 954.00),
    ("2017-01-01", 937.00),
    ("2016-01-01", 880.00),
    ("2015-01-01", 788.00),
    ("2014-01-01", 724.00),
    ("2013-01-01", 678.00),
    ("2012-01-01", 622.00),
    ("2011-03-01", 545.00),
    ("2011-01-01", 540.00),
    ("2010-01-01", 510.00),
    ("2009-02-01", 465.00),
    ("2008-03-01", 415.00),
    ("2007-04-01", 380.00),
    ("2006-04-01", 350.00),
    ("2005-05-01", 300.00),
    ("2004-05-01", 260.00),
    ("2003-06-01", 240.00),
    ("2002-06-01", 200.00),
    ("2001-06-01", 180.00),
    ("2000-06-01", 151.00),
]

MINIMUM_WAGE_2025 = MinimumWageTable(
    version="2025",
    records=tuple(
        MinimumWageRecord(effective_date=date.fromisoformat(d), wage=w) for d, w in _HISTORY_2025
    ),
)


def minimum_wage_on(day: date, table: MinimumWageTable | None = None) -> float:
    """Minimum wage in force on ``day``.

    Dates before the first tabulated record get the oldest wage.
    """
    if table is None:
        table = MINIMUM_WAGE_2025
    for record in table.records:
        if day >= record.effective_date:
            return record.wage
    return table.oldest.wage
