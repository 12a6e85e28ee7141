"""Progressive social-security (INSS) withholding."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rescisao.models.rules import WithholdingBracket, WithholdingTable

INSS_2025 = WithholdingTable(
    version="2025",
    ceiling=8157.41,
    brackets=(
        WithholdingBracket(upper=1518.00, rate=0.075),
        WithholdingBracket(upper=2793.88, rate=0.09),
        WithholdingBracket(upper=4190.83, rate=0.12),
        WithholdingBracket(upper=None, rate=0.14),
    ),
)


def round_cents(value: float) -> float:
    """Round to cents with halves going up (x100, nearest integer, /100)."""
    cents = Decimal(value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(cents) / 100


def withholding(base: float, table: WithholdingTable | None = None) -> float:
    """Marginal withholding over ``base`` capped at the table ceiling."""
    if base <= 0:
        return 0.0
    if table is None:
        table = INSS_2025
    capped = min(base, table.ceiling)
    total = 0.0
    lower = 0.0
    for bracket in table.brackets:
        upper = bracket.upper if bracket.upper is not None else table.ceiling
        if capped <= lower:
            break
        total += (min(capped, upper) - lower) * bracket.rate
        lower = upper
    return round_cents(total)
