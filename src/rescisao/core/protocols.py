"""Protocol interfaces for the settlement engine.

Fund balance strategies are matched structurally, no inheritance required,
easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Fund balance strategy
# ---------------------------------------------------------------------------

@runtime_checkable
class IFundEstimator(Protocol):
    """Produces a fund balance that already includes this termination's deposit."""

    def estimate_balance(self, termination_contribution: float, contribution_rate: float) -> float: ...
