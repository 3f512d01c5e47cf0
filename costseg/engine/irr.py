"""NPV and IRR of annual cash flow streams.

Pure functions. No I/O. Cash flow index 0 is the first future year, so it
is discounted one full period.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import bisect

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Bisection bracket for IRR: -50% to 500%
IRR_LOWER_BOUND = -0.5
IRR_UPPER_BOUND = 5.0


def calculate_npv(cash_flows: Sequence[Decimal], discount_rate: Decimal) -> Decimal:
    """NPV = sum(cf[t] / (1 + r)^(t+1)), r given as a percentage."""
    growth = 1 + Decimal(discount_rate) / 100
    npv = Decimal("0")
    for t, cf in enumerate(cash_flows):
        npv += Decimal(cf) / growth ** (t + 1)
    return npv.quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_irr(
    cash_flows: Sequence[Decimal],
    tolerance: float = 1e-4,
    max_iterations: int = 1000,
) -> Decimal | None:
    """Discount rate (percentage, 2 dp) at which NPV is zero.

    Uses bisection over [-50%, 500%]. tolerance bounds the error of the
    rate itself, in percentage points (1e-4 = 0.0001%), not the residual NPV.
    Returns None when the IRR is undefined: no cash flows, no sign change
    among the flows, or no sign change of NPV across the bracket.
    """
    if not cash_flows:
        return None

    if not (any(cf > 0 for cf in cash_flows) and any(cf < 0 for cf in cash_flows)):
        return None

    # Convert to float for scipy
    cf_float = [float(cf) for cf in cash_flows]

    def npv(rate: float) -> float:
        return sum(cf / (1 + rate) ** (t + 1) for t, cf in enumerate(cf_float))

    if npv(IRR_LOWER_BOUND) * npv(IRR_UPPER_BOUND) > 0:
        logger.debug("No IRR between %s and %s for %d cash flows",
                     IRR_LOWER_BOUND, IRR_UPPER_BOUND, len(cf_float))
        return None

    # disp=False returns the best estimate if max_iterations runs out
    rate = bisect(
        npv,
        IRR_LOWER_BOUND,
        IRR_UPPER_BOUND,
        xtol=tolerance / 100,
        maxiter=max_iterations,
        disp=False,
    )
    return (Decimal(str(rate)) * 100).quantize(TWO_PLACES, ROUND_HALF_UP)
