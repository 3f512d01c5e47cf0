"""Tax savings from cost segregation: accelerated vs straight-line depreciation.

Cost seg shifts deductions into earlier years without changing the total,
so cumulative savings rise early and trend back toward zero.
"""

from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from costseg.models.results import TaxSavingsEntry

TWO_PLACES = Decimal("0.01")


def calculate_tax_savings(
    accelerated: Sequence[Decimal],
    straight_line: Sequence[Decimal],
    tax_rate: Decimal,
) -> list[TaxSavingsEntry]:
    """Year-by-year tax effect of two depreciation streams.

    Args:
        accelerated: Annual depreciation with cost seg (year 1 first)
        straight_line: Annual depreciation without cost seg
        tax_rate: Marginal rate as a percentage (e.g. Decimal("37"))

    Years past the end of the shorter stream count as zero depreciation.
    """
    rate = tax_rate / 100
    years = max(len(accelerated), len(straight_line))

    results: list[TaxSavingsEntry] = []
    cumulative = Decimal("0")

    for i in range(years):
        acc_dep = accelerated[i] if i < len(accelerated) else Decimal("0")
        sl_dep = straight_line[i] if i < len(straight_line) else Decimal("0")

        with_cs = (acc_dep * rate).quantize(TWO_PLACES, ROUND_HALF_UP)
        without_cs = (sl_dep * rate).quantize(TWO_PLACES, ROUND_HALF_UP)
        annual = (with_cs - without_cs).quantize(TWO_PLACES, ROUND_HALF_UP)
        cumulative = (cumulative + annual).quantize(TWO_PLACES, ROUND_HALF_UP)

        results.append(TaxSavingsEntry(
            year=i + 1,
            with_cost_seg=with_cs,
            without_cost_seg=without_cs,
            annual_savings=annual,
            cumulative_savings=cumulative,
        ))

    return results
