"""Combined cost segregation + refinance analysis.

Runs the cost seg depreciation path on a typical allocation and the
refinance path side by side, then simulates the refinanced loan twice:
once as scheduled and once with each year's cost seg tax savings applied
as a lump-sum principal paydown at year end.

Pure computation. No I/O.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from costseg.config import settings
from costseg.engine.asset_classes import get_default_allocation, is_building_category
from costseg.engine.debt import amortize_month, monthly_rate, term_months
from costseg.engine.refinance import refinance_analysis
from costseg.engine.report import (
    combine_accelerated_schedules,
    depreciable_assets,
    straight_line_baseline,
)
from costseg.engine.tax_savings import calculate_tax_savings
from costseg.models.assets import StudyAsset
from costseg.models.results import CombinedAnalysisResult, CombinedScheduleEntry, TaxSavingsEntry

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

SUMMARY_YEARS = 5


@dataclass(frozen=True)
class PaydownComparison:
    baseline_months: int
    accelerated_months: int
    baseline_interest: Decimal
    accelerated_interest: Decimal

    @property
    def months_saved(self) -> int:
        return self.baseline_months - self.accelerated_months

    @property
    def interest_saved(self) -> Decimal:
        return (self.baseline_interest - self.accelerated_interest).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )


def cost_seg_savings(
    property_value: Decimal,
    property_type: str,
    tax_rate: Decimal,
    bonus_rate: Decimal,
) -> tuple[list[TaxSavingsEntry], Decimal]:
    """Tax savings schedule for a typical allocation, plus the % reclassified.

    Without cost seg the whole depreciable allocation stays on the
    building's straight-line life.
    """
    allocation = get_default_allocation(property_type, property_value)
    assets = [StudyAsset(e.category, e.amount, e.recovery_period) for e in allocation]

    depreciable = depreciable_assets(assets)
    accelerated = combine_accelerated_schedules(depreciable, bonus_rate)
    building_value = sum((a.cost_basis for a in depreciable), Decimal("0"))
    straight_line = straight_line_baseline(property_type, building_value)

    reclassified_pct = sum(
        (e.percentage for e in allocation if not is_building_category(e.category)),
        Decimal("0"),
    )
    return calculate_tax_savings(accelerated, straight_line, tax_rate), reclassified_pct


def simulate_paydown(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: Decimal,
    payment: Decimal,
    annual_paydowns: Sequence[Decimal],
) -> PaydownComparison:
    """Amortize a loan with and without year-end lump-sum paydowns.

    Both tracks make the same scheduled payment. The accelerated track
    receives annual_paydowns[year - 1] only after that year's 12 monthly
    payments; negative amounts are ignored and each paydown is capped at
    the remaining balance.
    """
    r = monthly_rate(annual_rate)
    total_months = term_months(term_years)

    base_balance = accel_balance = principal
    base_interest = accel_interest = Decimal("0")
    base_months = accel_months = 0

    for year in range(1, math.ceil(total_months / 12) + 1):
        for month in range((year - 1) * 12 + 1, min(year * 12, total_months) + 1):
            final = month == total_months
            if base_balance > 0:
                interest, _, base_balance = amortize_month(base_balance, r, payment, final)
                base_interest += interest
                base_months = month
            if accel_balance > 0:
                interest, _, accel_balance = amortize_month(accel_balance, r, payment, final)
                accel_interest += interest
                accel_months = month

        if accel_balance > 0 and year <= len(annual_paydowns):
            paydown = min(max(annual_paydowns[year - 1], Decimal("0")), accel_balance)
            accel_balance -= paydown

        if base_balance <= 0 and accel_balance <= 0:
            break

    return PaydownComparison(
        baseline_months=base_months,
        accelerated_months=accel_months,
        baseline_interest=base_interest,
        accelerated_interest=accel_interest,
    )


def combined_analysis(
    property_value: Decimal,
    property_type: str,
    tax_rate: Decimal,
    bonus_rate: Decimal,
    current_balance: Decimal,
    current_rate: Decimal,
    remaining_years: Decimal,
    new_rate: Decimal,
    new_term_years: Decimal,
    closing_costs: Decimal = Decimal("0"),
) -> CombinedAnalysisResult:
    """Total financial impact of doing a cost seg study and a refinance together.

    Raises UnknownPropertyTypeError for property types without an allocation profile.
    """
    tax_savings, reclassified_pct = cost_seg_savings(
        property_value, property_type, tax_rate, bonus_rate
    )
    annual_cost_seg = [e.annual_savings for e in tax_savings]

    refi = refinance_analysis(
        current_balance, current_rate, remaining_years, new_rate, new_term_years, closing_costs
    )
    refi_years = math.ceil(min(Decimal(remaining_years), Decimal(new_term_years)))
    annual_refi = refi.monthly_savings * 12

    def cost_seg_for(year: int) -> Decimal:
        return annual_cost_seg[year - 1] if year <= len(annual_cost_seg) else Decimal("0")

    def refi_for(year: int) -> Decimal:
        return annual_refi if year <= refi_years else Decimal("0")

    payoff = simulate_paydown(
        current_balance, new_rate, new_term_years, refi.new_monthly_payment, annual_cost_seg
    )

    schedule: list[CombinedScheduleEntry] = []
    cumulative = -refi.closing_costs
    for year in range(1, settings.combined_schedule_years + 1):
        cumulative += cost_seg_for(year) + refi_for(year)
        schedule.append(CombinedScheduleEntry(
            year=year,
            cost_seg_savings=cost_seg_for(year),
            refi_savings=refi_for(year),
            cumulative_benefit=cumulative.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    first_year = cost_seg_for(1)
    five_year = Decimal("0")
    if tax_savings:
        five_year = tax_savings[min(SUMMARY_YEARS, len(tax_savings)) - 1].cumulative_savings
    refi_five_year = sum((refi_for(y) for y in range(1, SUMMARY_YEARS + 1)), Decimal("0"))

    logger.debug(
        "Combined analysis: %s months saved, %s interest saved",
        payoff.months_saved, payoff.interest_saved,
    )

    return CombinedAnalysisResult(
        cost_seg_first_year_savings=first_year,
        cost_seg_five_year_savings=five_year,
        reclassified_percentage=reclassified_pct,
        current_monthly_payment=refi.current_monthly_payment,
        new_monthly_payment=refi.new_monthly_payment,
        monthly_savings=refi.monthly_savings,
        refi_break_even_months=refi.break_even_months,
        refi_total_savings=refi.total_savings_over_term,
        total_year1_benefit=(first_year + refi_for(1) - refi.closing_costs).quantize(
            TWO_PLACES, ROUND_HALF_UP
        ),
        total_five_year_benefit=(five_year + refi_five_year - refi.closing_costs).quantize(
            TWO_PLACES, ROUND_HALF_UP
        ),
        months_saved_on_mortgage=payoff.months_saved,
        additional_interest_saved=payoff.interest_saved,
        combined_schedule=tuple(schedule),
    )
