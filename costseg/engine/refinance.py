"""Refinance analysis: current loan vs a proposed replacement.

Pure functions. No I/O.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from costseg.engine.debt import monthly_payment
from costseg.engine.irr import calculate_npv
from costseg.models.loans import RefinanceResult, RefinanceSavingsEntry

TWO_PLACES = Decimal("0.01")

# Savings stream is discounted at a fixed rate, independent of the study's discount rate
REFINANCE_DISCOUNT_RATE = Decimal("5")


def break_even_months(closing_costs: Decimal, monthly_savings: Decimal) -> int | None:
    """Months of savings needed to recoup closing costs; None if nothing is saved."""
    if monthly_savings <= 0:
        return None
    return math.ceil(closing_costs / monthly_savings)


def refinance_analysis(
    current_balance: Decimal,
    current_rate: Decimal,
    remaining_years: Decimal,
    new_rate: Decimal,
    new_term_years: Decimal,
    closing_costs: Decimal,
    points: Decimal = Decimal("0"),
) -> RefinanceResult:
    """Compare keeping the current loan against refinancing the same balance.

    Args:
        points: Discount points as a percentage of the balance, added to closing costs
    """
    current_pmt = monthly_payment(current_balance, current_rate, remaining_years)
    new_pmt = monthly_payment(current_balance, new_rate, new_term_years)
    total_closing = closing_costs + current_balance * points / 100
    monthly_savings = (current_pmt - new_pmt).quantize(TWO_PLACES, ROUND_HALF_UP)

    lifetime_current = (current_pmt * Decimal(remaining_years) * 12 - current_balance).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
    lifetime_new = (new_pmt * Decimal(new_term_years) * 12 - current_balance).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )

    comparison_years = min(Decimal(remaining_years), Decimal(new_term_years))
    total_savings = (monthly_savings * comparison_years * 12 - total_closing).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
    horizon = math.ceil(comparison_years)

    # Upfront cost, then one year of savings per year of the horizon
    cash_flows = [-total_closing] + [monthly_savings * 12] * horizon
    npv_savings = calculate_npv(cash_flows, REFINANCE_DISCOUNT_RATE)

    annual_current = current_pmt * 12
    annual_new = new_pmt * 12
    annual_saving = (annual_current - annual_new).quantize(TWO_PLACES, ROUND_HALF_UP)

    schedule: list[RefinanceSavingsEntry] = []
    cumulative = -total_closing
    for year in range(1, horizon + 1):
        cumulative += annual_saving
        schedule.append(RefinanceSavingsEntry(
            year=year,
            current_payment=annual_current,
            new_payment=annual_new,
            annual_savings=annual_saving,
            cumulative_savings=cumulative.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return RefinanceResult(
        current_monthly_payment=current_pmt,
        new_monthly_payment=new_pmt,
        monthly_savings=monthly_savings,
        break_even_months=break_even_months(total_closing, monthly_savings),
        total_savings_over_term=total_savings,
        npv_savings=npv_savings,
        lifetime_interest_current=lifetime_current,
        lifetime_interest_new=lifetime_new,
        interest_saved=(lifetime_current - lifetime_new).quantize(TWO_PLACES, ROUND_HALF_UP),
        closing_costs=total_closing.quantize(TWO_PLACES, ROUND_HALF_UP),
        savings_schedule=tuple(schedule),
    )
