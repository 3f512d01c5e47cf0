"""MACRS depreciation schedules with first-year bonus depreciation.

Pure functions: Decimal in, dataclasses out. No I/O. Validates against IRS Pub 946.

The final table year takes the remaining basis rather than its printed
percentage, so it can differ from the table (27.5-year property: 1.979% of
basis in year 28 instead of the printed 1.970%).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from costseg.engine.macrs_tables import get_macrs_rates, parse_recovery_period
from costseg.errors import InvalidRecoveryPeriodError
from costseg.models.assets import RecoveryPeriod

TWO_PLACES = Decimal("0.01")

# Section 168(k): property with a recovery period of 20 years or less
BONUS_ELIGIBLE_MAX_PERIOD = Decimal("20")

STRAIGHT_LINE_PERIODS = (RecoveryPeriod.RESIDENTIAL, RecoveryPeriod.NONRESIDENTIAL)


@dataclass(frozen=True)
class DepreciationEntry:
    year: int
    depreciation: Decimal
    cumulative_depreciation: Decimal
    remaining_basis: Decimal


def is_bonus_eligible(period: RecoveryPeriod) -> bool:
    return period.years <= BONUS_ELIGIBLE_MAX_PERIOD


def calculate_depreciation(
    cost_basis: Decimal,
    recovery_period,
    bonus_rate: Decimal = Decimal("100"),
) -> list[DepreciationEntry]:
    """Year-by-year MACRS schedule for one asset.

    Args:
        cost_basis: Depreciable basis of the asset
        recovery_period: 5, 7, 15, 27.5 or 39 (anything else raises)
        bonus_rate: Bonus depreciation percentage (0-100), applied only to
            property with a recovery period of 20 years or less

    The bonus comes off the basis before the MACRS table is applied and is
    taken entirely in year 1. No year depreciates more than the basis left,
    and the final table year recovers whatever remains, so cumulative
    depreciation ends at cost_basis.
    """
    period = parse_recovery_period(recovery_period)
    if cost_basis <= 0:
        return []

    rates = get_macrs_rates(period)

    bonus = Decimal("0")
    macrs_basis = cost_basis
    if is_bonus_eligible(period) and bonus_rate > 0:
        bonus = cost_basis * bonus_rate / 100
        macrs_basis = cost_basis - bonus

    schedule: list[DepreciationEntry] = []
    cumulative = Decimal("0")
    last_year = len(rates)

    for year, pct in enumerate(rates, start=1):
        amount = macrs_basis * pct / 100
        if year == 1:
            amount += bonus
        amount = amount.quantize(TWO_PLACES, ROUND_HALF_UP)

        # Never depreciate past the basis; the last year takes whatever is left
        left = max(cost_basis - cumulative, Decimal("0")).quantize(TWO_PLACES, ROUND_HALF_UP)
        amount = left if year == last_year else min(amount, left)

        cumulative += amount
        remaining = max(cost_basis - cumulative, Decimal("0"))

        schedule.append(DepreciationEntry(
            year=year,
            depreciation=amount,
            cumulative_depreciation=cumulative,
            remaining_basis=remaining.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return schedule


def calculate_straight_line_depreciation(
    cost_basis: Decimal,
    recovery_period,
) -> list[DepreciationEntry]:
    """Building depreciation without cost segregation (27.5 or 39 years, no bonus)."""
    period = parse_recovery_period(recovery_period)
    if period not in STRAIGHT_LINE_PERIODS:
        raise InvalidRecoveryPeriodError(
            recovery_period, [p.years for p in STRAIGHT_LINE_PERIODS]
        )
    return calculate_depreciation(cost_basis, period, Decimal("0"))


def depreciation_amounts(schedule: Sequence[DepreciationEntry]) -> list[Decimal]:
    return [entry.depreciation for entry in schedule]
