"""First-year bonus depreciation under IRC 168(k).

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from costseg.config import settings
from costseg.engine.depreciation import is_bonus_eligible
from costseg.engine.macrs_tables import get_macrs_rates, parse_recovery_period

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class BonusDepreciationResult:
    bonus_amount: Decimal
    remaining_basis: Decimal  # Left for regular MACRS after the bonus
    first_year_total: Decimal  # Bonus + first-year MACRS on the remaining basis


def bonus_rate_for_year(placed_in_service_year: int) -> Decimal:
    """Bonus depreciation percentage for the year placed in service."""
    rate = settings.bonus_depreciation_rate.get(placed_in_service_year, Decimal("0"))
    return Decimal(str(rate))


def calculate_bonus_depreciation(
    cost_basis: Decimal,
    recovery_period,
    bonus_rate: Decimal = Decimal("100"),
) -> BonusDepreciationResult:
    """Bonus amount and total first-year deduction for one asset."""
    period = parse_recovery_period(recovery_period)
    if cost_basis <= 0:
        return BonusDepreciationResult(
            bonus_amount=Decimal("0"),
            remaining_basis=Decimal("0"),
            first_year_total=Decimal("0"),
        )

    bonus = Decimal("0")
    if is_bonus_eligible(period):
        bonus = (cost_basis * bonus_rate / 100).quantize(TWO_PLACES, ROUND_HALF_UP)
    remaining = (cost_basis - bonus).quantize(TWO_PLACES, ROUND_HALF_UP)

    first_pct = get_macrs_rates(period)[0]
    first_year_macrs = (remaining * first_pct / 100).quantize(TWO_PLACES, ROUND_HALF_UP)

    return BonusDepreciationResult(
        bonus_amount=bonus,
        remaining_basis=remaining,
        first_year_total=(bonus + first_year_macrs).quantize(TWO_PLACES, ROUND_HALF_UP),
    )
