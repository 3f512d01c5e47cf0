"""Rate sensitivity: payment and lifetime cost across a band of rates."""

from decimal import Decimal, ROUND_HALF_UP

from costseg.engine.debt import monthly_payment
from costseg.models.loans import RateSensitivityEntry, RateSensitivityResult

TWO_PLACES = Decimal("0.01")
THREE_PLACES = Decimal("0.001")

MIN_RATE = Decimal("0.25")


def rate_sensitivity(
    loan_amount: Decimal,
    base_rate: Decimal,
    term_years: Decimal,
    step_size: Decimal = Decimal("0.25"),
    steps: int = 8,
) -> RateSensitivityResult:
    """Payments from base - steps*step_size to base + steps*step_size, inclusive.

    The band never starts below 0.25%.
    """
    base_payment = monthly_payment(loan_amount, base_rate, term_years)
    n = Decimal(term_years) * 12

    rate = max(MIN_RATE, base_rate - steps * step_size)
    max_rate = base_rate + steps * step_size

    entries: list[RateSensitivityEntry] = []
    while step_size > 0 and rate <= max_rate:
        rounded_rate = rate.quantize(THREE_PLACES, ROUND_HALF_UP)
        pmt = monthly_payment(loan_amount, rounded_rate, term_years)
        total_cost = pmt * n

        entries.append(RateSensitivityEntry(
            rate=rounded_rate,
            monthly_payment=pmt,
            total_interest=(total_cost - loan_amount).quantize(TWO_PLACES, ROUND_HALF_UP),
            total_cost=total_cost.quantize(TWO_PLACES, ROUND_HALF_UP),
            change_from_base=pmt - base_payment,
        ))
        rate += step_size

    return RateSensitivityResult(
        base_rate=base_rate,
        base_payment=base_payment,
        entries=tuple(entries),
    )
