"""Debt service coverage: NOI / annual debt service, with lender rating.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from costseg.engine.debt import monthly_payment, monthly_rate
from costseg.models.loans import DSCRRating, DSCRResult

TWO_PLACES = Decimal("0.01")
WHOLE_DOLLARS = Decimal("1")

# Evaluated top to bottom; each is an inclusive lower bound
RATING_THRESHOLDS: tuple[tuple[Decimal, DSCRRating], ...] = (
    (Decimal("1.50"), DSCRRating.STRONG),
    (Decimal("1.25"), DSCRRating.ADEQUATE),
    (Decimal("1.00"), DSCRRating.WEAK),
)

# Coverage most lenders require; drives the max supportable loan
TARGET_DSCR = Decimal("1.25")


def rate_dscr(dscr: Decimal) -> DSCRRating:
    for threshold, rating in RATING_THRESHOLDS:
        if dscr >= threshold:
            return rating
    return DSCRRating.INSUFFICIENT


def max_loan_amount(
    noi: Decimal,
    interest_rate: Decimal,
    term_years: Decimal,
    target_dscr: Decimal = TARGET_DSCR,
) -> Decimal:
    """Largest loan whose debt service keeps coverage at target_dscr.

    Back-solves the annuity formula: P = M * [(1+r)^n - 1] / [r(1+r)^n].
    """
    target_monthly = noi / target_dscr / 12
    if target_monthly <= 0 or term_years <= 0:
        return Decimal("0")

    n = Decimal(term_years) * 12
    if interest_rate <= 0:
        return (target_monthly * n).quantize(WHOLE_DOLLARS, ROUND_HALF_UP)

    r = monthly_rate(interest_rate)
    factor = (1 + r) ** n
    return (target_monthly * (factor - 1) / (r * factor)).quantize(WHOLE_DOLLARS, ROUND_HALF_UP)


def calculate_dscr(
    gross_income: Decimal,
    operating_expenses: Decimal,
    loan_amount: Decimal,
    interest_rate: Decimal,
    term_years: Decimal,
) -> DSCRResult:
    """DSCR for a loan against a property's annual income and expenses."""
    noi = gross_income - operating_expenses
    pmt = monthly_payment(loan_amount, interest_rate, term_years)
    annual_debt_service = pmt * 12

    if annual_debt_service > 0:
        dscr = (noi / annual_debt_service).quantize(TWO_PLACES, ROUND_HALF_UP)
    else:
        dscr = Decimal("0")

    return DSCRResult(
        dscr=dscr,
        noi=noi.quantize(TWO_PLACES, ROUND_HALF_UP),
        annual_debt_service=annual_debt_service,
        monthly_debt_service=pmt,
        rating=rate_dscr(dscr),
        max_loan_amount=max_loan_amount(noi, interest_rate, term_years),
    )
