"""Amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.
Rates are annual percentages (e.g. Decimal("6.5") for 6.5%).
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class AmortizationEntry:
    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal


@dataclass(frozen=True)
class AnnualAmortizationEntry:
    year: int
    total_payment: Decimal
    total_principal: Decimal
    total_interest: Decimal
    ending_balance: Decimal
    cumulative_interest: Decimal


@dataclass(frozen=True)
class MortgageResult:
    monthly_pi: Decimal
    monthly_total: Decimal  # P&I plus escrowed property tax and insurance
    total_interest: Decimal
    total_cost: Decimal
    schedule: list[AnnualAmortizationEntry] = field(default_factory=list)
    monthly_schedule: list[AmortizationEntry] = field(default_factory=list)


def term_months(term_years: Decimal) -> int:
    """Whole number of monthly payments in a term."""
    return int(Decimal(term_years) * 12)


def monthly_rate(annual_rate: Decimal) -> Decimal:
    return Decimal(annual_rate) / 100 / 12


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: Decimal) -> Decimal:
    """Calculate fixed monthly mortgage payment.

    A 0% rate repays principal in equal installments.
    """
    if principal <= 0 or term_years <= 0:
        return Decimal("0")
    n = Decimal(term_years) * 12
    if annual_rate <= 0:
        return (principal / n).quantize(TWO_PLACES, ROUND_HALF_UP)

    r = monthly_rate(annual_rate)
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def amortize_month(
    balance: Decimal,
    r: Decimal,
    payment: Decimal,
    final: bool = False,
) -> tuple[Decimal, Decimal, Decimal]:
    """One month of amortization: (interest, principal paid, new balance).

    The principal paid never exceeds the balance, so the balance floors at zero.
    The final month of the term pays off whatever balance is left, absorbing
    the cent rounding of the payment.
    """
    interest = (balance * r).quantize(TWO_PLACES, ROUND_HALF_UP)
    if final:
        return interest, balance, Decimal("0")
    principal_paid = min(payment - interest, balance)
    return interest, principal_paid, max(Decimal("0"), balance - principal_paid)


def amortization_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: Decimal,
) -> list[AmortizationEntry]:
    """Month-by-month schedule over the full term."""
    pmt = monthly_payment(principal, annual_rate, term_years)
    if pmt <= 0:
        return []

    r = monthly_rate(annual_rate)
    payments: list[AmortizationEntry] = []
    balance = principal
    cumulative_interest = Decimal("0")
    cumulative_principal = Decimal("0")

    last_month = term_months(term_years)
    for month in range(1, last_month + 1):
        interest, principal_paid, balance = amortize_month(
            balance, r, pmt, final=month == last_month
        )
        cumulative_interest += interest
        cumulative_principal += principal_paid

        payments.append(AmortizationEntry(
            month=month,
            payment=(interest + principal_paid).quantize(TWO_PLACES, ROUND_HALF_UP),
            principal=principal_paid.quantize(TWO_PLACES, ROUND_HALF_UP),
            interest=interest,
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
            cumulative_interest=cumulative_interest.quantize(TWO_PLACES, ROUND_HALF_UP),
            cumulative_principal=cumulative_principal.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return payments


def annual_rollup(monthly: list[AmortizationEntry]) -> list[AnnualAmortizationEntry]:
    """Aggregate a monthly schedule into 12-month windows.

    Stops at the first window with fewer than 12 months left.
    """
    yearly: list[AnnualAmortizationEntry] = []
    for start in range(0, len(monthly), 12):
        window = monthly[start:start + 12]
        if len(window) < 12:
            break
        yearly.append(AnnualAmortizationEntry(
            year=start // 12 + 1,
            total_payment=sum((m.payment for m in window), Decimal("0")),
            total_principal=sum((m.principal for m in window), Decimal("0")),
            total_interest=sum((m.interest for m in window), Decimal("0")),
            ending_balance=window[-1].balance,
            cumulative_interest=window[-1].cumulative_interest,
        ))
    return yearly


def annual_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: Decimal,
) -> list[AnnualAmortizationEntry]:
    return annual_rollup(amortization_schedule(principal, annual_rate, term_years))


def calculate_mortgage(
    loan_amount: Decimal,
    annual_rate: Decimal,
    term_years: Decimal,
    property_tax: Decimal = Decimal("0"),
    insurance: Decimal = Decimal("0"),
) -> MortgageResult:
    """Monthly payment, lifetime totals and schedules for a fixed-rate loan.

    Args:
        property_tax: Annual property tax, escrowed monthly
        insurance: Annual hazard insurance, escrowed monthly
    """
    pmt = monthly_payment(loan_amount, annual_rate, term_years)
    monthly_total = pmt + property_tax / 12 + insurance / 12

    total_payments = pmt * Decimal(term_years) * 12
    total_interest = total_payments - loan_amount
    total_cost = total_payments + (property_tax + insurance) * Decimal(term_years)

    monthly = amortization_schedule(loan_amount, annual_rate, term_years)

    return MortgageResult(
        monthly_pi=pmt,
        monthly_total=monthly_total.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_interest=total_interest.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_cost=total_cost.quantize(TWO_PLACES, ROUND_HALF_UP),
        schedule=annual_rollup(monthly),
        monthly_schedule=monthly,
    )
