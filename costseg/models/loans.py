from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class DSCRRating(Enum):
    STRONG = "strong"
    ADEQUATE = "adequate"
    WEAK = "weak"
    INSUFFICIENT = "insufficient"

    @property
    def label(self) -> str:
        return {
            DSCRRating.STRONG: "Strong: easily meets lender requirements",
            DSCRRating.ADEQUATE: "Adequate: meets most lender minimums",
            DSCRRating.WEAK: "Weak: may face difficulty qualifying",
            DSCRRating.INSUFFICIENT: "Insufficient: NOI does not cover debt service",
        }[self]


@dataclass(frozen=True)
class RefinanceSavingsEntry:
    year: int
    current_payment: Decimal  # Annual
    new_payment: Decimal  # Annual
    annual_savings: Decimal
    cumulative_savings: Decimal  # Net of closing costs


@dataclass(frozen=True)
class RefinanceResult:
    current_monthly_payment: Decimal
    new_monthly_payment: Decimal
    monthly_savings: Decimal
    break_even_months: int | None  # None when the new payment saves nothing
    total_savings_over_term: Decimal
    npv_savings: Decimal
    lifetime_interest_current: Decimal
    lifetime_interest_new: Decimal
    interest_saved: Decimal
    closing_costs: Decimal  # Including points
    savings_schedule: tuple[RefinanceSavingsEntry, ...] = ()


@dataclass(frozen=True)
class DSCRResult:
    dscr: Decimal
    noi: Decimal
    annual_debt_service: Decimal
    monthly_debt_service: Decimal
    rating: DSCRRating
    max_loan_amount: Decimal  # Supportable at the target DSCR

    @property
    def rating_label(self) -> str:
        return self.rating.label


@dataclass(frozen=True)
class RateSensitivityEntry:
    rate: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal
    change_from_base: Decimal


@dataclass(frozen=True)
class RateSensitivityResult:
    base_rate: Decimal
    base_payment: Decimal
    entries: tuple[RateSensitivityEntry, ...] = ()
