from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class TaxSavingsEntry:
    year: int
    with_cost_seg: Decimal  # Tax effect of accelerated depreciation
    without_cost_seg: Decimal  # Tax effect of straight-line depreciation
    annual_savings: Decimal
    cumulative_savings: Decimal


@dataclass(frozen=True)
class AssetBreakdownEntry:
    category: str
    amount: Decimal
    percentage: Decimal  # % of total asset cost basis
    recovery_period: Decimal


@dataclass(frozen=True)
class DepreciationComparisonEntry:
    year: int
    accelerated: Decimal
    straight_line: Decimal
    difference: Decimal


@dataclass(frozen=True)
class FirstYearAnalysis:
    bonus_depreciation: Decimal = Decimal("0")
    regular_first_year: Decimal = Decimal("0")
    total_first_year: Decimal = Decimal("0")
    tax_savings: Decimal = Decimal("0")


@dataclass(frozen=True)
class StudySummary:
    total_reclassified: Decimal = Decimal("0")
    total_first_year_deduction: Decimal = Decimal("0")
    total_tax_savings: Decimal = Decimal("0")
    npv_tax_savings: Decimal = Decimal("0")
    effective_rate: Decimal = Decimal("0")  # First-year tax savings as % of purchase price


@dataclass(frozen=True)
class StudyReport:
    summary: StudySummary
    asset_breakdown: tuple[AssetBreakdownEntry, ...] = ()
    depreciation_schedule: tuple[DepreciationComparisonEntry, ...] = ()
    tax_savings_schedule: tuple[TaxSavingsEntry, ...] = ()
    first_year_analysis: FirstYearAnalysis = field(default_factory=FirstYearAnalysis)
    bonus_rate: Decimal = Decimal("0")


@dataclass(frozen=True)
class CombinedScheduleEntry:
    year: int
    cost_seg_savings: Decimal
    refi_savings: Decimal
    cumulative_benefit: Decimal


@dataclass(frozen=True)
class CombinedAnalysisResult:
    # Cost segregation
    cost_seg_first_year_savings: Decimal
    cost_seg_five_year_savings: Decimal
    reclassified_percentage: Decimal

    # Refinance
    current_monthly_payment: Decimal
    new_monthly_payment: Decimal
    monthly_savings: Decimal
    refi_break_even_months: int | None
    refi_total_savings: Decimal

    # Combined
    total_year1_benefit: Decimal
    total_five_year_benefit: Decimal
    months_saved_on_mortgage: int
    additional_interest_saved: Decimal
    combined_schedule: tuple[CombinedScheduleEntry, ...] = ()
