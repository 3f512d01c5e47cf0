"""Cost segregation study report: composes all engine sub-modules.

Pure computation. No I/O. StudyInput in, StudyReport out.

Pipeline (order matters):
    breakdown -> accelerated schedules -> straight-line baseline
    -> tax savings comparison -> NPV -> first-year analysis -> summary
"""

import logging
from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from costseg.engine.asset_classes import is_building_category, straight_line_period
from costseg.engine.bonus import bonus_rate_for_year, calculate_bonus_depreciation
from costseg.engine.depreciation import (
    calculate_depreciation,
    calculate_straight_line_depreciation,
    depreciation_amounts,
)
from costseg.engine.irr import calculate_npv
from costseg.engine.macrs_tables import get_macrs_rates, is_valid_recovery_period
from costseg.engine.tax_savings import calculate_tax_savings
from costseg.models.assets import StudyAsset, StudyInput
from costseg.models.results import (
    AssetBreakdownEntry,
    DepreciationComparisonEntry,
    FirstYearAnalysis,
    StudyReport,
    StudySummary,
    TaxSavingsEntry,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def _round(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def build_asset_breakdown(assets: Sequence[StudyAsset]) -> list[AssetBreakdownEntry]:
    """Every asset with its share of total cost basis, land included."""
    total = sum((a.cost_basis for a in assets), Decimal("0"))
    return [
        AssetBreakdownEntry(
            category=a.category,
            amount=_round(a.cost_basis),
            percentage=_round(a.cost_basis / total * 100) if total > 0 else Decimal("0"),
            recovery_period=a.recovery_period,
        )
        for a in assets
    ]


def depreciable_assets(assets: Sequence[StudyAsset]) -> list[StudyAsset]:
    """Assets with a MACRS table. Land and non-standard periods drop out here."""
    result: list[StudyAsset] = []
    for asset in assets:
        if asset.recovery_period == 0:
            continue
        if not is_valid_recovery_period(asset.recovery_period):
            logger.warning(
                "Skipping %s: unsupported recovery period %s",
                asset.category, asset.recovery_period,
            )
            continue
        result.append(asset)
    return result


def combine_accelerated_schedules(
    assets: Sequence[StudyAsset],
    bonus_rate: Decimal,
) -> list[Decimal]:
    """Sum per-asset MACRS + bonus schedules into one annual series."""
    schedules = [
        depreciation_amounts(calculate_depreciation(a.cost_basis, a.recovery_period, bonus_rate))
        for a in assets
    ]
    years = max((len(s) for s in schedules), default=0)

    combined: list[Decimal] = []
    for y in range(years):
        total = sum((s[y] for s in schedules if y < len(s)), Decimal("0"))
        combined.append(_round(total))
    return combined


def straight_line_baseline(property_type: str, building_value: Decimal) -> list[Decimal]:
    """Depreciation without cost seg: the whole building on its straight-line life."""
    period = straight_line_period(property_type)
    return depreciation_amounts(calculate_straight_line_depreciation(building_value, period))


def compare_schedules(
    accelerated: Sequence[Decimal],
    straight_line: Sequence[Decimal],
) -> list[DepreciationComparisonEntry]:
    years = max(len(accelerated), len(straight_line))
    schedule: list[DepreciationComparisonEntry] = []
    for y in range(years):
        acc = accelerated[y] if y < len(accelerated) else Decimal("0")
        sl = straight_line[y] if y < len(straight_line) else Decimal("0")
        schedule.append(DepreciationComparisonEntry(
            year=y + 1,
            accelerated=_round(acc),
            straight_line=_round(sl),
            difference=_round(acc - sl),
        ))
    return schedule


def first_year_analysis(
    assets: Sequence[StudyAsset],
    bonus_rate: Decimal,
    tax_rate: Decimal,
) -> FirstYearAnalysis:
    """Year-1 deduction from bonus results alone, independent of the full schedules."""
    total_bonus = Decimal("0")
    total_regular = Decimal("0")

    for asset in assets:
        result = calculate_bonus_depreciation(asset.cost_basis, asset.recovery_period, bonus_rate)
        total_bonus += result.bonus_amount
        first_pct = get_macrs_rates(asset.recovery_period)[0]
        total_regular += result.remaining_basis * first_pct / 100

    total_bonus = _round(total_bonus)
    total_regular = _round(total_regular)
    total_first_year = _round(total_bonus + total_regular)

    return FirstYearAnalysis(
        bonus_depreciation=total_bonus,
        regular_first_year=total_regular,
        total_first_year=total_first_year,
        tax_savings=_round(total_first_year * tax_rate / 100),
    )


def summarize(
    assets: Sequence[StudyAsset],
    purchase_price: Decimal,
    tax_savings: Sequence[TaxSavingsEntry],
    npv_tax_savings: Decimal,
    first_year: FirstYearAnalysis,
) -> StudySummary:
    reclassified = sum(
        (a.cost_basis for a in assets if not is_building_category(a.category)),
        Decimal("0"),
    )
    total_tax_savings = tax_savings[-1].cumulative_savings if tax_savings else Decimal("0")

    if purchase_price > 0:
        effective_rate = _round(first_year.tax_savings / purchase_price * 100)
    else:
        effective_rate = Decimal("0")

    return StudySummary(
        total_reclassified=_round(reclassified),
        total_first_year_deduction=first_year.total_first_year,
        total_tax_savings=total_tax_savings,
        npv_tax_savings=npv_tax_savings,
        effective_rate=effective_rate,
    )


def generate_study_report(study: StudyInput) -> StudyReport:
    """Run the full cost segregation study for one property.

    Never fails on a single bad asset: land and unsupported recovery
    periods are listed in the breakdown but left out of every schedule.
    """
    bonus_rate = study.bonus_rate
    if bonus_rate is None:
        bonus_rate = bonus_rate_for_year(study.study_year)

    breakdown = build_asset_breakdown(study.assets)
    depreciable = depreciable_assets(study.assets)

    accelerated = combine_accelerated_schedules(depreciable, bonus_rate)
    straight_line = straight_line_baseline(study.property_type, study.building_value)

    tax_savings = calculate_tax_savings(accelerated, straight_line, study.tax_rate)
    npv = calculate_npv([e.annual_savings for e in tax_savings], study.discount_rate)

    first_year = first_year_analysis(depreciable, bonus_rate, study.tax_rate)
    summary = summarize(study.assets, study.purchase_price, tax_savings, npv, first_year)

    logger.debug(
        "Study report: %d assets (%d depreciable), %d schedule years, NPV %s",
        len(study.assets), len(depreciable), len(tax_savings), npv,
    )

    return StudyReport(
        summary=summary,
        asset_breakdown=tuple(breakdown),
        depreciation_schedule=tuple(compare_schedules(accelerated, straight_line)),
        tax_savings_schedule=tuple(tax_savings),
        first_year_analysis=first_year,
        bonus_rate=bonus_rate,
    )
