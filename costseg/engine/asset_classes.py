"""Cost segregation asset classes and typical reclassification percentages.

Percentages are industry averages from engineering-based studies. They are
kept exactly as published per property type, not normalized to 100.
"""

from decimal import Decimal, ROUND_HALF_UP

from costseg.errors import UnknownPropertyTypeError
from costseg.models.assets import AllocationEntry, AssetClass, RecoveryPeriod

TWO_PLACES = Decimal("0.01")

ASSET_CLASSES: tuple[AssetClass, ...] = (
    AssetClass(
        category="personal_property_5yr",
        recovery_period=RecoveryPeriod.FIVE_YEAR,
        description="5-Year Personal Property",
        examples=("Carpeting", "Appliances", "Task lighting", "Decorative fixtures"),
    ),
    AssetClass(
        category="personal_property_7yr",
        recovery_period=RecoveryPeriod.SEVEN_YEAR,
        description="7-Year Personal Property",
        examples=("Office furniture", "Cabinetry", "Security systems", "Signs"),
    ),
    AssetClass(
        category="land_improvements_15yr",
        recovery_period=RecoveryPeriod.FIFTEEN_YEAR,
        description="15-Year Land Improvements",
        examples=("Parking lots", "Landscaping", "Sidewalks", "Fencing", "Site utilities"),
    ),
    AssetClass(
        category="building_27_5yr",
        recovery_period=RecoveryPeriod.RESIDENTIAL,
        description="27.5-Year Residential Rental",
        examples=("Structural components", "HVAC (residential)", "Plumbing", "Electrical (building)"),
    ),
    AssetClass(
        category="building_39yr",
        recovery_period=RecoveryPeriod.NONRESIDENTIAL,
        description="39-Year Nonresidential",
        examples=("Structural components", "HVAC (commercial)", "Plumbing", "Electrical (building)"),
    ),
    AssetClass(
        category="land",
        recovery_period=None,
        description="Land (Non-depreciable)",
        examples=("Raw land value",),
    ),
)

# Categories that stay on the building's straight-line life (or are not depreciable)
BUILDING_CATEGORIES = frozenset({"building_27_5yr", "building_39yr", "land"})

RESIDENTIAL_PROPERTY_TYPES = frozenset({"residential", "multifamily"})

# % of total property value per asset class
TYPICAL_RECLASSIFICATION: dict[str, dict[str, Decimal]] = {
    "commercial": {
        "personal_property_5yr": Decimal("8"),
        "personal_property_7yr": Decimal("7"),
        "land_improvements_15yr": Decimal("10"),
        "building_39yr": Decimal("55"),
        "land": Decimal("20"),
    },
    "residential": {
        "personal_property_5yr": Decimal("10"),
        "personal_property_7yr": Decimal("5"),
        "land_improvements_15yr": Decimal("8"),
        "building_27_5yr": Decimal("57"),
        "land": Decimal("20"),
    },
    "mixed-use": {
        "personal_property_5yr": Decimal("9"),
        "personal_property_7yr": Decimal("6"),
        "land_improvements_15yr": Decimal("9"),
        "building_39yr": Decimal("56"),
        "land": Decimal("20"),
    },
    "industrial": {
        "personal_property_5yr": Decimal("12"),
        "personal_property_7yr": Decimal("8"),
        "land_improvements_15yr": Decimal("12"),
        "building_39yr": Decimal("48"),
        "land": Decimal("20"),
    },
    "retail": {
        "personal_property_5yr": Decimal("10"),
        "personal_property_7yr": Decimal("8"),
        "land_improvements_15yr": Decimal("8"),
        "building_39yr": Decimal("54"),
        "land": Decimal("20"),
    },
    "hospitality": {
        "personal_property_5yr": Decimal("15"),
        "personal_property_7yr": Decimal("10"),
        "land_improvements_15yr": Decimal("8"),
        "building_39yr": Decimal("47"),
        "land": Decimal("20"),
    },
    "healthcare": {
        "personal_property_5yr": Decimal("12"),
        "personal_property_7yr": Decimal("10"),
        "land_improvements_15yr": Decimal("6"),
        "building_39yr": Decimal("52"),
        "land": Decimal("20"),
    },
    "multifamily": {
        "personal_property_5yr": Decimal("12"),
        "personal_property_7yr": Decimal("5"),
        "land_improvements_15yr": Decimal("10"),
        "building_27_5yr": Decimal("53"),
        "land": Decimal("20"),
    },
}


def _profile(property_type: str) -> dict[str, Decimal]:
    percentages = TYPICAL_RECLASSIFICATION.get(property_type.lower())
    if percentages is None:
        raise UnknownPropertyTypeError(property_type, TYPICAL_RECLASSIFICATION)
    return percentages


def get_default_allocation(property_type: str, total_value: Decimal) -> list[AllocationEntry]:
    """Typical allocation of a property's value across asset classes.

    Each amount is rounded to the cent on its own, so the amounts may miss
    total_value by a few cents.

    Raises UnknownPropertyTypeError for property types without a profile.
    """
    percentages = _profile(property_type)

    breakdown: list[AllocationEntry] = []
    for asset_class in ASSET_CLASSES:
        pct = percentages.get(asset_class.category)
        if pct is None or pct <= 0:
            continue
        breakdown.append(AllocationEntry(
            category=asset_class.category,
            description=asset_class.description,
            amount=(total_value * pct / 100).quantize(TWO_PLACES, ROUND_HALF_UP),
            percentage=pct,
            recovery_period=asset_class.period_years,
        ))
    return breakdown


def straight_line_period(property_type: str) -> RecoveryPeriod:
    """27.5 years for residential rental property, 39 for everything else."""
    if property_type.lower() in RESIDENTIAL_PROPERTY_TYPES:
        return RecoveryPeriod.RESIDENTIAL
    return RecoveryPeriod.NONRESIDENTIAL


def is_building_category(category: str) -> bool:
    return category in BUILDING_CATEGORIES
