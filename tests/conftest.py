"""Canonical test fixtures used across all engine tests.

Fixture: $3M commercial property, 20% land, typical cost seg allocation.
Investor: 37% marginal rate, 5% discount rate, 100% bonus (placed in service 2025).
"""

import pytest
from decimal import Decimal

from costseg.models.assets import StudyAsset, StudyInput


@pytest.fixture
def commercial_assets() -> tuple[StudyAsset, ...]:
    """Typical commercial allocation of $3M (8/7/10/55/20)."""
    return (
        StudyAsset("personal_property_5yr", Decimal("240000"), Decimal("5")),
        StudyAsset("personal_property_7yr", Decimal("210000"), Decimal("7")),
        StudyAsset("land_improvements_15yr", Decimal("300000"), Decimal("15")),
        StudyAsset("building_39yr", Decimal("1650000"), Decimal("39")),
        StudyAsset("land", Decimal("600000"), Decimal("0")),
    )


@pytest.fixture
def commercial_study(commercial_assets) -> StudyInput:
    return StudyInput(
        property_type="commercial",
        purchase_price=Decimal("3000000"),
        building_value=Decimal("2400000"),
        study_year=2025,
        tax_rate=Decimal("37"),
        discount_rate=Decimal("5"),
        bonus_rate=Decimal("100"),
        assets=commercial_assets,
        property_address="100 Main St, Boca Raton, FL",
        land_value=Decimal("600000"),
    )


@pytest.fixture
def residential_study() -> StudyInput:
    """$1M residential rental with a typical allocation (10/5/8/57/20)."""
    return StudyInput(
        property_type="residential",
        purchase_price=Decimal("1000000"),
        building_value=Decimal("800000"),
        study_year=2025,
        tax_rate=Decimal("35"),
        discount_rate=Decimal("6"),
        bonus_rate=Decimal("100"),
        assets=(
            StudyAsset("personal_property_5yr", Decimal("100000"), Decimal("5")),
            StudyAsset("personal_property_7yr", Decimal("50000"), Decimal("7")),
            StudyAsset("land_improvements_15yr", Decimal("80000"), Decimal("15")),
            StudyAsset("building_27_5yr", Decimal("570000"), Decimal("27.5")),
            StudyAsset("land", Decimal("200000"), Decimal("0")),
        ),
    )
