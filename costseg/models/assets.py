from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class RecoveryPeriod(Enum):
    """MACRS recovery periods with a published rate table."""
    FIVE_YEAR = Decimal("5")
    SEVEN_YEAR = Decimal("7")
    FIFTEEN_YEAR = Decimal("15")
    RESIDENTIAL = Decimal("27.5")
    NONRESIDENTIAL = Decimal("39")

    @property
    def years(self) -> Decimal:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AssetClass:
    category: str
    recovery_period: RecoveryPeriod | None  # None = land (non-depreciable)
    description: str
    examples: tuple[str, ...] = ()

    @property
    def period_years(self) -> Decimal:
        return self.recovery_period.years if self.recovery_period else Decimal("0")


@dataclass(frozen=True)
class AllocationEntry:
    """Dollar allocation of a property's value to one asset class."""
    category: str
    description: str
    amount: Decimal
    percentage: Decimal  # % of total property value
    recovery_period: Decimal  # 0 for land


@dataclass(frozen=True)
class StudyAsset:
    """One caller-supplied line of a cost segregation study.

    recovery_period is kept raw: land (0) and non-standard periods are
    listed in the report but never depreciated.
    """
    category: str
    cost_basis: Decimal
    recovery_period: Decimal


@dataclass(frozen=True)
class StudyInput:
    property_type: str
    purchase_price: Decimal
    building_value: Decimal
    study_year: int
    tax_rate: Decimal  # e.g. Decimal("37") for 37%
    discount_rate: Decimal = Decimal("5")
    bonus_rate: Decimal | None = None  # None = look up by study_year
    assets: tuple[StudyAsset, ...] = field(default_factory=tuple)

    # Carried through for the host's report header
    property_address: str = ""
    land_value: Decimal = Decimal("0")
