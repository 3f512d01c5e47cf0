"""MACRS percentage tables (IRS Pub 946, Appendix A).

Half-year convention for 5, 7 and 15-year property; mid-month convention,
placed in service in month 1, for 27.5 and 39-year real property.
All rates are percentages (20.00 = 20%). Lookup only, no computation.
"""

from decimal import Decimal, InvalidOperation

from costseg.errors import InvalidRecoveryPeriodError
from costseg.models.assets import RecoveryPeriod


def _pcts(*values: str) -> tuple[Decimal, ...]:
    return tuple(Decimal(v) for v in values)


# 200% DB, HY. Carpeting, appliances, task lighting, decorative fixtures.
MACRS_5_YEAR = _pcts("20.00", "32.00", "19.20", "11.52", "11.52", "5.76")

# 200% DB, HY. Office furniture, cabinetry, security systems, signs.
MACRS_7_YEAR = _pcts("14.29", "24.49", "17.49", "12.49", "8.93", "8.92", "8.93", "4.46")

# 150% DB, HY. Parking lots, landscaping, sidewalks, fencing, site utilities.
MACRS_15_YEAR = _pcts(
    "5.00", "9.50", "8.55", "7.70", "6.93", "6.23", "5.90", "5.90",
    "5.91", "5.90", "5.91", "5.90", "5.91", "5.90", "5.91", "2.95",
)

# SL, MM. Year 1 = 11.5/12 of a full year; year 28 is the remaining basis.
MACRS_27_5_YEAR = _pcts("3.485", *(["3.636"] * 26), "1.970")

# SL, MM. Year 1 = 11.5/12 of a full year; year 40 is the remaining half month.
MACRS_39_YEAR = _pcts("2.4610", *(["2.5641"] * 38), "0.1070")

MACRS_TABLES: dict[RecoveryPeriod, tuple[Decimal, ...]] = {
    RecoveryPeriod.FIVE_YEAR: MACRS_5_YEAR,
    RecoveryPeriod.SEVEN_YEAR: MACRS_7_YEAR,
    RecoveryPeriod.FIFTEEN_YEAR: MACRS_15_YEAR,
    RecoveryPeriod.RESIDENTIAL: MACRS_27_5_YEAR,
    RecoveryPeriod.NONRESIDENTIAL: MACRS_39_YEAR,
}

VALID_PERIODS = tuple(p.years for p in RecoveryPeriod)


def parse_recovery_period(value) -> RecoveryPeriod:
    """Coerce 5, "27.5", Decimal("39"), ... to a RecoveryPeriod.

    Raises InvalidRecoveryPeriodError for anything without a rate table.
    """
    if isinstance(value, RecoveryPeriod):
        return value
    if isinstance(value, bool):
        raise InvalidRecoveryPeriodError(value, VALID_PERIODS)
    try:
        years = Decimal(str(value))
        return RecoveryPeriod(years)
    except (InvalidOperation, ValueError):
        raise InvalidRecoveryPeriodError(value, VALID_PERIODS) from None


def is_valid_recovery_period(value) -> bool:
    try:
        parse_recovery_period(value)
    except InvalidRecoveryPeriodError:
        return False
    return True


def get_macrs_rates(period) -> tuple[Decimal, ...]:
    """Annual depreciation percentages for a recovery period."""
    return MACRS_TABLES[parse_recovery_period(period)]
