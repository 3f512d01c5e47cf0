import logging
from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "COSTSEG_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Study defaults
    default_discount_rate: Decimal = Decimal("5")

    # Bonus depreciation percentage by placed-in-service year (Congress changes these)
    # Property placed in service after Jan 19, 2025: 100% restored
    bonus_depreciation_rate: dict[int, Decimal] = {
        2022: Decimal("100"),
        2023: Decimal("80"),
        2024: Decimal("60"),
        2025: Decimal("100"),
        2026: Decimal("100"),
        2027: Decimal("80"),
    }

    # Combined cost seg + refinance analysis
    combined_schedule_years: int = 10


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for hosts embedding the engine."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
