from datetime import tzinfo
from typing import Literal
from zoneinfo import ZoneInfoNotFoundError

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fare_engine.clock import resolve_timezone
from fare_engine.core.exceptions import InvalidConfiguration
from fare_engine.policy import HourWindow, PeakWindow, PricingPolicy


class PricingSettings(BaseSettings):
    """Pricing policy values, overridable through FARE_* variables.

    Range checks live in PricingPolicy so that a bad value surfaces as
    InvalidConfiguration whichever way the policy is built.
    """

    operational_margin: float = 1.15
    peak_hour_multiplier: float = 1.2
    night_multiplier: float = 1.1
    minimum_fare: float = 50
    maximum_fare: float = 5000
    min_billable_distance_km: float = 0.5
    min_billable_time_min: float = 2
    default_fuel_price: float = Field(default=280, description="Currency units per liter")
    max_fuel_price: float = 1000
    max_distance_km: float = 1_000_000
    max_duration_min: float = 10_000_000

    # JSON in the environment, e.g. FARE_PEAK_WINDOWS='[[7, 10], [17, 20]]'
    peak_windows: list[tuple[int, int]] = Field(default_factory=lambda: [(7, 10), (17, 20)])
    night_start_hour: int = 22
    night_end_hour: int = 6

    timezone: str = Field(
        default="UTC",
        description="Canonical zone used to read trip times for peak/night checks",
    )

    model_config = SettingsConfigDict(env_prefix="FARE_")

    def to_policy(self) -> PricingPolicy:
        return PricingPolicy(
            operational_margin=self.operational_margin,
            peak_hour_multiplier=self.peak_hour_multiplier,
            night_multiplier=self.night_multiplier,
            minimum_fare=self.minimum_fare,
            maximum_fare=self.maximum_fare,
            min_billable_distance_km=self.min_billable_distance_km,
            min_billable_time_min=self.min_billable_time_min,
            peak_windows=tuple(
                PeakWindow(start_hour=start, end_hour=end) for start, end in self.peak_windows
            ),
            night_window=HourWindow(
                start_hour=self.night_start_hour, end_hour=self.night_end_hour
            ),
            default_fuel_price=self.default_fuel_price,
            max_fuel_price=self.max_fuel_price,
            max_distance_km=self.max_distance_km,
            max_duration_min=self.max_duration_min,
        )

    def to_timezone(self) -> tzinfo:
        try:
            return resolve_timezone(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidConfiguration(
                f"Unknown time zone: {self.timezone}", details={"timezone": self.timezone}
            ) from e


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="FARE_LOG_")


class Settings(BaseSettings):
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
