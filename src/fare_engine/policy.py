"""Pricing policy: margins, surge multipliers, fare bounds and billing floors."""

import math
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fare_engine.core.exceptions import InvalidConfiguration, InvalidFuelPrice


class HourWindow(BaseModel):
    """Half-open [start_hour, end_hour) range on the 24h clock.

    A window whose start is after its end wraps past midnight, so
    HourWindow(start_hour=22, end_hour=6) covers 22:00-05:59.
    """

    model_config = ConfigDict(frozen=True)

    start_hour: int
    end_hour: int

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        if not (0 <= self.start_hour <= 23 and 0 <= self.end_hour <= 24):
            raise InvalidConfiguration(
                f"Hour window [{self.start_hour}, {self.end_hour}) is outside the 24h clock",
                details={"start_hour": self.start_hour, "end_hour": self.end_hour},
            )
        if self.start_hour == self.end_hour:
            raise InvalidConfiguration(
                f"Hour window [{self.start_hour}, {self.end_hour}) is empty",
                details={"start_hour": self.start_hour, "end_hour": self.end_hour},
            )
        return self

    @property
    def wraps_midnight(self) -> bool:
        return self.start_hour > self.end_hour

    def contains(self, hour: int) -> bool:
        if self.wraps_midnight:
            return hour >= self.start_hour or hour < self.end_hour
        return self.start_hour <= hour < self.end_hour


class PeakWindow(HourWindow):
    """Peak-hour window; never wraps past midnight."""

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        if self.wraps_midnight:
            raise InvalidConfiguration(
                f"Peak window [{self.start_hour}, {self.end_hour}) must start before it ends",
                details={"start_hour": self.start_hour, "end_hour": self.end_hour},
            )
        return self


DEFAULT_PEAK_WINDOWS: tuple[PeakWindow, ...] = (
    PeakWindow(start_hour=7, end_hour=10),  # Morning rush
    PeakWindow(start_hour=17, end_hour=20),  # Evening rush
)
DEFAULT_NIGHT_WINDOW = HourWindow(start_hour=22, end_hour=6)

_MULTIPLIERS = ("operational_margin", "peak_hour_multiplier", "night_multiplier")
_POSITIVE_VALUES = (
    "minimum_fare",
    "maximum_fare",
    "min_billable_distance_km",
    "min_billable_time_min",
    "default_fuel_price",
    "max_fuel_price",
    "max_distance_km",
    "max_duration_min",
)


class PricingPolicy(BaseModel):
    """Immutable pricing configuration.

    Construction raises InvalidConfiguration for any value out of range, so
    an engine can never be built on top of a broken policy.
    """

    model_config = ConfigDict(frozen=True)

    operational_margin: float = 1.15
    peak_hour_multiplier: float = 1.2
    night_multiplier: float = 1.1
    minimum_fare: float = 50
    maximum_fare: float = 5000
    min_billable_distance_km: float = 0.5
    min_billable_time_min: float = 2
    peak_windows: tuple[PeakWindow, ...] = Field(default=DEFAULT_PEAK_WINDOWS)
    night_window: HourWindow = Field(default=DEFAULT_NIGHT_WINDOW)
    default_fuel_price: float = 280
    max_fuel_price: float = 1000
    # Sanity limits on request magnitude; far beyond any real trip
    max_distance_km: float = 1_000_000
    max_duration_min: float = 10_000_000

    @model_validator(mode="after")
    def validate_ranges(self) -> Self:
        for field in _MULTIPLIERS:
            value = getattr(self, field)
            if not math.isfinite(value) or value < 1:
                raise InvalidConfiguration(
                    f"{field} must be a finite multiplier >= 1, got {value}",
                    details={"field": field, "value": value},
                )

        for field in _POSITIVE_VALUES:
            value = getattr(self, field)
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfiguration(
                    f"{field} must be a finite positive number, got {value}",
                    details={"field": field, "value": value},
                )

        if self.minimum_fare > self.maximum_fare:
            raise InvalidConfiguration(
                f"minimum_fare ({self.minimum_fare}) exceeds maximum_fare ({self.maximum_fare})",
                details={"minimum_fare": self.minimum_fare, "maximum_fare": self.maximum_fare},
            )

        if self.default_fuel_price > self.max_fuel_price:
            raise InvalidConfiguration(
                f"default_fuel_price ({self.default_fuel_price}) exceeds "
                f"max_fuel_price ({self.max_fuel_price})",
                details={
                    "default_fuel_price": self.default_fuel_price,
                    "max_fuel_price": self.max_fuel_price,
                },
            )
        return self

    def check_fuel_price(self, fuel_price: float) -> float:
        """Return fuel_price if it is usable under this policy."""
        if (
            isinstance(fuel_price, bool)
            or not isinstance(fuel_price, int | float)
            or not math.isfinite(fuel_price)
            or fuel_price <= 0
            or fuel_price > self.max_fuel_price
        ):
            raise InvalidFuelPrice(
                f"Invalid fuel price: {fuel_price}",
                details={"fuel_price": fuel_price, "max_fuel_price": self.max_fuel_price},
            )
        return float(fuel_price)

    def with_fuel_price(self, fuel_price: float) -> "PricingPolicy":
        """Copy of this policy with a different default fuel price."""
        price = self.check_fuel_price(fuel_price)
        return self.model_copy(update={"default_fuel_price": price})
