"""Single-vehicle fare computation."""

import logging
import math
from datetime import UTC, datetime, tzinfo
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fare_engine.catalog import VehicleCatalog, VehicleClass
from fare_engine.clock import Clock, SystemClock
from fare_engine.core.exceptions import InvalidDistance, InvalidDuration
from fare_engine.core.rounding import round_half_up, round_to
from fare_engine.policy import PricingPolicy
from fare_engine.time_classifier import is_night_time, is_peak_hour

logger = logging.getLogger(__name__)

PEAK_HOUR_REASON = "Peak hour surge"
NIGHT_CHARGE_REASON = "Night charge"


class FareRequest(BaseModel):
    """Trip parameters for pricing one vehicle class."""

    model_config = ConfigDict(frozen=True)

    distance_km: float
    vehicle_type: str
    duration_min: float | None = None
    fuel_price: float | None = None
    trip_time: datetime | None = None
    include_surge: bool = True


class FareBreakdown(BaseModel):
    """Fare components in whole currency units.

    Each field is rounded on its own, so the parts can differ from total by 1.
    """

    model_config = ConfigDict(frozen=True)

    base_fare: int
    distance_charge: int
    time_charge: int
    fuel_cost: int
    subtotal: int
    surge_amount: int
    total: int


class FareDetails(BaseModel):
    """Inputs the fare was actually computed from."""

    model_config = ConfigDict(frozen=True)

    distance_km: float
    duration_min: int
    billable_distance_km: float
    billable_time_min: float
    fuel_price: float
    trip_time: datetime
    surge_multiplier: float = Field(ge=1.0)
    surge_reasons: tuple[str, ...] = ()
    is_peak_hour: bool
    is_night_time: bool


class FareResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    vehicle_type: str
    vehicle: VehicleClass
    breakdown: FareBreakdown
    details: FareDetails


class FareEngine:
    """Prices one trip for one vehicle class.

    The engine holds only immutable configuration, so one instance can serve
    concurrent callers. Requests without a trip time are stamped from the
    injected clock, and every timestamp is read in the engine's time zone
    before peak and night checks.
    """

    def __init__(
        self,
        catalog: VehicleCatalog,
        policy: PricingPolicy | None = None,
        clock: Clock | None = None,
        timezone: tzinfo = UTC,
    ) -> None:
        self.catalog = catalog
        self.policy = policy or PricingPolicy()
        self.timezone = timezone
        self.clock = clock or SystemClock(timezone)

    def quote(self, distance_km: float, vehicle_type: str, **kwargs: Any) -> FareResult:
        """Keyword shorthand for calculate(FareRequest(...))."""
        return self.calculate(
            FareRequest(distance_km=distance_km, vehicle_type=vehicle_type, **kwargs)
        )

    def calculate(self, request: FareRequest) -> FareResult:
        """
        Calculate the fare for a trip.

        Raises:
            InvalidDistance: distance is not positive, or exceeds policy.max_distance_km.
            UnknownVehicleClass: vehicle type is not in the catalog.
            InvalidFuelPrice: fuel price is non-positive or above the policy maximum.
            InvalidDuration: supplied duration is negative, or exceeds policy.max_duration_min.
        """
        policy = self.policy
        distance_km = self._check_distance(request.distance_km)
        vehicle = self.catalog.lookup(request.vehicle_type)
        fuel_price = (
            policy.default_fuel_price
            if request.fuel_price is None
            else policy.check_fuel_price(request.fuel_price)
        )

        if request.duration_min is None:
            duration_min: float = self._estimate_duration(distance_km, vehicle)
        else:
            duration_min = self._check_duration(request.duration_min)

        # Short trips are billed as if they met the minimums
        billable_distance = max(distance_km, policy.min_billable_distance_km)
        billable_time = max(duration_min, policy.min_billable_time_min)

        base_fare = vehicle.base_fare
        distance_charge = billable_distance * vehicle.per_km_rate
        time_charge = billable_time * vehicle.per_min_rate
        fuel_cost = billable_distance / vehicle.fuel_efficiency * fuel_price

        subtotal = base_fare + distance_charge + time_charge + fuel_cost
        subtotal *= policy.operational_margin

        trip_time = self._localize(request.trip_time or self.clock.now())
        peak = is_peak_hour(trip_time, policy.peak_windows)
        night = is_night_time(trip_time, policy.night_window)

        surge_multiplier = 1.0
        surge_reasons: list[str] = []
        if request.include_surge:
            if peak:
                surge_multiplier *= policy.peak_hour_multiplier
                surge_reasons.append(PEAK_HOUR_REASON)
            if night:
                surge_multiplier *= policy.night_multiplier
                surge_reasons.append(NIGHT_CHARGE_REASON)

        surge_amount = subtotal * (surge_multiplier - 1)
        total = subtotal * surge_multiplier

        # Clamped after surge: the ceiling can absorb all of it
        total = min(max(total, policy.minimum_fare), policy.maximum_fare)

        breakdown = FareBreakdown(
            base_fare=round_half_up(base_fare),
            distance_charge=round_half_up(distance_charge),
            time_charge=round_half_up(time_charge),
            fuel_cost=round_half_up(fuel_cost),
            subtotal=round_half_up(subtotal),
            surge_amount=round_half_up(surge_amount),
            total=round_half_up(total),
        )
        details = FareDetails(
            distance_km=distance_km,
            duration_min=round_half_up(duration_min),
            billable_distance_km=billable_distance,
            billable_time_min=billable_time,
            fuel_price=fuel_price,
            trip_time=trip_time,
            surge_multiplier=round_to(surge_multiplier, 2),
            surge_reasons=tuple(surge_reasons),
            is_peak_hour=peak,
            is_night_time=night,
        )

        logger.debug(
            "Priced %s: %.2f km, %.0f min, surge x%.2f, total %d",
            vehicle.id,
            billable_distance,
            billable_time,
            surge_multiplier,
            breakdown.total,
        )
        return FareResult(
            vehicle_type=vehicle.id,
            vehicle=vehicle,
            breakdown=breakdown,
            details=details,
        )

    def estimate_duration(self, distance_km: float, vehicle_type: str) -> int:
        """Travel time in whole minutes at the vehicle class's average speed."""
        distance_km = self._check_distance(distance_km)
        return self._estimate_duration(distance_km, self.catalog.lookup(vehicle_type))

    def _estimate_duration(self, distance_km: float, vehicle: VehicleClass) -> int:
        return round_half_up(distance_km / vehicle.avg_speed * 60)

    def _localize(self, timestamp: datetime) -> datetime:
        # Naive timestamps are already wall-clock time in the canonical zone
        if timestamp.tzinfo is None:
            return timestamp
        return timestamp.astimezone(self.timezone)

    def _check_distance(self, distance_km: float) -> float:
        if (
            isinstance(distance_km, bool)
            or not isinstance(distance_km, int | float)
            or not math.isfinite(distance_km)
            or distance_km <= 0
            or distance_km > self.policy.max_distance_km
        ):
            raise InvalidDistance(
                f"Invalid distance provided: {distance_km}",
                details={
                    "distance_km": distance_km,
                    "max_distance_km": self.policy.max_distance_km,
                },
            )
        return float(distance_km)

    def _check_duration(self, duration_min: float) -> float:
        if (
            not math.isfinite(duration_min)
            or duration_min < 0
            or duration_min > self.policy.max_duration_min
        ):
            raise InvalidDuration(
                f"Invalid duration provided: {duration_min}",
                details={
                    "duration_min": duration_min,
                    "max_duration_min": self.policy.max_duration_min,
                },
            )
        return float(duration_min)
