"""Advisory validation of raw fare parameters, e.g. from a booking form.

Unlike FareEngine, this never raises: it collects every problem so a caller
can show them all at once.
"""

import math

from pydantic import BaseModel, Field

from fare_engine.catalog import VehicleCatalog

MAX_DISTANCE_KM = 1000
MAX_FUEL_PRICE = 1000


class ValidationResult(BaseModel):
    errors: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_fare_params(
    distance_km: float | None,
    vehicle_type: str | None = None,
    fuel_price: float | None = None,
    catalog: VehicleCatalog | None = None,
    max_distance_km: float = MAX_DISTANCE_KM,
    max_fuel_price: float = MAX_FUEL_PRICE,
) -> ValidationResult:
    """Check fare parameters without pricing them.

    Vehicle types are only checked when a catalog is given.
    """
    errors: list[str] = []

    if distance_km is None or not math.isfinite(distance_km) or distance_km <= 0:
        errors.append("Distance must be greater than 0")
    elif distance_km > max_distance_km:
        errors.append(f"Distance too large (max {max_distance_km:g} km)")

    if vehicle_type is not None and catalog is not None and vehicle_type not in catalog:
        errors.append(f"Invalid vehicle type: {vehicle_type}")

    if fuel_price is not None and (
        not math.isfinite(fuel_price) or fuel_price <= 0 or fuel_price > max_fuel_price
    ):
        errors.append("Invalid fuel price")

    return ValidationResult(errors=errors)
