"""Vehicle classes and the registry the fare engine prices against."""

import math
from collections.abc import Iterable, Iterator
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator

from fare_engine.core.exceptions import InvalidConfiguration, UnknownVehicleClass


class VehicleClass(BaseModel):
    """Cost and performance attributes of one bookable vehicle class."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    base_fare: float
    per_km_rate: float
    per_min_rate: float
    fuel_efficiency: float  # km per liter
    avg_speed: float  # km/h in city traffic
    capacity: int
    female_allowed: bool = True
    description: str = ""

    @model_validator(mode="after")
    def validate_attributes(self) -> Self:
        if not self.id:
            raise InvalidConfiguration("Vehicle class id must not be empty")

        for field in ("base_fare", "per_km_rate", "per_min_rate"):
            value = getattr(self, field)
            if not math.isfinite(value) or value < 0:
                raise InvalidConfiguration(
                    f"Vehicle class {self.id!r}: {field} must be a non-negative number",
                    details={"vehicle_type": self.id, "field": field, "value": value},
                )

        for field in ("fuel_efficiency", "avg_speed", "capacity"):
            value = getattr(self, field)
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfiguration(
                    f"Vehicle class {self.id!r}: {field} must be positive",
                    details={"vehicle_type": self.id, "field": field, "value": value},
                )
        return self


class VehicleCatalog:
    """Immutable registry of vehicle classes, in registration order."""

    def __init__(self, vehicle_classes: Iterable[VehicleClass]) -> None:
        classes: dict[str, VehicleClass] = {}
        for vehicle in vehicle_classes:
            if vehicle.id in classes:
                raise InvalidConfiguration(
                    f"Duplicate vehicle class id: {vehicle.id}",
                    details={"vehicle_type": vehicle.id},
                )
            classes[vehicle.id] = vehicle

        if not classes:
            raise InvalidConfiguration("Vehicle catalog must contain at least one class")

        self._classes = classes
        self._ids = tuple(classes)

    def lookup(self, vehicle_type: str) -> VehicleClass:
        try:
            return self._classes[vehicle_type]
        except KeyError:
            raise UnknownVehicleClass(
                f"Unsupported vehicle type: {vehicle_type}",
                details={"vehicle_type": vehicle_type, "known": list(self._ids)},
            ) from None

    def list_ids(self) -> tuple[str, ...]:
        return self._ids

    def __contains__(self, vehicle_type: object) -> bool:
        return vehicle_type in self._classes

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[VehicleClass]:
        return iter(self._classes.values())

    def __repr__(self) -> str:
        return f"VehicleCatalog(ids={list(self._ids)})"


DEFAULT_VEHICLE_CLASSES: tuple[VehicleClass, ...] = (
    VehicleClass(
        id="bike",
        name="Bike",
        base_fare=80,
        per_km_rate=15,
        per_min_rate=3,
        fuel_efficiency=45,
        avg_speed=25,
        capacity=1,
        description="Fast and economical for single passengers",
    ),
    VehicleClass(
        id="auto",
        name="Auto",
        base_fare=100,
        per_km_rate=18,
        per_min_rate=4,
        fuel_efficiency=18,
        avg_speed=20,
        capacity=3,
        description="Good balance of comfort and affordability",
    ),
    VehicleClass(
        id="car",
        name="Car",
        base_fare=150,
        per_km_rate=25,
        per_min_rate=5,
        fuel_efficiency=12,
        avg_speed=30,
        capacity=4,
        description="Maximum comfort and space for families",
    ),
)


def default_catalog() -> VehicleCatalog:
    """Catalog with the reference bike, auto and car classes."""
    return VehicleCatalog(DEFAULT_VEHICLE_CLASSES)
