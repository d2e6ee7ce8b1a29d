"""Fan-out pricing across every vehicle class in the catalog."""

import logging
from collections.abc import Iterable
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from fare_engine.core.exceptions import FareEngineError, NoValidFares
from fare_engine.engine import FareEngine, FareRequest, FareResult
from fare_engine.fare_logging import log_context, log_quote_context

logger = logging.getLogger(__name__)


class FareFailure(BaseModel):
    """A vehicle class that could not be priced inside a batch."""

    model_config = ConfigDict(frozen=True)

    vehicle_type: str
    error_kind: str
    message: str

    @classmethod
    def from_error(cls, vehicle_type: str, error: FareEngineError) -> "FareFailure":
        return cls(vehicle_type=vehicle_type, error_kind=error.kind, message=error.message)


class FareRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    fares: dict[str, FareResult | FareFailure]


class MultiVehicleQuoter:
    """Prices the same trip for every vehicle class.

    A class that fails validation is recorded as a FareFailure and the rest
    of the batch still runs.
    """

    def __init__(self, engine: FareEngine) -> None:
        self.engine = engine

    def quote_all(
        self,
        distance_km: float,
        vehicle_types: Iterable[str] | None = None,
        **trip: Any,
    ) -> dict[str, FareResult | FareFailure]:
        """Price the trip for each vehicle class, in catalog order.

        Args:
            distance_km: Trip distance in kilometers
            vehicle_types: Classes to price instead of the whole catalog
            **trip: Remaining FareRequest fields except vehicle_type

        Returns:
            Mapping of vehicle type to its FareResult or FareFailure.
            Records logged for one batch share a quote_id.
        """
        if vehicle_types is None:
            vehicle_types = self.engine.catalog.list_ids()
        # One "now" for the whole batch so every class sees the same surge window
        if trip.get("trip_time") is None:
            trip["trip_time"] = self.engine.clock.now()

        fares: dict[str, FareResult | FareFailure] = {}
        with log_context(quote_id=uuid4().hex):
            for vehicle_type in vehicle_types:
                with log_quote_context(vehicle_type):
                    try:
                        request = FareRequest(
                            distance_km=distance_km, vehicle_type=vehicle_type, **trip
                        )
                        fares[vehicle_type] = self.engine.calculate(request)
                    except FareEngineError as e:
                        logger.warning(
                            "Failed to calculate fare for %s: %s", vehicle_type, e.message
                        )
                        fares[vehicle_type] = FareFailure.from_error(vehicle_type, e)
        return fares

    def estimate_range(
        self,
        distance_km: float,
        fuel_price: float | None = None,
        vehicle_types: Iterable[str] | None = None,
        **trip: Any,
    ) -> FareRange:
        """Cheapest and dearest surge-free fare across the catalog.

        Raises:
            NoValidFares: every vehicle class failed to price.
        """
        trip["include_surge"] = False
        fares = self.quote_all(distance_km, vehicle_types, fuel_price=fuel_price, **trip)

        totals = [fare.breakdown.total for fare in fares.values() if isinstance(fare, FareResult)]
        if not totals:
            failures = [fare for fare in fares.values() if isinstance(fare, FareFailure)]
            raise NoValidFares(
                "No valid fares calculated",
                details={"failures": [failure.model_dump() for failure in failures]},
            )

        return FareRange(min=min(totals), max=max(totals), fares=fares)
