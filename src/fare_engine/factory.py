"""Wiring of settings into ready-to-use engines."""

import logging

from fare_engine.catalog import VehicleCatalog, default_catalog
from fare_engine.clock import Clock
from fare_engine.engine import FareEngine
from fare_engine.fare_logging import setup_logging
from fare_engine.quoter import MultiVehicleQuoter
from fare_engine.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    setup_logging(
        level=settings.logging.level,
        json_output=settings.logging.format == "json",
        environment=settings.logging.environment,
    )


def build_engine(
    settings: Settings | None = None,
    catalog: VehicleCatalog | None = None,
    clock: Clock | None = None,
) -> FareEngine:
    """Build a FareEngine from settings.

    Raises InvalidConfiguration before any request is accepted if the
    configured policy, catalog or time zone is invalid.
    """
    settings = settings or get_settings()
    policy = settings.pricing.to_policy()
    timezone = settings.pricing.to_timezone()
    catalog = catalog or default_catalog()

    logger.info(
        "Fare engine ready: %d vehicle classes, margin x%.2f, fares %g-%g, timezone %s",
        len(catalog),
        policy.operational_margin,
        policy.minimum_fare,
        policy.maximum_fare,
        settings.pricing.timezone,
    )
    return FareEngine(catalog=catalog, policy=policy, clock=clock, timezone=timezone)


def build_quoter(
    settings: Settings | None = None,
    catalog: VehicleCatalog | None = None,
    clock: Clock | None = None,
) -> MultiVehicleQuoter:
    return MultiVehicleQuoter(build_engine(settings, catalog, clock))
