import os

import pytest

from fare_engine.catalog import VehicleCatalog, default_catalog
from fare_engine.clock import FixedClock
from fare_engine.engine import FareEngine
from fare_engine.policy import PricingPolicy
from fare_engine.quoter import MultiVehicleQuoter
from tests.factories import OFF_PEAK


@pytest.fixture
def catalog() -> VehicleCatalog:
    return default_catalog()


@pytest.fixture
def policy() -> PricingPolicy:
    return PricingPolicy()


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to an off-peak weekday noon."""
    return FixedClock(OFF_PEAK)


@pytest.fixture
def engine(catalog, policy, clock) -> FareEngine:
    return FareEngine(catalog=catalog, policy=policy, clock=clock)


@pytest.fixture
def quoter(engine) -> MultiVehicleQuoter:
    return MultiVehicleQuoter(engine)


@pytest.fixture(autouse=True)
def clear_fare_env(monkeypatch):
    """Keep FARE_* variables from the host out of settings tests."""
    for key in list(os.environ):
        if key.startswith("FARE_"):
            monkeypatch.delenv(key)
