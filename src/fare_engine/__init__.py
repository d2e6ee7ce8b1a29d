"""Ride fare computation: vehicle classes, pricing policy, surge and quotes."""

from fare_engine.catalog import VehicleCatalog, VehicleClass, default_catalog
from fare_engine.clock import Clock, FixedClock, SystemClock
from fare_engine.core.exceptions import (
    FareEngineError,
    InvalidConfiguration,
    InvalidDistance,
    InvalidDuration,
    InvalidFuelPrice,
    NoValidFares,
    UnknownVehicleClass,
)
from fare_engine.engine import FareBreakdown, FareDetails, FareEngine, FareRequest, FareResult
from fare_engine.factory import build_engine, build_quoter, configure_logging
from fare_engine.policy import HourWindow, PeakWindow, PricingPolicy
from fare_engine.quoter import FareFailure, FareRange, MultiVehicleQuoter
from fare_engine.time_classifier import is_night_time, is_peak_hour
from fare_engine.validation import ValidationResult, validate_fare_params

__all__ = [
    "Clock",
    "FareBreakdown",
    "FareDetails",
    "FareEngine",
    "FareEngineError",
    "FareFailure",
    "FareRange",
    "FareRequest",
    "FareResult",
    "FixedClock",
    "HourWindow",
    "InvalidConfiguration",
    "InvalidDistance",
    "InvalidDuration",
    "InvalidFuelPrice",
    "MultiVehicleQuoter",
    "NoValidFares",
    "PeakWindow",
    "PricingPolicy",
    "SystemClock",
    "UnknownVehicleClass",
    "ValidationResult",
    "VehicleCatalog",
    "VehicleClass",
    "build_engine",
    "build_quoter",
    "configure_logging",
    "default_catalog",
    "is_night_time",
    "is_peak_hour",
    "validate_fare_params",
]
