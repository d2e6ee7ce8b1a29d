"""Core utilities for the fare engine."""

from .exceptions import (
    ConfigurationError,
    FareEngineError,
    InvalidConfiguration,
    InvalidDistance,
    InvalidDuration,
    InvalidFuelPrice,
    NotFoundError,
    NoValidFares,
    PermanentError,
    UnknownVehicleClass,
    ValidationError,
)
from .rounding import round_half_up, round_to

__all__ = [
    "FareEngineError",
    "PermanentError",
    "ValidationError",
    "InvalidDistance",
    "InvalidDuration",
    "InvalidFuelPrice",
    "NotFoundError",
    "UnknownVehicleClass",
    "ConfigurationError",
    "InvalidConfiguration",
    "NoValidFares",
    "round_half_up",
    "round_to",
]
