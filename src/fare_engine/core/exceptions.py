"""Standardized exception hierarchy for the fare engine."""

from typing import Any


class FareEngineError(Exception):
    """Base exception for all fare engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def kind(self) -> str:
        return type(self).__name__


class PermanentError(FareEngineError):
    """Errors that will not succeed on retry.

    Fare computation is pure, so every error the engine raises is permanent.
    """

    pass


class ValidationError(PermanentError):
    """Invalid request input."""

    pass


class InvalidDistance(ValidationError):
    """Trip distance is not a positive, finite number."""

    pass


class InvalidDuration(ValidationError):
    """Supplied trip duration is negative or not finite."""

    pass


class InvalidFuelPrice(ValidationError):
    """Fuel price is non-positive or outside the allowed range."""

    pass


class NotFoundError(PermanentError):
    """Requested entity does not exist."""

    pass


class UnknownVehicleClass(NotFoundError):
    """Vehicle class id is not registered in the catalog."""

    pass


class ConfigurationError(PermanentError):
    """Missing or invalid configuration."""

    pass


class InvalidConfiguration(ConfigurationError):
    """Policy or catalog values outside their allowed range."""

    pass


class NoValidFares(PermanentError):
    """Every vehicle class failed while estimating a fare range."""

    pass
