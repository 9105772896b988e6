"""
Custom exceptions for the flight_progress package.

The computation core is total for flight data and never raises on
malformed timestamps or degenerate geometry. These exceptions cover
configuration mistakes and payloads the host layer cannot use at all.
"""


class FlightProgressError(Exception):
    """Base exception for all flight_progress errors."""

    pass


class InvalidEngineConfigError(FlightProgressError, ValueError):
    """Raised when an EngineConfig field has an invalid value."""

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        self.field_name = field_name
        self.value = value
        message = f"Invalid {field_name}={value!r}: {reason}"
        super().__init__(message)


class FlightDetailParseError(FlightProgressError):
    """Raised when a flight-detail payload cannot be turned into a request."""

    def __init__(self, message: str = "Flight detail payload is not usable") -> None:
        super().__init__(message)
