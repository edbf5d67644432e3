"""Errors raised by the ride service and its storage."""


class TaxiError(Exception):
    """Base class for every ride-related error."""

    message = "taxi error"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.message)


class RideNotFoundError(TaxiError):
    message = "ride not found"


class RideIDRequiredError(TaxiError):
    message = "ride ID is required"


class OriginRequiredError(TaxiError):
    message = "origin is required"


class DestinationRequiredError(TaxiError):
    message = "destination is required"


class PassengerIDRequiredError(TaxiError):
    message = "passenger ID is required"


class InvalidRideStatusError(TaxiError):
    message = "invalid ride status"


class CannotChangeCompletedRideError(TaxiError):
    message = "cannot change completed ride"


class DriverIDRequiredError(TaxiError):
    message = "drive ID is required"


class CannotAssignDriverToNonPendingRideError(TaxiError):
    message = "cannot assign driver to non pending ride"


class RideAlreadyAssignedError(TaxiError):
    message = "ride already assigned"


class DriverAlreadyAssignedToRideError(TaxiError):
    message = "this driver already assigned to this ride"