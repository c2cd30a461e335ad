class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a check-in request is missing fields or carries malformed values."""


class OutOfRangeError(DomainError):
    """Raised when the submitted position lies outside the site geofence."""

    def __init__(self, message: str, *, distance_meters: float):
        super().__init__(message)
        self.distance_meters = distance_meters


class DuplicateError(DomainError):
    """Raised when the device has already checked in on the same calendar day."""


class PersistenceError(Exception):
    """Raised when the durable check-in file could not be written."""


class ReportDeliveryError(Exception):
    """Raised when the daily report email could not be delivered."""
