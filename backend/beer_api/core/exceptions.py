"""
Custom exceptions for the application.
Following SOLID principles - centralized error handling.
"""


class BeerApiError(Exception):
    """Base class for every error raised by the beer API."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidBeerIdError(BeerApiError):
    """Path identifier is not a base-10 integer in the 64-bit range."""

    pass


class PayloadDecodeError(BeerApiError):
    """Request body could not be decoded into a Beer."""

    pass


class BeerValidationError(BeerApiError, ValueError):
    """Beer failed its domain validation rules."""

    pass


class BeerNotFoundError(BeerApiError, LookupError):
    """Raised when the requested beer does not exist."""

    def __init__(self, beer_id: int):
        super().__init__(f"beer {beer_id} not found")
        self.beer_id = beer_id


class BeerRepositoryError(BeerApiError):
    """
    Storage backend failure.
    Wraps SQLAlchemy errors so callers get a readable message.
    """

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"database {operation} failed: {cause}")
        self.operation = operation
