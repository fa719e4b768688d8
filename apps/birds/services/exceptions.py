"""Domain-specific exceptions for birds services."""


class BirdsServiceError(Exception):
    """Base exception for birds services."""
    pass


class BirdNotFoundError(BirdsServiceError):
    """Raised when bird does not exist for the account."""
    pass


class InvalidBirdError(BirdsServiceError):
    """Raised when bird data fails validation."""
    pass


class HealthRecordNotFoundError(BirdsServiceError):
    """Raised when health record does not exist for the account."""
    pass
