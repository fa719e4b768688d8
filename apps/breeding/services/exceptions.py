"""Domain-specific exceptions for breeding services."""


class BreedingServiceError(Exception):
    """Base exception for breeding services."""
    pass


class CoupleNotFoundError(BreedingServiceError):
    """Raised when couple does not exist for the account."""
    pass


class NestNotFoundError(BreedingServiceError):
    """Raised when nest does not exist for the account."""
    pass


class EggNotFoundError(BreedingServiceError):
    """Raised when egg does not exist for the account."""
    pass


class InvalidBreedingDataError(BreedingServiceError):
    """Raised when couple, nest or egg data fails validation."""
    pass


class NestNotActiveError(BreedingServiceError):
    """Raised when hatching a nest that has already hatched."""
    pass


class InvalidHatchCountError(BreedingServiceError):
    """Raised when the hatch count is outside 1..egg count."""
    pass
