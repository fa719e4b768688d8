"""Domain exceptions for aviaries app."""


class AviariesServiceError(Exception):
    """Base exception for all aviaries service errors."""
    pass


class AviaryNotFoundError(AviariesServiceError):
    """Aviary does not exist or belongs to another account."""
    pass


class InvalidAviaryError(AviariesServiceError):
    """Aviary name is missing or capacity is below 1."""
    pass
