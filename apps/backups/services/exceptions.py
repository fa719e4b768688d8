"""Domain-specific exceptions for backups services."""


class BackupsServiceError(Exception):
    """Base exception for backups services."""
    pass


class BackupStoreError(BackupsServiceError):
    """Raised when a collection store cannot be read or written."""
    pass


class InvalidBackupError(BackupsServiceError):
    """Raised when imported or restored data fails validation."""
    pass


class UnsupportedFormatError(BackupsServiceError):
    """Raised when an export format is not 'text' or 'json'."""
    pass


class NoBackupFoundError(BackupsServiceError):
    """Raised when restoring an account that has no stored backup."""
    pass
