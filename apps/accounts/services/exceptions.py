"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class DuplicateAccountError(AccountsServiceError):
    """Raised when an account with this email already exists."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when the password does not match the account."""
    pass


class AccountNotFoundError(AccountsServiceError):
    """
    Raised when no account is registered for the email.

    Carries a corrective suggestion that clients show next to the error.
    """

    suggestion = "No account uses this email address. Create an account instead."

    def __init__(self, message="Account not found", suggestion=None):
        super().__init__(message)
        if suggestion is not None:
            self.suggestion = suggestion


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass
