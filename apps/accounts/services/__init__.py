"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateAccountError,
    InvalidCredentialsError,
    AccountNotFoundError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateAccountError',
    'InvalidCredentialsError',
    'AccountNotFoundError',
    'InactiveAccountError',
    # Services
    'register_user',
    'authenticate_user',
]
