"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import (
    AccountNotFoundError,
    InvalidCredentialsError,
    InactiveAccountError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email (matched case-insensitively)
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        AccountNotFoundError: If no account uses this email
        InvalidCredentialsError: If the password is wrong
        InactiveAccountError: If account is deactivated
    """
    normalized_email = User.objects.normalize_email(email)

    # Get user with lock to prevent race conditions on last_login
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=normalized_email)
        )
    except User.DoesNotExist:
        if not User.objects.exists():
            raise AccountNotFoundError(
                "No accounts have been registered yet",
                suggestion="Create an account first."
            )
        raise AccountNotFoundError("No account found for this email address")

    # Check password
    if not user.check_password(password):
        logger.info("Rejected login for account %s: wrong password", user.id)
        raise InvalidCredentialsError("Invalid email or password")

    # Check if active
    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    # Update last login
    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
