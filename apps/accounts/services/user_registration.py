"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import DuplicateAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    name: str = ""
) -> User:
    """
    Register a new breeder account.

    Args:
        email: User's email address (trimmed and lower-cased)
        password: User's password (will be hashed)
        name: Optional display name

    Returns:
        Created User instance

    Raises:
        DuplicateAccountError: If an account with this email already exists
    """
    normalized_email = User.objects.normalize_email(email)

    if User.objects.filter(email=normalized_email).exists():
        raise DuplicateAccountError("An account with this email address already exists")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=normalized_email,
                password=password,
                name=name
            )
    except IntegrityError:
        # Concurrent registration with the same email won the race
        raise DuplicateAccountError("An account with this email address already exists")

    logger.info("Registered account %s", user.id)
    return user
