"""Staff registration service."""

import logging

from django.db import IntegrityError, transaction
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> User:
    """
    Create a staff account.

    Args:
        email: Sign-in email, must be unused
        password: Plain password (will be hashed)
        display_name: Optional name shown in the UI

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is already registered
    """
    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            display_name=display_name
        )
    except IntegrityError:
        raise UserRegistrationError("An account with this email already exists")

    logger.info("Registered staff account %s", user.id)
    return user
