"""Staff sign-in service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check email and password and stamp the login time.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=User.objects.normalize_email(email))
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid email or password")

    if not user.check_password(password):
        logger.warning("Failed sign-in for %s", user.id)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
