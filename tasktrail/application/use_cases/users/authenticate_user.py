"""Use case for authenticating a user."""

import logging

from sqlalchemy.orm import Session

from tasktrail.domain.entities import User
from tasktrail.domain.exceptions import InvalidCredentialsError
from tasktrail.infrastructure.repositories import UserRepository
from tasktrail.infrastructure.security import dummy_verify, verify_password
from .validators import normalize_email

logger = logging.getLogger(__name__)


def authenticate_user(session: Session, email: str, password: str) -> User:
    """Return the user matching the credentials.

    An unknown email and a wrong password raise the same
    :class:`InvalidCredentialsError` so callers cannot tell which accounts exist.
    """

    repository = UserRepository(session)
    user = repository.get_by_email(normalize_email(email))

    if user is None:
        dummy_verify()
        logger.info("Rejected login for unknown account")
        raise InvalidCredentialsError()

    if not verify_password(password, user.password):
        logger.info("Rejected login with wrong password", extra={"user_id": user.id})
        raise InvalidCredentialsError()

    return user
