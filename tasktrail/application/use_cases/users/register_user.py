"""Use case for registering users."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktrail.domain.entities import User
from tasktrail.domain.exceptions import DuplicateUserError, StorageFailureError
from tasktrail.infrastructure.database import transaction
from tasktrail.infrastructure.repositories import UserRepository
from tasktrail.infrastructure.security import get_password_hash
from .validators import normalize_email

logger = logging.getLogger(__name__)


def register_user(session: Session, *, email: str, password: str) -> User:
    """Create a new user ensuring unique email addresses."""

    normalized_email = normalize_email(email)
    repository = UserRepository(session)

    if repository.get_by_email(normalized_email):
        raise DuplicateUserError()

    user = User(
        id=None,
        email=normalized_email,
        password=get_password_hash(password),
        created_at=None,
    )
    try:
        with transaction(session):
            created = repository.create(user)
    except StorageFailureError as exc:
        # A concurrent registration won the unique index on email.
        if isinstance(exc.__cause__, IntegrityError):
            raise DuplicateUserError() from exc
        raise

    logger.info("User %s registered", created.id, extra={"user_id": created.id})
    return created
