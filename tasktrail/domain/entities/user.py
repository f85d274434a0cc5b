"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user.

    ``password`` always holds the salted hash, never the plaintext.
    """

    id: int | None
    email: str
    password: str
    created_at: datetime | None


__all__ = ["User"]
