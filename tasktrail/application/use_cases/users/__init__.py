"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .register_user import register_user

__all__ = [
    "authenticate_user",
    "register_user",
]
