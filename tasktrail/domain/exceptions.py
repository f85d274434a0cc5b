"""Errors raised by the application use cases.

Validation style errors derive from ``ValueError`` so callers that only care
about "bad input" can keep catching the builtin.
"""


class DuplicateUserError(ValueError):
    """Raised when registering an email address that already exists."""

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)


class InvalidCredentialsError(ValueError):
    """Raised for an unknown email or a wrong password, indistinguishably."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class TaskNotFoundError(ValueError):
    """Raised when a task does not exist or belongs to another user."""

    def __init__(self, message: str = "Todo not found") -> None:
        super().__init__(message)


class InvalidTaskDataError(ValueError):
    """Raised when task fields fail validation inside a use case."""


class StorageFailureError(RuntimeError):
    """Raised when the database rejects a unit of work."""

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(message)


__all__ = [
    "DuplicateUserError",
    "InvalidCredentialsError",
    "InvalidTaskDataError",
    "StorageFailureError",
    "TaskNotFoundError",
]
