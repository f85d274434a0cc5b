"""Common validation helpers for user use cases."""


def normalize_email(email: str) -> str:
    """Return ``email`` trimmed and lowercased for storage and lookups."""

    return email.strip().lower()
