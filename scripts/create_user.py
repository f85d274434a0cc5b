"""Utility script to register a user directly in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from tasktrail.application.use_cases.users import register_user
from tasktrail.config import get_settings
from tasktrail.domain.exceptions import DuplicateUserError, StorageFailureError
from tasktrail.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Register a user for the Tasktrail API.",
    )
    parser.add_argument(
        "--email",
        required=True,
        help="Email address used to log in",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password for the account. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    settings = get_settings()
    engine = build_engine(settings.database_url)
    initialize_database(engine)

    session = build_session_factory(engine)()
    try:
        user = register_user(session, email=args.email, password=password)
    except DuplicateUserError as exc:
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except StorageFailureError as exc:
        raise SystemExit(f"Could not save the user to the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()
        engine.dispose()


if __name__ == "__main__":
    main()
