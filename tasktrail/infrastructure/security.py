"""Security helpers for hashing and token generation."""

from datetime import timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from tasktrail.config import Settings
from tasktrail.domain.entities import User
from tasktrail.utils import now_utc

JWT_ALGORITHM = "HS256"

# A single passlib context; raise "rounds" as CPU budget allows.
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Spend the same time as a real verification for unknown accounts."""

    pwd_context.dummy_verify()


def create_access_token(
    data: dict, settings: Settings, expires_delta: timedelta | None = None
) -> str:
    expire = now_utc() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[JWT_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def issue_access_token(user: User, settings: Settings) -> str:
    """Return a signed bearer token identifying ``user``."""

    return create_access_token({"sub": str(user.id), "email": user.email}, settings)


__all__ = [
    "create_access_token",
    "decode_access_token",
    "dummy_verify",
    "get_password_hash",
    "issue_access_token",
    "verify_password",
]
