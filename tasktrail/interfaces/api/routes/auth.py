"""Endpoints de registro e inicio de sesión."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tasktrail.application.use_cases.users import authenticate_user, register_user
from tasktrail.config import Settings
from tasktrail.domain.entities import User
from tasktrail.domain.exceptions import DuplicateUserError, InvalidCredentialsError
from tasktrail.infrastructure.database import get_db
from tasktrail.infrastructure.security import issue_access_token
from tasktrail.interfaces.api.dependencies import get_app_settings
from tasktrail.interfaces.api.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserRead,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(user: User, settings: Settings) -> AuthResponse:
    return AuthResponse(
        token=issue_access_token(user, settings),
        user=UserRead.model_validate(user),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """Registra un usuario nuevo y devuelve un token de acceso."""

    try:
        user = register_user(db, email=payload.email, password=payload.password)
    except DuplicateUserError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _auth_response(user, settings)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """Autentica al usuario por correo electrónico y devuelve un token JWT."""

    try:
        user = authenticate_user(db, payload.email, payload.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _auth_response(user, settings)


__all__ = ["router"]
