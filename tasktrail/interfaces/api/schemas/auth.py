"""Authentication related schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserRead(BaseModel):
    id: int
    email: EmailStr
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    token: str = Field(..., description="Bearer token for the Authorization header")
    user: UserRead
