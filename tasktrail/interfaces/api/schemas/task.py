"""Task schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class TaskUpdate(BaseModel):
    """Partial update; only the fields present in the request are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    completed: StrictBool | None = None

    model_config = ConfigDict(extra="forbid")


class TaskRead(BaseModel):
    id: int
    title: str
    description: str | None
    completed: bool
    user_id: int
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
