"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Register a user. Extra profile fields are accepted and stored as-is."""

    model_config = ConfigDict(extra="allow")

    email: str | None = Field(None, max_length=255)
    name: str | None = Field(None, max_length=255)
