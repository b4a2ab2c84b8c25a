"""Task schemas.

Field names on the wire are camelCase, as the web client expects, with the
record id exposed as ``_id``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskCreate(BaseModel):
    """Create a new task. Required fields are checked by the service."""

    title: str | None = Field(None, max_length=500)
    description: str | None = None
    category: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    deadline: datetime | None = None


class TaskCategoryUpdate(BaseModel):
    """Move a task to a category and position."""

    category: str | None = Field(None, max_length=100)
    position: int | None = Field(None, ge=0)
    email: str | None = None


class TaskInfoUpdate(BaseModel):
    """Edit a task's title and description."""

    title: str | None = Field(None, max_length=500)
    description: str | None = None
    category: str | None = Field(None, max_length=100)
    email: str | None = None


class TaskRef(BaseModel):
    """A task in a reorder request; only the id is used."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(..., alias="_id")


class TaskReorder(BaseModel):
    """Reorder the tasks of one category."""

    email: str | None = None
    category: str | None = None
    tasks: list[TaskRef] | None = None


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, alias_generator=to_camel
    )

    id: int = Field(..., alias="_id")
    title: str
    description: str
    category: str
    email: str
    position: int
    deadline: datetime | None
    added_time: datetime
    modified_time: datetime | None


class InsertResult(BaseModel):
    """Result of an insert."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    acknowledged: bool = True
    inserted_id: int | None


class DeleteResult(BaseModel):
    """Result of a delete; deleted_count is 0 when nothing matched."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    acknowledged: bool = True
    deleted_count: int


class MessageResponse(BaseModel):
    """Plain status message."""

    success: bool = True
    message: str
