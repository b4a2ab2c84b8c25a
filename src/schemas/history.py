"""History schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.models.enums import HistoryAction


class HistoryResponse(BaseModel):
    """History entry response."""

    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, alias_generator=to_camel
    )

    id: int = Field(..., alias="_id")
    action: HistoryAction
    task_id: int | None
    email: str
    timestamp: datetime
    details: dict[str, Any]
