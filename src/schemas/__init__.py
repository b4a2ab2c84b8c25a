"""Pydantic schemas for API requests and responses."""

from src.schemas.history import HistoryResponse
from src.schemas.task import (
    DeleteResult,
    InsertResult,
    MessageResponse,
    TaskCategoryUpdate,
    TaskCreate,
    TaskInfoUpdate,
    TaskRef,
    TaskReorder,
    TaskResponse,
)
from src.schemas.user import UserCreate

__all__ = [
    "UserCreate",
    "TaskCreate",
    "TaskCategoryUpdate",
    "TaskInfoUpdate",
    "TaskRef",
    "TaskReorder",
    "TaskResponse",
    "InsertResult",
    "DeleteResult",
    "MessageResponse",
    "HistoryResponse",
]
