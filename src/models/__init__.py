"""SQLAlchemy models."""

from src.models.task import Task
from src.models.task_history import TaskHistory
from src.models.user import User

__all__ = [
    "User",
    "Task",
    "TaskHistory",
]
