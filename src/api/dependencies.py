"""FastAPI dependencies for services and database."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.services.history_recorder import HistoryRecorder
from src.services.task_service import TaskService
from src.services.user_service import UserService


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Get task service with its history recorder."""
    return TaskService(db, HistoryRecorder(db), history_limit=get_settings().history_limit)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service."""
    return UserService(db)
