"""History API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_task_service
from src.api.errors import service_errors
from src.schemas.history import HistoryResponse
from src.schemas.task import DeleteResult
from src.services.task_service import TaskService

router = APIRouter(tags=["history"])


@router.get("/getHistory/{email}", response_model=list[HistoryResponse])
def get_history(
    email: str,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a user's most recent task activity, newest first."""
    with service_errors():
        return service.get_history(email)


@router.delete("/history/{entry_id}", response_model=DeleteResult)
def delete_history_entry(
    entry_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete one history entry."""
    with service_errors():
        deleted = service.delete_history_entry(entry_id)
    return DeleteResult(deleted_count=deleted)
