"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_task_service
from src.api.errors import service_errors
from src.schemas.task import (
    DeleteResult,
    InsertResult,
    MessageResponse,
    TaskCategoryUpdate,
    TaskCreate,
    TaskInfoUpdate,
    TaskReorder,
    TaskResponse,
)
from src.services.task_service import TaskService

router = APIRouter(tags=["tasks"])


@router.get("/getTasks", response_model=list[TaskResponse])
def get_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    email: str | None = Query(default=None, description="Owner email"),
):
    """Get all tasks for a user."""
    with service_errors():
        return service.list_tasks(email)


@router.post("/addTask", response_model=InsertResult)
def add_task(
    task_data: TaskCreate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Add a task at the end of its category."""
    with service_errors():
        task = service.add_task(
            task_data.email,
            task_data.category,
            task_data.title,
            task_data.description,
            task_data.deadline,
        )
    return InsertResult(inserted_id=task.id)


@router.patch("/updateTask/{task_id}", response_model=MessageResponse)
def update_task(
    task_id: int,
    update: TaskCategoryUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Move a task to a category and position (drag and drop across columns)."""
    with service_errors():
        service.recategorize_task(task_id, update.category, update.position, update.email)
    return MessageResponse(message="Task updated successfully")


@router.patch("/updateTaskInfo/{task_id}", response_model=MessageResponse)
def update_task_info(
    task_id: int,
    update: TaskInfoUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Edit a task's title and description."""
    with service_errors():
        service.edit_task_info(
            task_id, update.title, update.description, update.category, update.email
        )
    return MessageResponse(message="Task updated successfully")


@router.patch("/reorderTasks", response_model=MessageResponse)
def reorder_tasks(
    reorder: TaskReorder,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Reorder the tasks of one category to match the submitted order."""
    task_ids = [task.id for task in reorder.tasks] if reorder.tasks is not None else None
    with service_errors():
        service.reorder_tasks(reorder.email, reorder.category, task_ids)
    return MessageResponse(message="Tasks reordered successfully")


@router.delete("/deleteTask/{task_id}", response_model=DeleteResult)
def delete_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task. A missing id reports deletedCount 0."""
    with service_errors():
        deleted = service.delete_task(task_id)
    return DeleteResult(deleted_count=deleted)
