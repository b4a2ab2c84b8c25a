"""Task service: task mutations plus their audit trail."""

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from src.models.enums import HistoryAction
from src.models.task import Task
from src.models.task_history import TaskHistory
from src.services.errors import NotFoundError, ValidationError
from src.services.history_recorder import DEFAULT_HISTORY_LIMIT, HistoryRecorder
from src.services.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Orchestrates task writes and history entries.

    Every mutation commits the task change first and then records history
    as a separate write. The two are not atomic: a crash in between leaves a
    change with no history entry.
    """

    def __init__(
        self,
        db: Session,
        recorder: HistoryRecorder | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self.db = db
        self.tasks = TaskRepository(db)
        self.history = recorder or HistoryRecorder(db)
        self.history_limit = history_limit

    def list_tasks(self, email: str | None) -> list[Task]:
        """Get all tasks for a user."""
        return self.tasks.list_tasks(email)

    def add_task(
        self,
        email: str | None,
        category: str | None,
        title: str | None,
        description: str | None,
        deadline: datetime | None = None,
    ) -> Task:
        """Create a task at the end of its category and record an add entry."""
        task = self.tasks.create_task(email, category, title, description, deadline)
        self.history.record(
            HistoryAction.ADD,
            task.email,
            {
                "title": task.title,
                "description": task.description,
                "category": task.category,
                "deadline": deadline.isoformat() if deadline else None,
            },
            task_id=task.id,
        )
        return task

    def recategorize_task(
        self,
        task_id: int,
        category: str | None,
        position: int | None = None,
        email: str | None = None,
    ) -> Task:
        """Move a task to another category and/or position."""
        modified = self.tasks.recategorize(task_id, category, position, email)
        if not modified:
            raise NotFoundError("Task not found")

        task = self.tasks.get_task(task_id)
        self.history.record(
            HistoryAction.UPDATE,
            email or task.email,
            {"category": task.category, "position": task.position},
            task_id=task_id,
        )
        return task

    def edit_task_info(
        self,
        task_id: int,
        title: str | None,
        description: str | None,
        category: str | None = None,
        email: str | None = None,
    ) -> Task:
        """Update a task's title and description."""
        modified = self.tasks.edit_info(task_id, title, description, category, email)
        if not modified:
            raise NotFoundError("Task not found")

        task = self.tasks.get_task(task_id)
        self.history.record(
            HistoryAction.EDIT,
            email or task.email,
            {"title": task.title, "description": task.description, "category": task.category},
            task_id=task_id,
        )
        return task

    def reorder_tasks(
        self, email: str | None, category: str | None, task_ids: Sequence[int] | None
    ) -> int:
        """Rewrite positions in a category to follow the given id order."""
        if not email or task_ids is None:
            raise ValidationError("Email and tasks are required")

        count = self.tasks.reorder(email, category, task_ids)
        self.history.record(HistoryAction.REORDER, email, {"category": category})
        return count

    def delete_task(self, task_id: int) -> int:
        """Delete a task. A missing id deletes nothing and records nothing."""
        # Snapshot first; history must still say what was deleted
        task = self.tasks.get_task(task_id)
        snapshot = (task.email, {"title": task.title, "category": task.category}) if task else None

        deleted = self.tasks.delete_task(task_id)
        if deleted and snapshot is not None:
            owner, details = snapshot
            self.history.record(HistoryAction.DELETE, owner, details, task_id=task_id)
        return deleted

    def get_history(self, email: str) -> list[TaskHistory]:
        """Get the recent-activity feed for a user."""
        return self.history.list_recent(email, self.history_limit)

    def delete_history_entry(self, entry_id: int) -> int:
        """Delete one history entry."""
        return self.history.delete_entry(entry_id)
