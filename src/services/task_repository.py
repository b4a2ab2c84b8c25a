"""Task persistence and position assignment.

Tasks are ordered within a partition, the set of tasks sharing one
(email, category) pair. Positions in a partition are meant to be the dense
sequence 0..n-1. Nothing here locks a partition: two concurrent creates can
read the same maximum and land on the same position.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import bindparam, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.task import Task
from src.services.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)


def _missing(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class TaskRepository:
    """Task CRUD over a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        """Roll back and re-raise database failures as StoreError."""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error {operation}: {e}")
            raise StoreError(f"Failed {operation}") from e

    def list_tasks(self, email: str | None) -> list[Task]:
        """Get all tasks owned by email."""
        with self._store_errors("fetching tasks"):
            return (
                self.db.query(Task)
                .filter(Task.email == email)
                .order_by(Task.category, Task.position, Task.id)
                .all()
            )

    def get_task(self, task_id: int, email: str | None = None) -> Task | None:
        """Get a task by id, optionally restricted to one owner."""
        with self._store_errors("fetching task"):
            query = self.db.query(Task).filter(Task.id == task_id)
            if email:
                query = query.filter(Task.email == email)
            return query.first()

    def next_position(self, email: str, category: str) -> int:
        """Return the position one past the last task in the partition (0 if empty)."""
        with self._store_errors("computing position"):
            max_position = (
                self.db.query(func.max(Task.position))
                .filter(Task.email == email, Task.category == category)
                .scalar()
            )
        return (max_position if max_position is not None else -1) + 1

    def create_task(
        self,
        email: str | None,
        category: str | None,
        title: str | None,
        description: str | None,
        deadline: datetime | None = None,
    ) -> Task:
        """Insert a task at the end of its partition."""
        if _missing(title) or _missing(description) or _missing(category) or _missing(email):
            raise ValidationError("Title, description, category and email are required")

        position = self.next_position(email, category)
        task = Task(
            title=title,
            description=description,
            category=category,
            email=email,
            position=position,
            deadline=deadline,
            added_time=datetime.now(UTC),
            modified_time=None,
        )
        with self._store_errors("adding task"):
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        return task

    def recategorize(
        self,
        task_id: int,
        category: str | None,
        position: int | None = None,
        email: str | None = None,
    ) -> int:
        """Move a task to a category/position. Returns the number of tasks modified.

        Sibling positions are left alone; the caller supplies a position that
        does not collide. Without a position the task goes to the end of the
        target partition, or keeps its position if the category is unchanged.
        """
        if _missing(category):
            raise ValidationError("Category is required")

        task = self.get_task(task_id, email)
        if task is None:
            return 0

        if position is None:
            if category == task.category:
                position = task.position
            else:
                position = self.next_position(task.email, category)

        with self._store_errors("updating task"):
            task.category = category
            task.position = position
            task.modified_time = datetime.now(UTC)
            self.db.commit()
        return 1

    def edit_info(
        self,
        task_id: int,
        title: str | None,
        description: str | None,
        category: str | None = None,
        email: str | None = None,
    ) -> int:
        """Update title/description (and category when given). Returns modified count."""
        if _missing(title) or _missing(description):
            raise ValidationError("Title and description are required")

        task = self.get_task(task_id, email)
        if task is None:
            return 0

        with self._store_errors("updating task info"):
            task.title = title
            task.description = description
            if not _missing(category):
                task.category = category
            task.modified_time = datetime.now(UTC)
            self.db.commit()
        return 1

    def reorder(self, email: str | None, category: str | None, ordered_ids: Sequence[int]) -> int:
        """Set position = index for each id in one batched statement.

        Rows are matched on (id, email); ids owned by someone else are
        skipped without error. Returns the number of ids submitted.
        """
        if ordered_ids is None:
            raise ValidationError("Tasks are required")
        if not ordered_ids:
            return 0

        now = datetime.now(UTC)
        # Core table so the list of params runs as a plain executemany
        stmt = (
            update(Task.__table__)
            .where(
                Task.__table__.c.id == bindparam("b_id"),
                Task.__table__.c.email == bindparam("b_email"),
            )
            .values(position=bindparam("b_position"), modified_time=bindparam("b_now"))
        )
        params = [
            {"b_id": task_id, "b_email": email, "b_position": index, "b_now": now}
            for index, task_id in enumerate(ordered_ids)
        ]
        with self._store_errors("reordering tasks"):
            self.db.execute(stmt, params)
            self.db.commit()
        # Drop stale positions from any Task objects already loaded
        self.db.expire_all()
        logger.debug(f"Reordered {len(params)} tasks in {category!r} for {email}")
        return len(params)

    def delete_task(self, task_id: int) -> int:
        """Delete a task by id. Returns the number of tasks deleted."""
        with self._store_errors("deleting task"):
            deleted = self.db.query(Task).filter(Task.id == task_id).delete()
            self.db.commit()
        return deleted
