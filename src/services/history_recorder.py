"""History recorder for the recent-activity feed."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.enums import HistoryAction
from src.models.task_history import TaskHistory
from src.services.errors import StoreError

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 15


class HistoryRecorder:
    """Appends and reads task history entries.

    Recording is best effort: it runs after the task write has already been
    committed, and a failure here is logged and dropped rather than undoing
    that write or failing the request.
    """

    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        action: HistoryAction,
        email: str,
        details: dict[str, Any],
        task_id: int | None = None,
    ) -> TaskHistory | None:
        """Append one history entry. Returns None if the write failed."""
        entry = TaskHistory(
            action=action,
            task_id=task_id,
            email=email,
            timestamp=datetime.now(UTC),
            details=details,
        )
        try:
            self.db.add(entry)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to record {action.value} history for {email}")
            return None

        logger.info(f"Recorded history: {action.value} by {email} (task {task_id})")
        return entry

    def list_recent(self, email: str, limit: int = DEFAULT_HISTORY_LIMIT) -> list[TaskHistory]:
        """Get the newest entries for email, newest first. Never more than 15."""
        limit = min(limit, DEFAULT_HISTORY_LIMIT)
        try:
            return (
                self.db.query(TaskHistory)
                .filter(TaskHistory.email == email)
                .order_by(TaskHistory.timestamp.desc(), TaskHistory.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error fetching history: {e}")
            raise StoreError("Failed fetching history") from e

    def delete_entry(self, entry_id: int) -> int:
        """Delete one entry by id. Any id is accepted; there is no owner check."""
        try:
            deleted = self.db.query(TaskHistory).filter(TaskHistory.id == entry_id).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting history entry {entry_id}: {e}")
            raise StoreError("Failed deleting history entry") from e
        return deleted
