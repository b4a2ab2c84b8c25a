"""Task history model for the recent-activity feed."""

from datetime import UTC, datetime

from sqlalchemy import JSON, Column, DateTime, Enum, Integer, String

from src.database import Base
from src.models.enums import HistoryAction


class TaskHistory(Base):
    """Append-only audit entry for one task mutation.

    task_id is deliberately not a foreign key: entries outlive the tasks they
    describe, and details carries a snapshot of the fields that matter.
    """

    __tablename__ = "histories"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(
        Enum(HistoryAction, values_callable=lambda e: [m.value for m in e], name="historyaction"),
        nullable=False,
    )
    task_id = Column(Integer, nullable=True)  # NULL for reorder
    email = Column(String(255), nullable=False, index=True)
    timestamp = Column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False, index=True
    )
    details = Column(JSON, nullable=False, default=dict)
