"""Task model."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Index, Integer, String

from src.database import Base


class Task(Base):
    """A kanban card, ordered by position within its (email, category) partition."""

    __tablename__ = "tasks"
    __table_args__ = (Index("ix_tasks_email_category_position", "email", "category", "position"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(500), nullable=False)
    description = Column(String, nullable=False)
    category = Column(String(100), nullable=False)  # "todo", "in-progress", "done", ...
    email = Column(String(255), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    deadline = Column(DateTime(timezone=True), nullable=True)
    added_time = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    # Stays NULL until the first mutation
    modified_time = Column(DateTime(timezone=True), nullable=True)
