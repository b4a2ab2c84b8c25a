"""User model."""

from sqlalchemy import JSON, Column, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model keyed by email; tasks reference it by email only."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    photo_url = Column(String(1000), nullable=True)
    # Any other fields the client sent on first sign-in
    profile = Column(JSON, nullable=True)
