"""User registration keyed by email."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.user import User
from src.services.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)


class UserService:
    """Creates users the first time an email is seen."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error fetching user: {e}")
            raise StoreError("Failed fetching user") from e

    def add_user(self, email: str | None, **fields: Any) -> User | None:
        """Insert a user unless the email already exists.

        Returns the new user, or None when the email was already registered.
        name and photo_url get their own columns; anything else goes to profile.
        """
        if not email or not email.strip():
            raise ValidationError("Email is required")

        if self.get_by_email(email) is not None:
            return None

        name = fields.pop("name", None)
        photo_url = fields.pop("photo_url", None)
        photo_url_camel = fields.pop("photoURL", None)
        photo_url = photo_url or photo_url_camel
        user = User(email=email, name=name, photo_url=photo_url, profile=fields or None)
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            # Lost a race with another request for the same email
            self.db.rollback()
            logger.info(f"User {email} was created concurrently")
            return None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error adding user: {e}")
            raise StoreError("Failed adding user") from e

        self.db.refresh(user)
        logger.info(f"Added user {email}")
        return user
