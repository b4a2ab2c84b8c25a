"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_user_service
from src.api.errors import service_errors
from src.schemas.task import InsertResult
from src.schemas.user import UserCreate
from src.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.post("/addUser", response_model=InsertResult)
def add_user(
    user_data: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Register a user on first sign-in; repeat calls are a no-op."""
    fields = user_data.model_dump(exclude={"email"}, exclude_none=True)
    with service_errors():
        user = service.add_user(user_data.email, **fields)
    return InsertResult(inserted_id=user.id if user else None)
