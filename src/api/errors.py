"""Translation of service errors into HTTP responses."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from src.services.errors import NotFoundError, StoreError, ValidationError


@contextmanager
def service_errors() -> Iterator[None]:
    """Raise the HTTPException matching a service error.

    Store failures get a generic message so no database detail leaks out.
    """
    try:
        yield
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error"
        ) from e
