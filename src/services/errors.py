"""Domain errors raised by the service layer.

The API layer maps these onto HTTP status codes: ValidationError -> 400,
NotFoundError -> 404, StoreError -> 500.
"""


class TaskHandlerError(Exception):
    """Base class for service-layer failures."""


class ValidationError(TaskHandlerError):
    """A required field is missing or empty."""


class NotFoundError(TaskHandlerError):
    """The target record does not exist."""


class StoreError(TaskHandlerError):
    """The database rejected or failed a query."""
