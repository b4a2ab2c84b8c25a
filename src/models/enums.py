"""Enums for model fields."""

from enum import Enum


class HistoryAction(str, Enum):
    """Kinds of task mutations recorded in the history feed."""

    ADD = "add"
    UPDATE = "update"
    EDIT = "edit"
    REORDER = "reorder"
    DELETE = "delete"
