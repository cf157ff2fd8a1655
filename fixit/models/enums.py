"""Enums for model fields."""

from enum import Enum


class ValidationAction(str, Enum):
    """Rule sets applied to user input before it reaches the database."""

    CREATE = "create"
    UPDATE = "update"
    LOGIN = "login"

    def requires_profile(self) -> bool:
        """Check if this action requires the full set of profile fields."""
        return self in (ValidationAction.CREATE, ValidationAction.UPDATE)
