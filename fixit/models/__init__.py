"""SQLAlchemy models."""

from fixit.models.enums import ValidationAction
from fixit.models.user import User

__all__ = [
    "User",
    "ValidationAction",
]
