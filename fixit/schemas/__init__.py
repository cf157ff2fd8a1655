"""Pydantic schemas for user input and responses."""

from fixit.schemas.user import UserInput, UserResponse

__all__ = [
    "UserInput",
    "UserResponse",
]
