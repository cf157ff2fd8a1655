"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from fixit.models.user import User


class UserInput(BaseModel):
    """Writable user fields as received from a client.

    Required fields default to empty strings: presence is checked by
    ``validate_user`` so callers get the same messages for every action.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    username: str = ""
    email: str = ""
    phone: str = Field(default="", alias="phone_number")
    image_url: str = ""
    specialisation: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    address: str = ""
    region: str = ""
    country: str = ""
    password: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserResponse(BaseModel):
    """User information response, with the session token issued by the caller."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    username: str
    email: str
    phone: str = Field(serialization_alias="phone_number")
    image_url: str | None = None
    specialisation: str
    latitude: float
    longitude: float
    address: str
    region: str
    country: str
    token: str = ""

    @classmethod
    def from_user(cls, user: User, token: str = "") -> "UserResponse":
        """Build the response view of a stored user."""
        response = cls.model_validate(user)
        response.token = token
        return response
