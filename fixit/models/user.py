"""User model."""

from sqlalchemy import Column, Float, Integer, String

from fixit.database import Base
from fixit.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """A registered technician or customer of the service directory."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    phone = Column(String(25), unique=True, nullable=False)
    image_url = Column(String(255), unique=True, nullable=True)
    specialisation = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False, default=0.0)
    longitude = Column(Float, nullable=False, default=0.0)
    address = Column(String(255), nullable=False, default="")
    region = Column(String(255), nullable=False, default="")
    country = Column(String(255), nullable=False, default="")
    password = Column(String(100), nullable=False)

    # TODO: add the reviews relationship once the review model exists

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
