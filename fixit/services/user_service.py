"""User persistence service."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fixit.exceptions import InvalidCredentialsError, UserNotFoundError
from fixit.models.user import User
from fixit.schemas.user import UserInput
from fixit.services.passwords import hash_password, is_password_hash, password_matches

logger = logging.getLogger(__name__)

MAX_USERS_LISTED = 100

# Columns overwritten by a full update; password and updated_at are handled separately
PROFILE_COLUMNS = (
    "username",
    "email",
    "phone",
    "image_url",
    "specialisation",
    "latitude",
    "longitude",
    "address",
    "region",
    "country",
)


def _as_aware(value: datetime | None) -> datetime | None:
    """Treat naive timestamps (as returned by SQLite) as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class UserService:
    """Service for user CRUD operations."""

    def __init__(self, db: Session):
        self.db = db

    def _profile_values(self, user: UserInput) -> dict[str, object]:
        values = {column: getattr(user, column) for column in PROFILE_COLUMNS}
        # NULLs do not collide on the unique constraint, empty strings do
        values["image_url"] = user.image_url or None
        return values

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise

    def save_user(self, user: UserInput) -> User:
        """Insert a new user, hashing its password.

        Store errors such as uniqueness violations propagate unchanged.
        """
        # Timestamps are server-assigned
        now = datetime.now(UTC)
        db_user = User(
            **self._profile_values(user),
            password=hash_password(user.password),
            created_at=now,
            updated_at=now,
        )
        self.db.add(db_user)
        self._commit("create user")
        self.db.refresh(db_user)
        logger.info(f"Created user {db_user.id}")
        return db_user

    def find_all_users(self, limit: int = MAX_USERS_LISTED) -> list[User]:
        """Get the most recently created users, newest first."""
        limit = max(0, min(limit, MAX_USERS_LISTED))
        return (
            self.db.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .limit(limit)
            .all()
        )

    def find_user_by_id(self, user_id: int) -> User:
        """Get a user by ID.

        Raises:
            UserNotFoundError: if no user has this id.
        """
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id)
        return user

    def find_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def authenticate(self, email: str, password: str) -> User:
        """Authenticate a user by email and password.

        Raises:
            InvalidCredentialsError: if the email is unknown or the password is wrong.
        """
        user = self.find_user_by_email(email)
        if user is None or not password_matches(user.password, password):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError("Incorrect email or password")
        return user

    def _resolve_password(self, current_hash: str, supplied: str) -> str:
        """Return the hash to store for a supplied password.

        The stored hash is kept when the caller sends it back unchanged or
        sends the plaintext it was made from; anything else is hashed afresh.
        """
        if supplied == current_hash and is_password_hash(supplied):
            return current_hash
        if password_matches(current_hash, supplied):
            return current_hash
        return hash_password(supplied)

    def update_user(self, user_id: int, user: UserInput) -> User:
        """Overwrite every profile column of an existing user.

        Raises:
            UserNotFoundError: if no user has this id.
            PasswordHashError: if the new password cannot be hashed.
        """
        db_user = self.find_user_by_id(user_id)
        password = self._resolve_password(db_user.password, user.password)

        for column, value in self._profile_values(user).items():
            setattr(db_user, column, value)
        db_user.password = password

        now = datetime.now(UTC)
        previous = _as_aware(db_user.updated_at)
        db_user.updated_at = now if previous is None or now > previous else previous

        self._commit(f"update user {user_id}")
        self.db.refresh(db_user)
        logger.info(f"Updated user {user_id}")
        return db_user

    def delete_user(self, user_id: int) -> int:
        """Delete a user by ID and return the number of rows removed."""
        deleted = (
            self.db.query(User)
            .filter(User.id == user_id)
            .delete(synchronize_session="evaluate")
        )
        self._commit(f"delete user {user_id}")
        if deleted:
            logger.info(f"Deleted user {user_id}")
        return deleted
