"""Password hashing and verification."""

import logging

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from fixit.config import get_settings
from fixit.exceptions import PasswordHashError, PasswordMismatchError

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context; overlong passwords are rejected instead of truncated
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
    bcrypt__truncate_error=True,
)


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt."""
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed: {e}")
        raise PasswordHashError(str(e)) from e


def password_matches(hashed_password: str, plain_password: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError, TypeError):
        return False


def verify_password(hashed_password: str, plain_password: str) -> None:
    """Verify a password against its hash.

    Raises:
        PasswordMismatchError: if the password does not match, or the stored
            value is not a recognised hash.
    """
    if not password_matches(hashed_password, plain_password):
        raise PasswordMismatchError("Incorrect password")


def is_password_hash(value: str) -> bool:
    """Check whether a value is already a hash this context can verify."""
    return bool(value) and pwd_context.identify(value) is not None
