"""Errors raised by the user services."""


class FixitError(Exception):
    """Base exception for user service errors."""


class UserValidationError(FixitError, ValueError):
    """Raised when user input fails a required-field or format rule."""


class UnknownValidationActionError(UserValidationError):
    """Raised when validation is requested for an action with no rule set."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Unknown validation action: {action!r}")


class UserNotFoundError(FixitError, LookupError):
    """Raised when no user matches the requested id."""

    def __init__(self, user_id: int | None = None):
        self.user_id = user_id
        super().__init__("User Not Found")


class PasswordHashError(FixitError):
    """Raised when the hashing algorithm rejects a password."""


class PasswordMismatchError(FixitError):
    """Raised when a plaintext password does not match the stored hash."""


class InvalidCredentialsError(FixitError):
    """Raised when an email/password pair does not identify a user."""
