"""Validation of user input for each action."""

import logging

from email_validator import EmailNotValidError, validate_email

from fixit.exceptions import UnknownValidationActionError, UserValidationError
from fixit.models.enums import ValidationAction
from fixit.schemas.user import UserInput

logger = logging.getLogger(__name__)


def is_valid_email(email: str) -> bool:
    """Check the syntax of an email address.

    No DNS lookup is made and single-label or reserved domains are accepted;
    special-use names such as ``localhost`` and ``.local`` are still refused.
    """
    try:
        validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def resolve_action(action: str | ValidationAction) -> ValidationAction:
    """Map a case-insensitive action name onto a ValidationAction."""
    if isinstance(action, ValidationAction):
        return action
    try:
        return ValidationAction(action.strip().lower())
    except ValueError:
        raise UnknownValidationActionError(action) from None


def _check_email(user: UserInput) -> None:
    if not user.email:
        raise UserValidationError("Required Email")
    if not is_valid_email(user.email):
        raise UserValidationError("Invalid Email")


def validate_user(user: UserInput, action: str | ValidationAction = ValidationAction.CREATE) -> None:
    """Validate user input for the given action.

    Only the first failing rule is reported. Latitude and longitude are not
    checked for any action.

    Raises:
        UserValidationError: with a client-facing message for the failing rule.
        UnknownValidationActionError: if ``action`` names no rule set.
    """
    resolved = resolve_action(action)

    if not resolved.requires_profile():
        if not user.password:
            raise UserValidationError("Required Password")
        _check_email(user)
        return

    if not user.username:
        raise UserValidationError("Required Username")
    if not user.password:
        raise UserValidationError("Required Password")
    if not user.phone:
        raise UserValidationError("Required Phone Number")
    _check_email(user)
    if not user.specialisation:
        raise UserValidationError("Required Specialisation")
    logger.debug(f"User input passed {resolved.value} validation")
