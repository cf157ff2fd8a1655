"""Normalization of user input before validation and persistence."""

from datetime import UTC, datetime

from fixit.schemas.user import UserInput

# Free-text fields rendered back to clients; escaped to keep markup inert
ESCAPED_FIELDS = ("username", "email", "phone", "image_url", "specialisation")

# Quotes use numeric entities (&#39; and &#34;)
HTML_ENTITIES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "'": "&#39;",
        '"': "&#34;",
    }
)


def clean_text(value: str) -> str:
    """Trim surrounding whitespace and HTML-escape a free-text value."""
    return value.strip().translate(HTML_ENTITIES)


def prepare_user(user: UserInput) -> UserInput:
    """Return a normalized copy of ``user``.

    The identity is reset (the database assigns it), the free-text fields are
    trimmed and escaped, and both timestamps are stamped with the current time.
    """
    now = datetime.now(UTC)
    changes: dict[str, object] = {
        field: clean_text(getattr(user, field)) for field in ESCAPED_FIELDS
    }
    changes.update(id=0, created_at=now, updated_at=now)
    return user.model_copy(update=changes)
