# core/identifiers.py
from uuid import UUID

from core.errors import InvalidIdentifierError


def parse_uuid(value: str) -> UUID:
    """Parse an identifier taken from a URL path.

    Raises:
        InvalidIdentifierError: if the value is not a UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidIdentifierError(str(value)) from e
