"""
Application exceptions.

Repositories let SQLAlchemy errors propagate, apart from the few failures
that carry a domain meaning, which are re-raised as one of these.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidIdentifierError(ApplicationError):
    """Raised when an external identifier is not a valid UUID"""

    def __init__(self, value: str):
        super().__init__(f"Invalid identifier: {value!r}", {"value": value})


class DuplicateKeyError(ApplicationError):
    """Raised when an insert is rejected by a unique constraint"""

    def __init__(self, entity: str, key: str, value: str, message: str | None = None):
        details = {"entity": entity, "key": key, "value": value}
        msg = message or f"{entity} with {key}={value!r} already exists"
        super().__init__(msg, details)
