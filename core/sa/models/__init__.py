# core/sa/models/__init__.py
from .base import Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin
from .author import Author
from .book import Book

__all__ = [
    'Base',
    'UUIDPrimaryKeyMixin',
    'TimestampMixin',
    'SoftDeleteMixin',
    'Author',
    'Book',
]
