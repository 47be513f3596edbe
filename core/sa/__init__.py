# core/sa/__init__.py
from .database import Database, TransactionManager
from .models import Base, Author, Book

__all__ = [
    'Database',
    'TransactionManager',
    'Base',
    'Author',
    'Book',
]
