# core/sa/repositories/__init__.py
from .interfaces import IAuthorRepository, IBookRepository
from .book import BookRepository
from .author import AuthorRepository

__all__ = ['IAuthorRepository', 'IBookRepository', 'BookRepository', 'AuthorRepository']
