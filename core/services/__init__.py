# core/services/__init__.py
from .interfaces import IAuthorService, IBookService
from .author import AuthorService
from .book import BookService

__all__ = ['IAuthorService', 'IBookService', 'AuthorService', 'BookService']
