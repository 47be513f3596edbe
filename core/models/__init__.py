# core/models/__init__.py
from .base import CamelModel
from .author import CreateAuthorRequest, UpdateAuthorRequest
from .book import CreateBookRequest, UpdateBookRequest

__all__ = [
    'CamelModel',
    'CreateAuthorRequest',
    'UpdateAuthorRequest',
    'CreateBookRequest',
    'UpdateBookRequest',
]
