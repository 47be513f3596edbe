# api/schemas/book.py
from typing import Optional
from uuid import UUID

from core.models.base import CamelModel
from .author import AuthorResponse


class BookResponse(CamelModel):
    id: UUID
    author_id: UUID
    name: str
    isbn: str
    author: Optional[AuthorResponse] = None
