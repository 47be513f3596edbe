# core/models/book.py
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field
from pydantic_core import PydanticCustomError

from core.isbn import is_isbn
from .base import CamelModel


def _require_uuid(value: UUID) -> UUID:
    if value.int == 0:
        raise PydanticCustomError('required', 'identifier must not be the nil UUID')
    return value


def _check_isbn(value: str) -> str:
    if not is_isbn(value):
        raise PydanticCustomError('isbn', 'value is not a valid ISBN-10 or ISBN-13')
    return value


AuthorId = Annotated[UUID, AfterValidator(_require_uuid)]
BookName = Annotated[str, Field(strict=True, min_length=1, max_length=255)]
Isbn = Annotated[str, Field(strict=True, min_length=1), AfterValidator(_check_isbn)]


class CreateBookRequest(CamelModel):
    author_id: AuthorId
    name: BookName
    isbn: Isbn


class UpdateBookRequest(CamelModel):
    """Full replacement of a book's mutable fields"""
    author_id: AuthorId
    name: BookName
    isbn: Isbn
