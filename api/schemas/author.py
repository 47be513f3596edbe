# api/schemas/author.py
from uuid import UUID

from core.models.base import CamelModel


class AuthorResponse(CamelModel):
    id: UUID
    pen_name: str
    birth_year: int
