# core/models/author.py
from typing import Annotated

from pydantic import Field

from .base import CamelModel

PenName = Annotated[str, Field(strict=True, min_length=1, max_length=255)]
BirthYear = Annotated[int, Field(strict=True, ge=1800, le=2600)]


class CreateAuthorRequest(CamelModel):
    pen_name: PenName
    birth_year: BirthYear


class UpdateAuthorRequest(CamelModel):
    """Full replacement of an author's mutable fields"""
    pen_name: PenName
    birth_year: BirthYear
