# core/services/author.py
import logging
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from core.codes import Code
from core.errors import DuplicateKeyError
from core.models import CreateAuthorRequest, UpdateAuthorRequest
from core.pagination import PaginatedData, PaginationRequest
from core.sa.models import Author
from core.sa.repositories.interfaces import IAuthorRepository
from .interfaces import IAuthorService


class AuthorService(IAuthorService):
    def __init__(self, repo: IAuthorRepository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    def create_author(self, req: CreateAuthorRequest) -> Tuple[Optional[Author], Code]:
        """Create an author unless a live author already has the pen name"""
        try:
            existing = self.repo.get_by_pen_name(req.pen_name)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get author by pen name: {e}")
            return None, Code.INTERNAL_ERROR

        if existing is not None:
            self.logger.info(f"Author already exists: {existing.id}")
            return None, Code.AUTHOR_ALREADY_EXISTS

        self.logger.info(f"Creating author: {req!r}")
        author = Author(pen_name=req.pen_name, birth_year=req.birth_year)
        try:
            self.repo.create(author)
        except DuplicateKeyError as e:
            # Lost a race against a concurrent create with the same pen name
            self.logger.info(f"Author already exists: {e.message}")
            return None, Code.AUTHOR_ALREADY_EXISTS
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to create author: {e}")
            return None, Code.INTERNAL_ERROR

        self.logger.info(f"Author created successfully: {author.id}")
        return author, Code.SUCCESS

    def get_author_by_id(self, id: UUID) -> Tuple[Optional[Author], Code]:
        self.logger.info(f"Getting author by ID: {id}")
        try:
            author = self.repo.get_by_id(id)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get author by ID: {e}")
            return None, Code.INTERNAL_ERROR

        if author is None:
            self.logger.info(f"Author not found: {id}")
            return None, Code.SUCCESS

        self.logger.info(f"Author retrieved successfully: {author.id}")
        return author, Code.SUCCESS

    def get_all_authors(self, pagination: PaginationRequest) -> Tuple[Optional[PaginatedData[Author]], Code]:
        self.logger.info(f"Getting all authors: {pagination!r}")
        try:
            authors = self.repo.get_all(pagination)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get all authors: {e}")
            return None, Code.INTERNAL_ERROR

        if not authors.items:
            self.logger.info("No authors found")
            return authors, Code.SUCCESS

        self.logger.info(f"All authors retrieved successfully: {authors.pagination!r}")
        return authors, Code.SUCCESS

    def update_author(self, id: UUID, req: UpdateAuthorRequest) -> Code:
        """Replace pen name and birth year. The pen name is not re-checked
        for uniqueness; a clash is rejected by storage and reported as an
        internal error."""
        try:
            author = self.repo.get_by_id(id)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get author by ID: {e}")
            return Code.INTERNAL_ERROR

        if author is None:
            self.logger.info(f"Author not found: {id}")
            return Code.AUTHOR_NOT_FOUND

        self.logger.info(f"Updating author {id}: {req!r}")
        try:
            self.repo.update(id, Author(pen_name=req.pen_name, birth_year=req.birth_year))
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to update author: {e}")
            return Code.INTERNAL_ERROR

        self.logger.info(f"Author {id} updated successfully")
        return Code.SUCCESS

    def delete_author(self, id: UUID) -> Code:
        self.logger.info(f"Deleting author {id}")
        try:
            self.repo.delete(id)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to delete author: {e}")
            return Code.INTERNAL_ERROR

        self.logger.info("Author deleted successfully")
        return Code.SUCCESS
