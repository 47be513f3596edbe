# core/sa/repositories/author.py
import logging
from datetime import datetime, UTC
from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import DuplicateKeyError
from core.pagination import PaginatedData, PaginationRequest
from ..database import TransactionManager
from ..models import Author
from .interfaces import IAuthorRepository

class AuthorRepository(IAuthorRepository):
    def __init__(self, tx_manager: TransactionManager, logger: Optional[logging.Logger] = None):
        self.tx_manager = tx_manager
        self.logger = logger or logging.getLogger(__name__)

    def create(self, author: Author, tx: Optional[Session] = None) -> Author:
        """Insert a new author and flush so the id is populated"""
        try:
            with self.tx_manager.scope(tx) as session:
                session.add(author)
                session.flush()
        except IntegrityError as e:
            self.logger.error(f"Failed to create author, pen name taken: {author.pen_name}")
            raise DuplicateKeyError('author', 'pen_name', author.pen_name) from e
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to create author: {e}")
            raise
        return author

    def get_by_id(self, id: UUID, tx: Optional[Session] = None) -> Optional[Author]:
        """Get a live author by ID"""
        try:
            with self.tx_manager.scope(tx) as session:
                author = session.query(Author).filter(
                    Author.id == id,
                    Author.not_deleted()
                ).first()
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get author by ID: {e}")
            raise

        if author is None:
            self.logger.warning(f"Author not found: {id}")
        return author

    def get_by_pen_name(self, pen_name: str, tx: Optional[Session] = None) -> Optional[Author]:
        """Get a live author by pen name"""
        try:
            with self.tx_manager.scope(tx) as session:
                author = session.query(Author).filter(
                    Author.pen_name == pen_name,
                    Author.not_deleted()
                ).first()
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get author by pen name: {e}")
            raise

        if author is None:
            self.logger.warning(f"Author not found: {pen_name}")
        return author

    def get_all(self, pagination: PaginationRequest, tx: Optional[Session] = None) -> PaginatedData[Author]:
        """Get a page of authors, oldest first

        Args:
            pagination: Requested page and page size

        Returns:
            PaginatedData with the authors of the page and the total count
        """
        try:
            with self.tx_manager.scope(tx) as session:
                query = session.query(Author).filter(Author.not_deleted())
                total = query.count()
                authors = (
                    query
                    .order_by(Author.created_at.asc(), Author.id.asc())
                    .offset(pagination.get_offset())
                    .limit(pagination.get_limit())
                    .all()
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get paginated authors: {e}")
            raise

        return PaginatedData.build(authors, pagination, total)

    def update(self, id: UUID, author: Author, tx: Optional[Session] = None) -> None:
        """Replace pen name and birth year of the author with the given ID"""
        try:
            with self.tx_manager.scope(tx) as session:
                session.query(Author).filter(
                    Author.id == id,
                    Author.not_deleted()
                ).update(
                    {
                        Author.pen_name: author.pen_name,
                        Author.birth_year: author.birth_year,
                        Author.updated_at: datetime.now(UTC),
                    },
                    synchronize_session='fetch'
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to update author: {e}")
            raise

    def delete(self, id: UUID, tx: Optional[Session] = None) -> None:
        """Mark the author as deleted"""
        try:
            with self.tx_manager.scope(tx) as session:
                affected = session.query(Author).filter(
                    Author.id == id,
                    Author.not_deleted()
                ).update(
                    {Author.deleted_at: datetime.now(UTC)},
                    synchronize_session='fetch'
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to delete author: {e}")
            raise

        if not affected:
            self.logger.warning(f"No author deleted: {id}")
