# core/sa/repositories/book.py
import logging
from datetime import datetime, UTC
from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from core.errors import DuplicateKeyError
from core.pagination import PaginatedData, PaginationRequest
from ..database import TransactionManager
from ..models import Book
from .interfaces import IBookRepository

class BookRepository(IBookRepository):
    def __init__(self, tx_manager: TransactionManager, logger: Optional[logging.Logger] = None):
        self.tx_manager = tx_manager
        self.logger = logger or logging.getLogger(__name__)

    def create(self, book: Book, tx: Optional[Session] = None) -> Book:
        """Insert a new book and flush so the id is populated"""
        try:
            with self.tx_manager.scope(tx) as session:
                session.add(book)
                session.flush()
        except IntegrityError as e:
            self.logger.error(f"Failed to create book, ISBN taken: {book.isbn}")
            raise DuplicateKeyError('book', 'isbn', book.isbn) from e
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to create book: {e}")
            raise
        return book

    def get_by_id(self, id: UUID, tx: Optional[Session] = None) -> Optional[Book]:
        """Get a live book by ID with its author loaded"""
        try:
            with self.tx_manager.scope(tx) as session:
                book = (
                    session.query(Book)
                    .options(joinedload(Book.author))
                    .populate_existing()
                    .filter(Book.id == id, Book.not_deleted())
                    .first()
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get book by ID: {e}")
            raise

        if book is None:
            self.logger.warning(f"Book not found: {id}")
        return book

    def get_by_isbn(self, isbn: str, tx: Optional[Session] = None) -> Optional[Book]:
        """Get a live book by ISBN with its author loaded"""
        try:
            with self.tx_manager.scope(tx) as session:
                book = (
                    session.query(Book)
                    .options(joinedload(Book.author))
                    .populate_existing()
                    .filter(Book.isbn == isbn, Book.not_deleted())
                    .first()
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get book by ISBN: {e}")
            raise

        if book is None:
            self.logger.warning(f"Book not found: {isbn}")
        return book

    def get_by_author_id(
        self,
        author_id: UUID,
        pagination: PaginationRequest,
        tx: Optional[Session] = None
    ) -> PaginatedData[Book]:
        """Get a page of books written by an author.

        Args:
            author_id: ID of the author
            pagination: Requested page and page size

        Returns:
            PaginatedData with the books of the page (author not loaded)
            and the total count of the author's books
        """
        try:
            with self.tx_manager.scope(tx) as session:
                query = session.query(Book).filter(
                    Book.author_id == author_id,
                    Book.not_deleted()
                )
                total = query.count()
                books = (
                    query
                    .order_by(Book.created_at.asc(), Book.id.asc())
                    .offset(pagination.get_offset())
                    .limit(pagination.get_limit())
                    .all()
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get paginated books for author: {e}")
            raise

        if not books:
            self.logger.warning(f"No books found for author: {author_id}")
        return PaginatedData.build(books, pagination, total)

    def get_all(self, pagination: PaginationRequest, tx: Optional[Session] = None) -> PaginatedData[Book]:
        """Get a page of books with their authors loaded"""
        try:
            with self.tx_manager.scope(tx) as session:
                query = session.query(Book).filter(Book.not_deleted())
                total = query.count()
                books = (
                    query
                    .options(joinedload(Book.author))
                    .populate_existing()
                    .order_by(Book.created_at.asc(), Book.id.asc())
                    .offset(pagination.get_offset())
                    .limit(pagination.get_limit())
                    .all()
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get paginated books: {e}")
            raise

        return PaginatedData.build(books, pagination, total)

    def update(self, id: UUID, book: Book, tx: Optional[Session] = None) -> None:
        """Replace author, name and ISBN of the book with the given ID"""
        try:
            with self.tx_manager.scope(tx) as session:
                session.query(Book).filter(
                    Book.id == id,
                    Book.not_deleted()
                ).update(
                    {
                        Book.author_id: book.author_id,
                        Book.name: book.name,
                        Book.isbn: book.isbn,
                        Book.updated_at: datetime.now(UTC),
                    },
                    synchronize_session='fetch'
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to update book: {e}")
            raise

    def delete(self, id: UUID, tx: Optional[Session] = None) -> None:
        """Mark the book as deleted"""
        try:
            with self.tx_manager.scope(tx) as session:
                affected = session.query(Book).filter(
                    Book.id == id,
                    Book.not_deleted()
                ).update(
                    {Book.deleted_at: datetime.now(UTC)},
                    synchronize_session='fetch'
                )
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to delete book: {e}")
            raise

        if not affected:
            self.logger.warning(f"No book deleted: {id}")
