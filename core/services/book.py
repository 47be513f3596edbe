# core/services/book.py
import logging
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from core.codes import Code
from core.errors import DuplicateKeyError
from core.models import CreateBookRequest, UpdateBookRequest
from core.pagination import PaginatedData, PaginationRequest
from core.sa.models import Book
from core.sa.repositories.interfaces import IBookRepository
from .interfaces import IAuthorService, IBookService


class BookService(IBookService):
    """Book rules. Author existence is checked through the author service,
    never through the author table directly."""

    def __init__(
        self,
        repo: IBookRepository,
        author_service: IAuthorService,
        logger: Optional[logging.Logger] = None
    ):
        self.repo = repo
        self.author_service = author_service
        self.logger = logger or logging.getLogger(__name__)

    def _check_author(self, author_id: UUID) -> Code:
        author, code = self.author_service.get_author_by_id(author_id)
        if code != Code.SUCCESS:
            self.logger.error(f"Failed to get author by ID: {code.value}")
            return code
        if author is None:
            self.logger.info(f"Author not found: {author_id}")
            return Code.AUTHOR_NOT_FOUND
        return Code.SUCCESS

    def create_book(self, req: CreateBookRequest) -> Tuple[Optional[Book], Code]:
        """Create a book for an existing author unless its ISBN is taken"""
        code = self._check_author(req.author_id)
        if code != Code.SUCCESS:
            return None, code

        try:
            existing = self.repo.get_by_isbn(req.isbn)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get book by ISBN: {e}")
            return None, Code.INTERNAL_ERROR

        if existing is not None:
            self.logger.info(f"Book already exists: {req.isbn}")
            return None, Code.BOOK_ALREADY_EXISTS

        self.logger.info(f"Creating book: {req!r}")
        book = Book(author_id=req.author_id, name=req.name, isbn=req.isbn)
        try:
            self.repo.create(book)
        except DuplicateKeyError as e:
            self.logger.info(f"Book already exists: {e.message}")
            return None, Code.BOOK_ALREADY_EXISTS
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to create book: {e}")
            return None, Code.INTERNAL_ERROR

        self.logger.info(f"Book created successfully: {book.id}")
        return book, Code.SUCCESS

    def get_book_by_id(self, id: UUID) -> Tuple[Optional[Book], Code]:
        self.logger.info(f"Getting book by ID: {id}")
        try:
            book = self.repo.get_by_id(id)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get book by ID: {e}")
            return None, Code.INTERNAL_ERROR

        if book is None:
            self.logger.info(f"Book not found: {id}")
            return None, Code.BOOK_NOT_FOUND

        self.logger.info(f"Book retrieved successfully: {book.id}")
        return book, Code.SUCCESS

    def get_all_books(self, pagination: PaginationRequest) -> Tuple[Optional[PaginatedData[Book]], Code]:
        self.logger.info(f"Getting all books: {pagination!r}")
        try:
            books = self.repo.get_all(pagination)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get all books: {e}")
            return None, Code.INTERNAL_ERROR

        if not books.items:
            self.logger.info("No books found")
            return books, Code.SUCCESS

        self.logger.info(f"All books retrieved successfully: {books.pagination!r}")
        return books, Code.SUCCESS

    def get_books_by_author_id(
        self,
        author_id: UUID,
        pagination: PaginationRequest
    ) -> Tuple[Optional[PaginatedData[Book]], Code]:
        self.logger.info(f"Getting books by author ID: {author_id}")
        try:
            books = self.repo.get_by_author_id(author_id, pagination)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get books by author ID: {e}")
            return None, Code.INTERNAL_ERROR

        if not books.items:
            self.logger.info(f"No books found for author: {author_id}")
            return books, Code.SUCCESS

        self.logger.info(f"Books by author retrieved successfully: {books.pagination!r}")
        return books, Code.SUCCESS

    def update_book(self, id: UUID, req: UpdateBookRequest) -> Code:
        """Replace author, name and ISBN. The ISBN is not re-checked for
        uniqueness; a clash is rejected by storage and reported as an
        internal error."""
        try:
            book = self.repo.get_by_id(id)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get book by ID: {e}")
            return Code.INTERNAL_ERROR

        if book is None:
            self.logger.info(f"Book not found: {id}")
            return Code.BOOK_NOT_FOUND

        code = self._check_author(req.author_id)
        if code != Code.SUCCESS:
            return code

        self.logger.info(f"Updating book {id}: {req!r}")
        try:
            self.repo.update(id, Book(author_id=req.author_id, name=req.name, isbn=req.isbn))
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to update book: {e}")
            return Code.INTERNAL_ERROR

        self.logger.info(f"Book {id} updated successfully")
        return Code.SUCCESS

    def delete_book(self, id: UUID) -> Code:
        self.logger.info(f"Deleting book {id}")
        try:
            self.repo.delete(id)
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to delete book: {e}")
            return Code.INTERNAL_ERROR

        self.logger.info("Book deleted successfully")
        return Code.SUCCESS
