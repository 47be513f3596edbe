"""
Repository interfaces.

Services depend on these abstract classes so tests can swap the SQLAlchemy
repositories for doubles. Every method takes an optional ``tx`` session;
without it the statement runs on the ambient request session.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from core.pagination import PaginatedData, PaginationRequest
from core.sa.models import Author, Book


class IAuthorRepository(ABC):

    @abstractmethod
    def create(self, author: Author, tx: Optional[Session] = None) -> Author:
        """Insert an author; its id is assigned by storage.

        Raises:
            DuplicateKeyError: if a live author already uses the pen name
        """

    @abstractmethod
    def get_by_id(self, id: UUID, tx: Optional[Session] = None) -> Optional[Author]:
        """Live author by id, or None"""

    @abstractmethod
    def get_by_pen_name(self, pen_name: str, tx: Optional[Session] = None) -> Optional[Author]:
        """Live author by pen name, or None"""

    @abstractmethod
    def get_all(self, pagination: PaginationRequest, tx: Optional[Session] = None) -> PaginatedData[Author]:
        """One page of live authors plus pagination metadata"""

    @abstractmethod
    def update(self, id: UUID, author: Author, tx: Optional[Session] = None) -> None:
        """Overwrite pen name and birth year of a live author"""

    @abstractmethod
    def delete(self, id: UUID, tx: Optional[Session] = None) -> None:
        """Logically delete an author. Deleting a missing author is not an error."""


class IBookRepository(ABC):

    @abstractmethod
    def create(self, book: Book, tx: Optional[Session] = None) -> Book:
        """Insert a book; its id is assigned by storage.

        Raises:
            DuplicateKeyError: if a live book already uses the ISBN
        """

    @abstractmethod
    def get_by_id(self, id: UUID, tx: Optional[Session] = None) -> Optional[Book]:
        """Live book by id with its author attached, or None"""

    @abstractmethod
    def get_by_isbn(self, isbn: str, tx: Optional[Session] = None) -> Optional[Book]:
        """Live book by ISBN, or None"""

    @abstractmethod
    def get_by_author_id(
        self,
        author_id: UUID,
        pagination: PaginationRequest,
        tx: Optional[Session] = None
    ) -> PaginatedData[Book]:
        """One page of an author's live books"""

    @abstractmethod
    def get_all(self, pagination: PaginationRequest, tx: Optional[Session] = None) -> PaginatedData[Book]:
        """One page of live books, each with its author attached"""

    @abstractmethod
    def update(self, id: UUID, book: Book, tx: Optional[Session] = None) -> None:
        """Overwrite author id, name and ISBN of a live book"""

    @abstractmethod
    def delete(self, id: UUID, tx: Optional[Session] = None) -> None:
        """Logically delete a book. Deleting a missing book is not an error."""
