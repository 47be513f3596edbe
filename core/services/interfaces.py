"""
Service interfaces.

Handlers and the book service depend on these abstract classes, which lets
tests replace a service with a double. Each operation returns a result
code, paired with its result when it has one.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from uuid import UUID

from core.codes import Code
from core.models import CreateAuthorRequest, UpdateAuthorRequest, CreateBookRequest, UpdateBookRequest
from core.pagination import PaginatedData, PaginationRequest
from core.sa.models import Author, Book


class IAuthorService(ABC):

    @abstractmethod
    def create_author(self, req: CreateAuthorRequest) -> Tuple[Optional[Author], Code]:
        pass

    @abstractmethod
    def get_author_by_id(self, id: UUID) -> Tuple[Optional[Author], Code]:
        """
        Look up an author.

        An unknown id is not an error here: the result is ``(None, SUCCESS)``.
        """
        pass

    @abstractmethod
    def get_all_authors(self, pagination: PaginationRequest) -> Tuple[Optional[PaginatedData[Author]], Code]:
        pass

    @abstractmethod
    def update_author(self, id: UUID, req: UpdateAuthorRequest) -> Code:
        pass

    @abstractmethod
    def delete_author(self, id: UUID) -> Code:
        pass


class IBookService(ABC):

    @abstractmethod
    def create_book(self, req: CreateBookRequest) -> Tuple[Optional[Book], Code]:
        pass

    @abstractmethod
    def get_book_by_id(self, id: UUID) -> Tuple[Optional[Book], Code]:
        """
        Look up a book with its author attached.

        An unknown id yields ``(None, BOOK_NOT_FOUND)``.
        """
        pass

    @abstractmethod
    def get_books_by_author_id(
        self,
        author_id: UUID,
        pagination: PaginationRequest
    ) -> Tuple[Optional[PaginatedData[Book]], Code]:
        pass

    @abstractmethod
    def get_all_books(self, pagination: PaginationRequest) -> Tuple[Optional[PaginatedData[Book]], Code]:
        pass

    @abstractmethod
    def update_book(self, id: UUID, req: UpdateBookRequest) -> Code:
        pass

    @abstractmethod
    def delete_book(self, id: UUID) -> Code:
        pass
