# api/routes/books.py
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from api.dependencies import get_book_service, get_validator
from api.responses import respond
from api.schemas import BookResponse, dump
from core.codes import Code
from core.errors import InvalidIdentifierError
from core.identifiers import parse_uuid
from core.models import CreateBookRequest, UpdateBookRequest
from core.pagination import parse_pagination
from core.services import IBookService
from core.validator import Validator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/book", tags=["books"])


def _serialize(book) -> dict:
    return dump(BookResponse, book)


@router.post("/")
def create_book(
    payload: Any = Body(None),
    service: IBookService = Depends(get_book_service),
    validator: Validator = Depends(get_validator),
):
    """Create a book from ``{authorId, name, isbn}``"""
    result = validator.bind(CreateBookRequest, payload)
    if result.code == Code.BINDING_ERROR:
        logger.error(f"Invalid request body: {result.detail}")
        return respond(Code.BINDING_ERROR, result.detail)
    if result.code == Code.VALIDATION_ERROR:
        logger.error(f"Validation failed: {result.errors}")
        return respond(Code.VALIDATION_ERROR, result.errors)

    book, code = service.create_book(result.request)
    if code != Code.SUCCESS:
        logger.error(f"Failed to create book: {code.message}")
        return respond(code)

    return respond(Code.CREATED, _serialize(book))


@router.get("/author/{author_id}")
def get_books_by_author(
    author_id: str,
    page: Optional[str] = Query(None, description="Page number, 1-based"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Items per page, 1 to 100"),
    service: IBookService = Depends(get_book_service),
    validator: Validator = Depends(get_validator),
):
    """
    Get a page of books written by an author.

    The author itself is not checked: an unknown author simply has no books.
    """
    try:
        parsed_author_id = parse_uuid(author_id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid author ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    pagination, errors = parse_pagination(page, page_size)
    errors = errors or validator.validate(pagination)
    if errors:
        logger.error(f"Invalid pagination parameters: {errors}")
        return respond(Code.VALIDATION_ERROR, errors)

    books, code = service.get_books_by_author_id(parsed_author_id, pagination)
    if code != Code.SUCCESS:
        logger.error(f"Failed to get books by author ID: {code.message}")
        return respond(code)

    return respond(Code.SUCCESS, books.to_dict(_serialize))


@router.get("/{id}")
def get_book(id: str, service: IBookService = Depends(get_book_service)):
    try:
        book_id = parse_uuid(id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid book ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    book, code = service.get_book_by_id(book_id)
    if code != Code.SUCCESS:
        logger.error(f"Failed to get book: {code.message}")
        return respond(code)

    return respond(Code.SUCCESS, _serialize(book))


@router.get("/")
def get_all_books(
    page: Optional[str] = Query(None, description="Page number, 1-based"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Items per page, 1 to 100"),
    service: IBookService = Depends(get_book_service),
    validator: Validator = Depends(get_validator),
):
    """Get a page of books, each with its author"""
    pagination, errors = parse_pagination(page, page_size)
    errors = errors or validator.validate(pagination)
    if errors:
        logger.error(f"Invalid pagination parameters: {errors}")
        return respond(Code.VALIDATION_ERROR, errors)

    books, code = service.get_all_books(pagination)
    if code != Code.SUCCESS:
        logger.error(f"Failed to get all books: {code.message}")
        return respond(code)

    return respond(Code.SUCCESS, books.to_dict(_serialize))


@router.put("/{id}")
def update_book(
    id: str,
    payload: Any = Body(None),
    service: IBookService = Depends(get_book_service),
    validator: Validator = Depends(get_validator),
):
    """Replace a book's author, name and ISBN"""
    try:
        book_id = parse_uuid(id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid book ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    result = validator.bind(UpdateBookRequest, payload)
    if result.code == Code.BINDING_ERROR:
        logger.error(f"Invalid request body: {result.detail}")
        return respond(Code.BINDING_ERROR, result.detail)
    if result.code == Code.VALIDATION_ERROR:
        logger.error(f"Validation failed: {result.errors}")
        return respond(Code.VALIDATION_ERROR, result.errors)

    code = service.update_book(book_id, result.request)
    if code != Code.SUCCESS:
        logger.error(f"Failed to update book: {code.message}")
        return respond(code)

    return respond(Code.UPDATED)


@router.delete("/{id}")
def delete_book(id: str, service: IBookService = Depends(get_book_service)):
    try:
        book_id = parse_uuid(id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid book ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    code = service.delete_book(book_id)
    if code != Code.SUCCESS:
        logger.error(f"Failed to delete book: {code.message}")
        return respond(code)

    return respond(Code.DELETED)
