# api/routes/authors.py
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from api.dependencies import get_author_service, get_validator
from api.responses import respond
from api.schemas import AuthorResponse, dump
from core.codes import Code
from core.errors import InvalidIdentifierError
from core.identifiers import parse_uuid
from core.models import CreateAuthorRequest, UpdateAuthorRequest
from core.pagination import parse_pagination
from core.services import IAuthorService
from core.validator import Validator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/author", tags=["authors"])


@router.post("/")
def create_author(
    payload: Any = Body(None),
    service: IAuthorService = Depends(get_author_service),
    validator: Validator = Depends(get_validator),
):
    """Create an author from ``{penName, birthYear}``"""
    result = validator.bind(CreateAuthorRequest, payload)
    if result.code == Code.BINDING_ERROR:
        logger.error(f"Invalid request body: {result.detail}")
        return respond(Code.BINDING_ERROR, result.detail)
    if result.code == Code.VALIDATION_ERROR:
        logger.error(f"Validation failed: {result.errors}")
        return respond(Code.VALIDATION_ERROR, result.errors)

    author, code = service.create_author(result.request)
    if code != Code.SUCCESS:
        logger.error(f"Failed to create author: {code.message}")
        return respond(code)

    return respond(Code.CREATED, dump(AuthorResponse, author))


@router.get("/{id}")
def get_author(id: str, service: IAuthorService = Depends(get_author_service)):
    """
    Get an author by ID.

    An unknown ID answers 200 with no data, unlike books which answer 404.
    """
    try:
        author_id = parse_uuid(id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid author ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    author, code = service.get_author_by_id(author_id)
    if code != Code.SUCCESS:
        logger.error(f"Failed to get author: {code.message}")
        return respond(code)

    return respond(Code.SUCCESS, dump(AuthorResponse, author))


@router.get("/")
def get_all_authors(
    page: Optional[str] = Query(None, description="Page number, 1-based"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Items per page, 1 to 100"),
    service: IAuthorService = Depends(get_author_service),
    validator: Validator = Depends(get_validator),
):
    """Get a page of authors"""
    pagination, errors = parse_pagination(page, page_size)
    errors = errors or validator.validate(pagination)
    if errors:
        logger.error(f"Invalid pagination parameters: {errors}")
        return respond(Code.VALIDATION_ERROR, errors)

    authors, code = service.get_all_authors(pagination)
    if code != Code.SUCCESS:
        logger.error(f"Failed to get all authors: {code.message}")
        return respond(code)

    return respond(Code.SUCCESS, authors.to_dict(lambda author: dump(AuthorResponse, author)))


@router.put("/{id}")
def update_author(
    id: str,
    payload: Any = Body(None),
    service: IAuthorService = Depends(get_author_service),
    validator: Validator = Depends(get_validator),
):
    """Replace an author's pen name and birth year"""
    try:
        author_id = parse_uuid(id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid author ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    result = validator.bind(UpdateAuthorRequest, payload)
    if result.code == Code.BINDING_ERROR:
        logger.error(f"Invalid request body: {result.detail}")
        return respond(Code.BINDING_ERROR, result.detail)
    if result.code == Code.VALIDATION_ERROR:
        logger.error(f"Validation failed: {result.errors}")
        return respond(Code.VALIDATION_ERROR, result.errors)

    code = service.update_author(author_id, result.request)
    if code != Code.SUCCESS:
        logger.error(f"Failed to update author: {code.message}")
        return respond(code)

    return respond(Code.UPDATED)


@router.delete("/{id}")
def delete_author(id: str, service: IAuthorService = Depends(get_author_service)):
    try:
        author_id = parse_uuid(id)
    except InvalidIdentifierError as e:
        logger.error(f"Invalid author ID format: {e.message}")
        return respond(Code.UUID_FORMAT_INVALID)

    code = service.delete_author(author_id)
    if code != Code.SUCCESS:
        logger.error(f"Failed to delete author: {code.message}")
        return respond(code)

    return respond(Code.DELETED)
