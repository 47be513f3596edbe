# core/pagination.py
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import Field

from core.models.base import CamelModel

T = TypeVar('T')

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MAX_INT64 = 2**63 - 1

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class PaginationRequest(CamelModel):
    """Requested page. ``page_size`` is bounded to [1, 100] by its field
    constraints, which only ``Validator.validate`` checks."""
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    def get_offset(self) -> int:
        return (self.page - 1) * self.page_size

    def get_limit(self) -> int:
        return self.page_size


class PaginationResponse(CamelModel):
    page: int
    page_size: int
    total_pages: int
    total_items: int


def _parse_positive(value: str) -> Optional[int]:
    if not INTEGER_PATTERN.fullmatch(value):
        return None
    number = int(value)
    return number if 0 < number <= MAX_INT64 else None


def parse_pagination(page: Optional[str], page_size: Optional[str]) -> Tuple[PaginationRequest, List[str]]:
    """Parse ``page`` / ``pageSize`` query values.

    Empty values fall back to the defaults. Invalid values are reported in
    the returned error list and also fall back to the defaults, so the
    request is always usable; callers must reject it when errors is not
    empty. The page size upper bound is not checked here.

    A page whose offset does not fit a 64-bit integer is invalid.
    """
    page_error = page_size_error = False
    parsed_page = DEFAULT_PAGE
    parsed_page_size = DEFAULT_PAGE_SIZE

    if page:
        value = _parse_positive(page)
        if value is None:
            page_error = True
        else:
            parsed_page = value

    if page_size:
        value = _parse_positive(page_size)
        if value is None:
            page_size_error = True
        else:
            parsed_page_size = value

    if not page_error and (parsed_page - 1) * parsed_page_size > MAX_INT64:
        page_error = True
        parsed_page = DEFAULT_PAGE

    errors: List[str] = []
    if page_error:
        errors.append("Page must be greater than 0")
    if page_size_error:
        errors.append("Page size must be greater than 0")

    # model_construct skips the field constraints, see Validator.validate
    request = PaginationRequest.model_construct(page=parsed_page, page_size=parsed_page_size)
    return request, errors


def build_pagination_response(request: PaginationRequest, total_items: int) -> PaginationResponse:
    """Pagination metadata; total_pages is at least 1 even for empty results"""
    total_pages = (total_items + request.page_size - 1) // request.page_size
    return PaginationResponse(
        page=request.page,
        page_size=request.page_size,
        total_pages=max(1, total_pages),
        total_items=total_items,
    )


@dataclass
class PaginatedData(Generic[T]):
    items: List[T]
    pagination: PaginationResponse

    @classmethod
    def build(cls, items: List[T], request: PaginationRequest, total_items: int) -> "PaginatedData[T]":
        return cls(items=list(items), pagination=build_pagination_response(request, total_items))

    def to_dict(self, serialize: Callable[[T], Any]) -> Dict[str, Any]:
        return {
            "items": [serialize(item) for item in self.items],
            "pagination": self.pagination.model_dump(by_alias=True),
        }
