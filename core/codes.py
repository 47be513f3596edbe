"""Result codes returned by every service operation.

A code is a five character string whose first three characters are the
HTTP status the code maps to (``"40401"`` -> 404). Handlers never look at
storage errors, only at these codes.
"""
from enum import Enum
from typing import Any, Dict, Optional, Union


class Code(str, Enum):
    # Standard codes
    SUCCESS = "20000"
    UPDATED = "20010"
    DELETED = "20020"
    CREATED = "20100"
    BAD_REQUEST = "40000"
    NOT_FOUND = "40400"
    CONFLICT = "40900"
    UNPROCESSABLE_ENTITY = "42200"
    INTERNAL_ERROR = "50000"

    # Custom codes
    BINDING_ERROR = "40010"
    UUID_FORMAT_INVALID = "40011"
    VALIDATION_ERROR = "40020"

    BOOK_NOT_FOUND = "40401"
    AUTHOR_NOT_FOUND = "40402"

    BOOK_ALREADY_EXISTS = "40901"
    AUTHOR_ALREADY_EXISTS = "40902"

    def __str__(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        return get_message(self)

    @property
    def http_status(self) -> int:
        return get_http_status(self)

    @property
    def is_success(self) -> bool:
        return self.http_status < 300


CODE_MESSAGES: Dict[Code, str] = {
    Code.SUCCESS: "Success",
    Code.UPDATED: "Updated successfully",
    Code.DELETED: "Deleted successfully",
    Code.CREATED: "Created successfully",
    Code.BAD_REQUEST: "Bad Request",
    Code.NOT_FOUND: "Not Found",
    Code.CONFLICT: "Conflict",
    Code.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    Code.INTERNAL_ERROR: "Internal Server Error",

    Code.BINDING_ERROR: "JSON parse error",
    Code.UUID_FORMAT_INVALID: "Invalid UUID format",
    Code.VALIDATION_ERROR: "Validation error",
    Code.BOOK_NOT_FOUND: "Book not found",
    Code.AUTHOR_NOT_FOUND: "Author not found",
    Code.BOOK_ALREADY_EXISTS: "Book already exists",
    Code.AUTHOR_ALREADY_EXISTS: "Author already exists",
}

INTERNAL_SERVER_ERROR_STATUS = 500


def get_message(code: Union[Code, str]) -> str:
    """Human readable message for a code, empty string for unknown codes."""
    try:
        return CODE_MESSAGES.get(Code(code), "")
    except ValueError:
        return ""


def get_http_status(code: Union[Code, str]) -> int:
    """HTTP status encoded in the first three characters of a code.

    Malformed codes (shorter than three characters or with a non numeric
    prefix) map to 500.
    """
    raw = code.value if isinstance(code, Code) else str(code)
    prefix = raw[:3]
    if len(prefix) < 3 or not (prefix.isascii() and prefix.isdigit()):
        return INTERNAL_SERVER_ERROR_STATUS
    return int(prefix)


def build_response(code: Union[Code, str], data: Optional[Any] = None) -> Dict[str, Any]:
    """Build the standard ``{code, message, data}`` envelope.

    ``data`` is left out of the envelope when it is ``None``.
    """
    raw = code.value if isinstance(code, Code) else str(code)
    response: Dict[str, Any] = {
        "code": raw,
        "message": get_message(code),
    }
    if data is not None:
        response["data"] = data
    return response
