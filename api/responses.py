# api/responses.py
from typing import Any, Optional

from fastapi.responses import JSONResponse

from core.codes import Code, build_response, get_http_status


def respond(code: Code, data: Optional[Any] = None) -> JSONResponse:
    """Standard envelope with the HTTP status taken from the code"""
    return JSONResponse(status_code=get_http_status(code), content=build_response(code, data))
