# api/middleware.py
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.request_context import REQUEST_ID_HEADER, reset_request_id, set_request_id


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with an id, taken from X-Request-ID or generated.

    The id is visible to log records of the request and echoed back in the
    response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
