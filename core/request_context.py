# core/request_context.py
from contextvars import ContextVar

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return _request_id.get()


def set_request_id(request_id: str):
    """Bind a request id to the current context, returns the reset token"""
    return _request_id.set(request_id)


def reset_request_id(token) -> None:
    _request_id.reset(token)
