# core/log.py
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from core.request_context import get_request_id


class RequestIdFilter(logging.Filter):
    """Attach the current request id to every record"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id()
        return True


class ServiceFormatter(logging.Formatter):
    """[service] [timestamp] [level] : { requestId: ..., msg: ... }"""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return datetime.fromtimestamp(record.created, timezone.utc).astimezone().isoformat(timespec="seconds")

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return (
            f"[{self.service_name}] [{self.formatTime(record)}] [{record.levelname.lower()}] : "
            f"{{ requestId: {getattr(record, 'request_id', '')}, msg: {message} }}"
        )


def setup_logging(service_name: str, level: str = "INFO") -> logging.Logger:
    """Configure the root logger to write service formatted lines to stdout"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceFormatter(service_name))
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, ServiceFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())
    # SQL statement logging stays opt-in
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return root
