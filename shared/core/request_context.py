from contextvars import ContextVar
from typing import Optional

from starlette.requests import Request

# Request currently being served, set by RequestContextMiddleware
request_context: ContextVar[Optional[Request]] = ContextVar(
    "request_context", default=None
)
