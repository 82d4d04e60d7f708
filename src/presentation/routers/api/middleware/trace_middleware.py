"""Per-request trace id.

Every request gets a trace id: the caller's X-Trace-Id when it is a sane
token, otherwise a fresh uuid7. The id is
- echoed in the X-Trace-Id response header
- stored on request.state for the exception handlers
- bound into structlog's context, so every log line emitted while the
  request runs (handler logs, event bus, payment gateway) carries it
"""

from __future__ import annotations

import re
from contextvars import ContextVar
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from uuid_extensions import uuid7

TRACE_HEADER = "X-Trace-Id"

# Client-supplied ids end up in logs and problem-details bodies.
_ACCEPTABLE_TRACE_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace id of the request being served, None outside a request."""
    return trace_id_context.get()


def resolve_trace_id(incoming: str | None) -> str:
    """Keep a well-formed incoming id, otherwise mint a new one."""
    if incoming and _ACCEPTABLE_TRACE_ID.match(incoming):
        return incoming
    return str(uuid7())


class TraceMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = resolve_trace_id(request.headers.get(TRACE_HEADER))
        request.state.trace_id = trace_id
        token = trace_id_context.set(trace_id)
        try:
            with structlog.contextvars.bound_contextvars(
                trace_id=trace_id,
                method=request.method,
                path=request.url.path,
            ):
                response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            trace_id_context.reset(token)
