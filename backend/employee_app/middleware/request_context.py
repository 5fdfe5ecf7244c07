"""
Employee App Backend: Request Context Middleware
==================================================

What:  Tags each request with a correlation ID and writes one access log line.
How:   The ID comes from the client's X-Request-ID header or a fresh short
       UUID. It is stored in `request_id_var` so the exception handlers can
       put it in error bodies, and echoed back in the response header.

Access line format:
    DELETE /employees/{employee_id} employee_id=3 -> 200 (1.4ms) rid=1a2b3c4d

The route template is logged instead of the raw path, with the employee id
appended when the route carries one. /health is not logged.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

access_logger = logging.getLogger("employee_app.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request ID tagging plus access logging for the employee API."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(rid)
        started = time.perf_counter()

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid

        if request.url.path != "/health":
            self._log_access(request, response.status_code, started, rid)
        return response

    @staticmethod
    def _log_access(request: Request, status: int, started: float, rid: str) -> None:
        # Routing fills scope["route"] and scope["path_params"] in place
        route = request.scope.get("route")
        path = getattr(route, "path", None) or request.url.path
        employee_id = request.scope.get("path_params", {}).get("employee_id")
        target = f"{path} employee_id={employee_id}" if employee_id is not None else path

        access_logger.log(
            _level_for(status),
            "%s %s -> %d (%.1fms) rid=%s",
            request.method,
            target,
            status,
            (time.perf_counter() - started) * 1000,
            rid,
        )
