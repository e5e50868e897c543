"""
Cars API Backend — Request Logging Middleware
==============================================

What:  One access log line for every HTTP request and response.
Why:   Shows which names were looked up, how each lookup ended (200, 204,
       500), and how long it took.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP, with structured fields in `extra`.
When:  After RequestIDMiddleware (uses request ID for correlation).

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: headers, request bodies
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from cars_api.middleware.request_id import request_id_var

logger = logging.getLogger("cars_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Log level follows the status code:
        5xx → ERROR (system problem, needs investigation)
        4xx → WARNING (client error)
        2xx/3xx → INFO (204 for an unknown car is a normal outcome)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
