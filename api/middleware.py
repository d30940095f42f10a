import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("golfbuddy.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request.

    Bodies and headers are never logged (they carry passwords and tokens).
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error(
                "%s %s 500 %.1fms from %s",
                request.method,
                request.url.path,
                duration_ms,
                client_ip,
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s %d %.1fms from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            client_ip,
        )
        return response
