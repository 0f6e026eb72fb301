from time import perf_counter
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from fastapi import status

log = structlog.stdlib.get_logger()


class RequestLogger(BaseHTTPMiddleware):
    """Logs every request and turns unhandled errors into a bare 500."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=str(uuid4()))

        started = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception('Unhandled error', method=request.method, path=request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={'title': 'An unexpected error occurred.', 'status': 500}
            )

        log.info('Request finished',
                 method=request.method,
                 path=request.url.path,
                 status=response.status_code,
                 duration_ms=round((perf_counter() - started) * 1000, 2))
        return response
