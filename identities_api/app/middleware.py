"""HTTP middleware."""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.logger import logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all incoming requests and responses"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        logger.debug(f"Incoming request: {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        logger.info(
            f"Completed request: {request.method} {request.url.path} "
            f"Status: {response.status_code} "
            f"Duration: {process_time:.3f}s"
        )

        return response
