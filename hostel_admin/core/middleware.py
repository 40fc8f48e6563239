import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its response status and duration"""

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        logger.info(f"REQUEST: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"ERROR: {request.method} {request.url.path} -> {str(e)}")
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"RESPONSE: {response.status_code} {request.url.path} ({elapsed_ms:.1f}ms)")
        return response
