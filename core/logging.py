"""
Logging setup and request logging middleware.

- configure_logging() applies LOG_LEVEL and a single line format process-wide.
- The middleware adds an X-Request-ID header (UUID4) to each response and request.state.
- Logs method, path, status, latency and request-id.
"""
import logging
import time
import uuid
from typing import Callable

from starlette.requests import Request

from config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("jobhunt.request")


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for the API process."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)


async def request_logging_middleware(request: Request, call_next: Callable):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.perf_counter()
    response = await call_next(request)
    latency = (time.perf_counter() - start) * 1000.0
    response.headers["X-Request-ID"] = request_id
    logger.info(
        "id=%s method=%s path=%s status=%s latency_ms=%.2f",
        request_id, request.method, request.url.path, response.status_code, latency,
    )
    return response
