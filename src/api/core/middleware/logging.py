import time
import uuid

import structlog
from fastapi import Request

from src.utils.logger import get_client_ip, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def logging_middleware(request: Request, call_next):
    """Bind per-request context and log one ``request`` event per call.

    Health probes are passed through unlogged.
    """
    if request.url.path.startswith("/health"):
        return await call_next(request)

    started = time.perf_counter()
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    ip_address = get_client_ip(request)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        ip_address=ip_address,
        method=request.method,
        path=request.url.path,
        request_id=request_id,
    )

    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    log = logger.error if response.status_code >= 500 else logger.info
    log(
        "request",
        status_code=response.status_code,
        duration_ms=int((time.perf_counter() - started) * 1000),
        # Set by the auth middleware, which runs inside this one
        volunteer_id=getattr(request.state, "volunteer_id", None),
    )

    return response
