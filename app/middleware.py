# =============================================================================
# app/middleware.py - HTTP Middleware
# =============================================================================
# Request body size cap for mutating requests (ACTIONS_BODY_SIZE_LIMIT,
# 2mb by default). Registered in main.py with app.middleware("http").
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import LengthRequiredError, PayloadTooLargeError, PortalException

logger = logging.getLogger(__name__)

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _reject(request: Request, exc: PortalException, reason: str) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {reason}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def limit_body_size(request: Request, call_next):
    """
    Reject mutating requests whose body may exceed the limit.

    Only headers are inspected; the body itself is not buffered.
    - Content-Length above the limit: 413
    - Chunked body with no Content-Length: 411, its size is unknown
    Requests with neither header, or a malformed Content-Length, are
    passed through.
    """
    if request.method in MUTATING_METHODS:
        limit = settings.body_size_limit_bytes
        declared = request.headers.get("content-length")
        try:
            size = int(declared) if declared is not None else None
        except ValueError:
            size = None

        if size is not None and size > limit:
            return _reject(
                request,
                PayloadTooLargeError(size, limit),
                f"body {size} bytes exceeds {limit}",
            )

        transfer_encoding = request.headers.get("transfer-encoding", "").lower()
        if declared is None and "chunked" in transfer_encoding:
            return _reject(request, LengthRequiredError(limit), "chunked body without Content-Length")

    return await call_next(request)
