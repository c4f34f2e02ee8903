# =============================================================================
# app/exceptions.py - Portal Errors
# =============================================================================
# Request-level errors and the handlers that turn them into JSON. Each error
# carries a machine-readable code and, where possible, a next step.
#
# Schema validation failures are NOT exceptions: they are returned as values
# (see core/validation.py). Only request-level problems are raised here.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class PortalException(Exception):
    """
    Base class for errors that map to an HTTP response.

    Attributes:
        message: Shown to the client as "detail"
        code: Stable identifier, e.g. "NOT_AUTHENTICATED"
        status_code: HTTP status
        suggestion: Optional next step for the user
        details: Optional structured context
    """

    def __init__(
        self,
        message: str,
        code: str = "PORTAL_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Response body; empty suggestion/details are left out."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Session Exceptions
# =============================================================================

class NotAuthenticatedError(PortalException):
    """Raised when a portal request carries no valid session cookie."""

    def __init__(self):
        super().__init__(
            message="Not authenticated",
            code="NOT_AUTHENTICATED",
            status_code=401,
            suggestion="Log in to the subscriber portal again",
        )


# =============================================================================
# Request Exceptions
# =============================================================================

class PayloadTooLargeError(PortalException):
    """Raised when a mutating request body exceeds the configured limit."""

    def __init__(self, size: int | None, limit: int):
        super().__init__(
            message=f"Request body too large (max: {limit} bytes)",
            code="PAYLOAD_TOO_LARGE",
            status_code=413,
            suggestion=f"Send a request body smaller than {limit // 1024}KB",
            details={"size": size, "limit": limit},
        )


class LengthRequiredError(PortalException):
    """Raised when a mutating request streams its body without Content-Length."""

    def __init__(self, limit: int):
        super().__init__(
            message="Content-Length required",
            code="LENGTH_REQUIRED",
            status_code=411,
            suggestion="Send the request body with a Content-Length header",
            details={"limit": limit},
        )


# =============================================================================
# Location Exceptions
# =============================================================================

class LocationHierarchyError(PortalException):
    """Raised when a location update would break the hierarchy."""

    def __init__(self, location_id: str):
        super().__init__(
            message="Location cannot be its own parent",
            code="INVALID_LOCATION_PARENT",
            status_code=400,
            suggestion="Choose a different parent location or none",
            details={"location_id": location_id},
        )


class LocationInUseError(PortalException):
    """Raised when deleting a location that still has dependents."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="LOCATION_IN_USE",
            status_code=409,
            suggestion="Move or delete the dependent records first",
            details=details,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def portal_exception_handler(
    request: Request,
    exc: PortalException
) -> JSONResponse:
    """Render a PortalException with its own status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors.

    Reports every violation as a {path, message} pair, the same shape
    the schema layer uses.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"path": [str(part) for part in error.get("loc", ())], "message": error.get("msg", "")}
                for error in exc.errors()
            ],
        }
    )
