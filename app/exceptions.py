# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure a route can produce is one of the classes below, and a single
# handler turns them into empty-bodied responses with the matching status.
# =============================================================================

import logging
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BirdsAPIException(Exception):
    """
    Base exception for the Birds API.

    All custom exceptions inherit from this class. The message, code and
    suggestion are logged; clients only see the status code.
    """

    def __init__(
        self,
        message: str,
        code: str = "BIRDS_API_ERROR",
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
        """Convert exception to a dict (used for log records)."""
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
# Representation Exceptions
# =============================================================================

class NotAcceptableError(BirdsAPIException):
    """Raised when none of the offered representations satisfy Accept."""

    def __init__(self, accept: str | None, offered: list[str]):
        super().__init__(
            message=f"Cannot produce a representation for Accept: {accept}",
            code="NOT_ACCEPTABLE",
            status_code=406,
            suggestion=f"Request one of: {', '.join(offered)}",
            details={"accept": accept, "offered": offered},
        )


class InvalidPayloadError(BirdsAPIException):
    """Raised when a request body cannot be read as a bird payload."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Invalid request body: {error}",
            code="INVALID_PAYLOAD",
            status_code=400,
            suggestion="Send a JSON object or form fields with string title and description",
            details={"error": error},
        )


# =============================================================================
# Bird Exceptions
# =============================================================================

class BirdNotFoundError(BirdsAPIException):
    """Raised when a bird ID doesn't exist."""

    def __init__(self, bird_id: int):
        super().__init__(
            message=f"Bird not found: {bird_id}",
            code="BIRD_NOT_FOUND",
            status_code=404,
            suggestion="Check that the bird_id is correct and the bird hasn't been deleted",
            details={"bird_id": bird_id},
        )


class BirdUpdateError(BirdsAPIException):
    """Raised when an update matches no bird or the store rejects the write."""

    def __init__(self, bird_id: int, error: str | None = None):
        super().__init__(
            message=f"Failed to update bird {bird_id}: {error or 'no matching bird'}",
            code="BIRD_UPDATE_FAILED",
            status_code=400,
            suggestion="Send both title and description for an existing bird",
            details={"bird_id": bird_id, "error": error},
        )


class StoreError(BirdsAPIException):
    """Raised when the database call itself fails."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Database error during {operation}: {error}",
            code="STORE_ERROR",
            status_code=500,
            suggestion="Check database connectivity and that migrations have been applied",
            details={"operation": operation, "error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def birds_api_exception_handler(
    request: Request,
    exc: BirdsAPIException
) -> Response:
    """
    Convert BirdsAPIException to an empty response carrying its status code.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return Response(status_code=exc.status_code)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
