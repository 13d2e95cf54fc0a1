"""Platform SDK error types.

Error codes mirror the ``code`` field of platform API error bodies.
"""

from __future__ import annotations

from typing import Any


class PlatformError(Exception):
    """Base error for all platform SDK exceptions."""

    code: str = "internal error"
    message: str = "An internal error occurred"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.details = details or {}
        super().__init__(self.message)


class InvalidRequestError(PlatformError):
    """Request rejected as invalid (400)."""

    code = "invalid"
    message = "Invalid request"
    status_code = 400


class UnauthorizedError(PlatformError):
    """Authentication required (401)."""

    code = "unauthorized"
    message = "Authentication required"
    status_code = 401


class ForbiddenError(PlatformError):
    """Permission denied (403)."""

    code = "forbidden"
    message = "Permission denied"
    status_code = 403


class NotFoundError(PlatformError):
    """Resource not found (404)."""

    code = "not found"
    message = "Resource not found"
    status_code = 404


class ConflictError(PlatformError):
    """Conflict, e.g. a bucket name already taken in the organization (409)."""

    code = "conflict"
    message = "Conflict"
    status_code = 409


class UnprocessableEntityError(PlatformError):
    """Request understood but semantically wrong (422)."""

    code = "unprocessable entity"
    message = "Unprocessable entity"
    status_code = 422


class TooManyRequestsError(PlatformError):
    """Rate limit exceeded (429)."""

    code = "too many requests"
    message = "Too many requests"
    status_code = 429


class InternalServerError(PlatformError):
    """Server-side failure (500)."""

    code = "internal error"
    message = "Internal server error"
    status_code = 500


class UnavailableError(PlatformError):
    """Platform temporarily unavailable (503)."""

    code = "unavailable"
    message = "Service unavailable"
    status_code = 503


ERROR_CODE_MAP: dict[str, type[PlatformError]] = {
    "invalid": InvalidRequestError,
    "unauthorized": UnauthorizedError,
    "forbidden": ForbiddenError,
    "not found": NotFoundError,
    "conflict": ConflictError,
    "unprocessable entity": UnprocessableEntityError,
    "too many requests": TooManyRequestsError,
    "internal error": InternalServerError,
    "unavailable": UnavailableError,
}

STATUS_CODE_MAP: dict[int, type[PlatformError]] = {
    cls.status_code: cls for cls in ERROR_CODE_MAP.values()
}


def raise_for_error_response(
    status_code: int,
    response_body: dict[str, Any],
) -> None:
    """Raise the PlatformError matching an API error response.

    The body's ``code`` wins; the HTTP status is the fallback when the code
    is missing or unknown.

    Args:
        status_code: HTTP status code
        response_body: Parsed JSON response body

    Raises:
        PlatformError: Appropriate subclass for the response
    """
    code = response_body.get("code")
    message = response_body.get("message")
    details = response_body.get("details") or {}
    if not isinstance(details, dict):
        details = {"details": details}
    if "op" in response_body:
        details = {**details, "op": response_body["op"]}

    error_class = ERROR_CODE_MAP.get(code) if isinstance(code, str) else None
    if error_class is None:
        error_class = STATUS_CODE_MAP.get(status_code, PlatformError)
    error = error_class(message=message, details=details)
    # the server's answer, not the class default
    error.status_code = status_code
    if error_class is PlatformError and isinstance(code, str):
        error.code = code
    raise error
