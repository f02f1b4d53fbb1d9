"""
API error responses.

Failed API calls return a body of the form::

    {"error": {"type": "validation_failed", "code": 422, "message": "...",
               "request_id": "...", "documentation_url": "...",
               "errors": [{"field": "...", "message": "...", "request_pointer": "..."}]}}

This module decodes that body with the same resource machinery as every
other response and maps it onto an exception class per error type. The
HTTP exchange itself is performed elsewhere; only the finished
httpx.Response is inspected here.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

import httpx

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.errors import DecodeError, GoCardlessError
from gocardless_pro.resources.base import Resource

logger = logging.getLogger(__name__)


class ApiErrorType(TolerantWireEnum):
    UNKNOWN = "unknown"
    AUTHENTICATION_FAILED = "authentication_failed"
    GOCARDLESS = "gocardless"
    INVALID_API_USAGE = "invalid_api_usage"
    INVALID_STATE = "invalid_state"
    VALIDATION_FAILED = "validation_failed"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    RATE_LIMIT_REACHED = "rate_limit_reached"


class ErrorDetail(Resource):
    """
    One entry of ``error.errors``. Validation failures fill field and
    request_pointer; other error types fill reason and links.
    """

    reason: Optional[str] = None
    message: Optional[str] = None
    links: Optional[Dict[str, str]] = None
    field: Optional[str] = None
    request_pointer: Optional[str] = None


class ApiError(Resource):
    message: Optional[str] = None
    documentation_url: Optional[str] = None
    type: Optional[ApiErrorType] = None
    request_id: Optional[str] = None
    code: Optional[int] = None
    errors: Optional[List[ErrorDetail]] = None


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GoCardlessApiError(GoCardlessError):
    """An error response from the API. Subclasses narrow it by error type."""

    def __init__(self, api_error: ApiError, *, response: Optional[httpx.Response] = None) -> None:
        super().__init__(api_error.message or "GoCardless API error", payload=api_error.raw)
        self.api_error = api_error
        self.response = response

    @property
    def type(self) -> Optional[ApiErrorType]:
        return self.api_error.type

    @property
    def code(self) -> Optional[int]:
        return self.api_error.code

    @property
    def request_id(self) -> Optional[str]:
        return self.api_error.request_id

    @property
    def documentation_url(self) -> Optional[str]:
        return self.api_error.documentation_url

    @property
    def errors(self) -> List[ErrorDetail]:
        return list(self.api_error.errors or [])


class InternalError(GoCardlessApiError):
    pass


class InvalidApiUsageError(GoCardlessApiError):
    pass


class InvalidStateError(GoCardlessApiError):
    pass


class ValidationFailedError(GoCardlessApiError):
    def field_errors(self) -> Dict[str, str]:
        """Validation messages keyed by the offending request field."""
        return {e.field: e.message or "" for e in self.errors if e.field}


class AuthenticationFailedError(GoCardlessApiError):
    pass


class InsufficientPermissionsError(GoCardlessApiError):
    pass


class RateLimitReachedError(GoCardlessApiError):
    pass


_EXCEPTION_TYPES: Dict[ApiErrorType, Type[GoCardlessApiError]] = {
    ApiErrorType.GOCARDLESS: InternalError,
    ApiErrorType.INVALID_API_USAGE: InvalidApiUsageError,
    ApiErrorType.INVALID_STATE: InvalidStateError,
    ApiErrorType.VALIDATION_FAILED: ValidationFailedError,
    ApiErrorType.AUTHENTICATION_FAILED: AuthenticationFailedError,
    ApiErrorType.INSUFFICIENT_PERMISSIONS: InsufficientPermissionsError,
    ApiErrorType.RATE_LIMIT_REACHED: RateLimitReachedError,
}


def to_exception(api_error: ApiError, response: Optional[httpx.Response] = None) -> GoCardlessApiError:
    """
    Build the exception matching the error's type.

    Error types this SDK version does not know decode to UNKNOWN and map to
    the base GoCardlessApiError rather than failing.
    """
    exc_type = _EXCEPTION_TYPES.get(api_error.type, GoCardlessApiError)
    return exc_type(api_error, response=response)


def from_response(response: httpx.Response) -> GoCardlessApiError:
    """Decode an error response into the matching exception (returned, not raised)."""
    try:
        body = response.json()
    except ValueError:
        body = None

    error_body = body.get("error") if isinstance(body, dict) else None
    if isinstance(error_body, dict):
        try:
            api_error = ApiError.from_dict(error_body)
        except DecodeError:
            logger.warning("Undecodable error body (status=%s)", response.status_code)
        else:
            return to_exception(api_error, response=response)
    else:
        logger.warning("Error response without an error object (status=%s)", response.status_code)

    fallback = ApiError(
        message=f"HTTP {response.status_code}: {response.reason_phrase or 'error'}",
        code=response.status_code,
    )
    return GoCardlessApiError(fallback, response=response)
