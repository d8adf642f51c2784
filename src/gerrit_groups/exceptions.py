"""
Exception hierarchy for the Gerrit groups client.

Every failure coming from the transport or the server is an ``ApiError``.
Subclasses map the HTTP status codes the group endpoints return, so callers
can catch ``NotFoundError`` or ``ConflictError`` without inspecting status
codes. ``OperationNotImplementedError`` is deliberately outside this
hierarchy: it signals a missing client capability, not a remote failure.
"""

from typing import Any, Dict, Optional


class ApiError(Exception):
    """
    Base exception for all REST API errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class OperationNotImplementedError(NotImplementedError):
    """
    The facade implementation does not provide this operation.

    Raised immediately, without contacting the server.
    """

    def __init__(self, operation: str):
        super().__init__(f"Operation not implemented: {operation}")
        self.operation = operation


# =============================================================================
# Request Errors (400, 405, 422)
# =============================================================================


class BadRequestError(ApiError):
    """The server rejected the request parameters or body."""

    def __init__(
        self,
        message: str = "Bad request",
        *,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class MethodNotAllowedError(ApiError):
    """The operation is not allowed on this resource (e.g. renaming a system group)."""

    def __init__(
        self,
        message: str = "Method not allowed",
        *,
        status_code: int = 405,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class UnprocessableEntityError(ApiError):
    """
    The request referenced something the server could not resolve.

    Raised, for example, when adding an account that does not exist
    to a group.
    """

    def __init__(
        self,
        message: str = "Unprocessable entity",
        *,
        status_code: int = 422,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Authentication / Authorization Errors (401, 403)
# =============================================================================


class AuthenticationError(ApiError):
    """Credentials are missing or invalid."""

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class AuthorizationError(ApiError):
    """The authenticated account lacks the permission for this operation."""

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Not Found Errors (404)
# =============================================================================


class NotFoundError(ApiError):
    """
    Requested resource was not found.

    Raised when the API returns a 404 status code.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        details: Optional[Dict[str, Any]] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        if resource_type or resource_id:
            details = details or {}
            if resource_type:
                details["resource_type"] = resource_type
            if resource_id:
                details["resource_id"] = resource_id
        super().__init__(message, status_code=status_code, details=details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class GroupNotFoundError(NotFoundError):
    """The group identifier did not resolve to a visible group."""

    def __init__(
        self,
        group_id: Optional[str] = None,
        *,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or (f"Group not found: {group_id}" if group_id else "Group not found"),
            status_code=404,
            details=details,
            resource_type="group",
            resource_id=group_id,
        )


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(ApiError):
    """Request conflicts with the current state of the resource."""

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class GroupExistsError(ConflictError):
    """A group with the same name already exists."""

    def __init__(
        self,
        name: str,
        *,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or f"Group already exists: {name}",
            status_code=409,
            details=details,
        )
        self.name = name


# =============================================================================
# Rate Limit Errors (429)
# =============================================================================


class RateLimitError(ApiError):
    """
    Rate limit exceeded.

    ``retry_after`` carries the server's Retry-After hint in seconds.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.retry_after = retry_after


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(ApiError):
    """Server-side error occurred."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Client-side Errors
# =============================================================================


class NetworkError(ApiError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    network-related issues.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class MalformedResponseError(ApiError):
    """The response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str = "Malformed response",
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> ApiError:
    """
    Create an appropriate exception from an HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message (Gerrit sends plain-text error bodies)
        details: Additional error details

    Returns:
        Appropriate ApiError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else ApiError
    return exception_class(message, status_code=status_code, details=details)
