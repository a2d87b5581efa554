"""
Exception classes for the WorkOS SDK.
"""

from __future__ import annotations

from typing import Any


class WorkOSError(Exception):
    """Base exception for WorkOS SDK errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Any | None = None,
        status_code: int | None = None,
        request_id: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code
        self.request_id = request_id


class UnauthorizedError(WorkOSError):
    """Raised when the API key is missing, invalid or revoked."""

    def __init__(self, request_id: str = "") -> None:
        super().__init__(
            "Could not authorize the request. Maybe your API key is invalid?",
            "UNAUTHORIZED",
            None,
            401,
            request_id,
        )


class NotFoundError(WorkOSError):
    """Raised when a resource is not found."""

    def __init__(
        self,
        path: str,
        request_id: str = "",
        code: str | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"The requested path '{path}' could not be found.",
            code or "NOT_FOUND",
            None,
            404,
            request_id,
        )
        self.path = path


class ConflictError(WorkOSError):
    """Raised when a resource conflict occurs."""

    def __init__(
        self,
        request_id: str = "",
        message: str | None = None,
        error: str | None = None,
    ) -> None:
        if message:
            text = message
        elif error:
            text = f"Error: {error}"
        else:
            text = "A conflict has occurred on the server."
        super().__init__(text, "CONFLICT", None, 409, request_id)
        self.error = error


class UnprocessableEntityError(WorkOSError):
    """Raised when the API rejects the request payload."""

    def __init__(
        self,
        request_id: str = "",
        code: str | None = None,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors or []
        if message:
            text = message
        elif self.errors:
            suffix = "s" if len(self.errors) > 1 else ""
            text = f"The following requirement{suffix} must be met:\n"
            text += "".join(f"\t{error.get('code')}\n" for error in self.errors)
        else:
            text = "Unprocessable entity"
        super().__init__(
            text, code or "UNPROCESSABLE_ENTITY", self.errors, 422, request_id
        )


class RateLimitExceededError(WorkOSError):
    """Raised when rate limit is exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        request_id: str = "",
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, "RATE_LIMIT_EXCEEDED", None, 429, request_id)
        self.retry_after = retry_after


class BadRequestError(WorkOSError):
    """Raised when the API reports request errors with a code."""

    def __init__(
        self,
        code: str,
        errors: list[dict[str, Any]] | None = None,
        message: str | None = None,
        request_id: str = "",
    ) -> None:
        super().__init__(
            message or "Bad request", code, errors, 400, request_id
        )
        self.errors = errors or []


class OAuthError(WorkOSError):
    """Raised when an OAuth-style error body is returned."""

    def __init__(
        self,
        status: int,
        request_id: str = "",
        error: str = "",
        error_description: str = "",
        raw_data: Any | None = None,
    ) -> None:
        if error and error_description:
            text = f"Error: {error}\nError Description: {error_description}"
        elif error:
            text = f"Error: {error}"
        else:
            text = "An error has occurred on the server."
        super().__init__(text, error or "OAUTH_ERROR", raw_data, status, request_id)
        self.error = error
        self.error_description = error_description
        self.raw_data = raw_data


class GenericServerError(WorkOSError):
    """Raised for any other unsuccessful response, including 5xx."""

    def __init__(
        self,
        status: int,
        message: str | None = None,
        raw_data: Any | None = None,
        request_id: str = "",
    ) -> None:
        super().__init__(
            message or "The request could not be completed.",
            "SERVER_ERROR",
            raw_data,
            status,
            request_id,
        )
        self.raw_data = raw_data


class NoApiKeyProvidedError(WorkOSError):
    """Raised when no API key is configured."""

    def __init__(self) -> None:
        super().__init__(
            "Missing API key. Pass it to the constructor "
            "(WorkOSClient('sk_test_Sz3IQjepeSWaI4cMS4ms4sMuU')) "
            "or define it in the WORKOS_API_KEY environment variable.",
            "NO_API_KEY_PROVIDED",
        )


class SignatureVerificationError(WorkOSError):
    """Raised when a webhook signature cannot be verified."""

    def __init__(self, message: str = "Signature verification failed") -> None:
        super().__init__(message, "SIGNATURE_VERIFICATION_ERROR")


class NetworkError(WorkOSError):
    """Raised when a network error occurs."""

    def __init__(
        self, message: str = "Network error", details: Any | None = None
    ) -> None:
        super().__init__(message, "NETWORK_ERROR", details)


class TimeoutError(WorkOSError):  # noqa: A001
    """Raised when a request times out."""

    def __init__(
        self, message: str = "Request timeout", details: Any | None = None
    ) -> None:
        super().__init__(message, "TIMEOUT_ERROR", details)


def _parse_retry_after(headers: dict[str, str]) -> float | None:
    value = headers.get("retry-after")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def create_error_from_response(
    status_code: int,
    path: str,
    error_response: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> WorkOSError:
    """Create an appropriate error instance based on HTTP status code and error response.

    Header lookups expect lower-cased names.
    """
    data = error_response or {}
    headers = headers or {}
    request_id = headers.get("x-request-id", "")

    code = data.get("code")
    message = data.get("message")
    error = data.get("error")
    error_description = data.get("error_description")
    errors = data.get("errors")

    if status_code == 401:
        return UnauthorizedError(request_id)
    elif status_code == 404:
        return NotFoundError(path, request_id, code, message)
    elif status_code == 409:
        return ConflictError(request_id, message, error)
    elif status_code == 422:
        return UnprocessableEntityError(
            request_id,
            code,
            message,
            [
                {"field": item.get("attribute"), "code": item.get("code")}
                for item in errors or []
            ],
        )
    elif status_code == 429:
        return RateLimitExceededError(
            message or "Rate limit exceeded",
            request_id,
            _parse_retry_after(headers),
        )
    elif error is not None or error_description is not None:
        return OAuthError(
            status_code, request_id, error or "", error_description or "", data
        )
    elif code and errors:
        return BadRequestError(code, errors, message, request_id)
    else:
        return GenericServerError(
            status_code, message or "Unknown server error", data, request_id
        )
