"""Base HTTP client for WorkOS API operations.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple
from urllib.parse import urljoin

import httpx

from .exceptions import (
    NetworkError,
    TimeoutError as WorkOSTimeoutError,
    create_error_from_response,
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

HEADER_AUTHORIZATION = "Authorization"
HEADER_IDEMPOTENCY_KEY = "Idempotency-Key"
HEADER_WARRANT_TOKEN = "Warrant-Token"

# HTTP Status Constants
HTTP_NO_CONTENT = 204


class RequestConfig(NamedTuple):
    """Configuration for HTTP requests."""

    json_data: Any | None = None
    form_data: dict[str, str] | None = None
    params: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    idempotency_key: str | None = None
    warrant_token: str | None = None
    access_token: str | None = None


def clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop query parameters the API should never see.

    Returns:
        The parameters without ``None`` and empty-string values, or None.

    """
    if params is None:
        return None
    return {
        key: value
        for key, value in params.items()
        if value is not None and value != ""
    }


class BaseClient:
    """Base HTTP client for making API requests."""

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize base HTTP client.

        Args:
            base_url: The base URL of the API
            headers: Default headers sent with every request
            timeout: Timeout handed to the transport, in seconds
            transport: Optional httpx transport override

        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = dict(headers or {})

        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={
                "Accept": "application/json, text/plain, */*",
                **self.headers,
            },
            transport=transport,
        )

    async def __aenter__(self) -> BaseClient:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.

        """
        await self._client.aclose()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def url_for(self, path: str) -> str:
        """Build an absolute URL for an API path.

        Returns:
            The path resolved against the base URL.

        """
        return urljoin(self.base_url + "/", path.lstrip("/"))

    async def request(
        self,
        method: str,
        path: str,
        *,
        config: RequestConfig | None = None,
    ) -> Any:
        """Make a single HTTP request and return its JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API endpoint path
            config: Request configuration

        Returns:
            Parsed JSON response data, or None for an empty body.

        Raises:
            WorkOSError: For unsuccessful responses, mapped by status code
            NetworkError: For network-related errors
            WorkOSTimeoutError: For timeout errors

        """
        if config is None:
            config = RequestConfig()

        headers = self._build_headers(config)

        try:
            response = await self._execute_request(method, path, headers, config)
        except httpx.TimeoutException as e:
            raise WorkOSTimeoutError("Request timeout") from e
        except httpx.NetworkError as e:
            raise NetworkError("Network error") from e

        logger.debug(
            "%s %s -> %s (request id %s)",
            method,
            path,
            response.status_code,
            response.headers.get("X-Request-ID", ""),
        )

        if not response.is_success:
            error = create_error_from_response(
                response.status_code,
                path,
                self._parse_error_response(response),
                {key.lower(): value for key, value in response.headers.items()},
            )
            logger.debug("%s %s failed: %r", method, path, error)
            raise error

        if response.status_code == HTTP_NO_CONTENT or not response.content:
            return None
        return response.json()

    @staticmethod
    def _build_headers(config: RequestConfig) -> dict[str, str]:
        headers: dict[str, str] = dict(config.headers or {})
        if config.idempotency_key:
            headers[HEADER_IDEMPOTENCY_KEY] = config.idempotency_key
        if config.warrant_token:
            headers[HEADER_WARRANT_TOKEN] = config.warrant_token
        if config.access_token:
            headers[HEADER_AUTHORIZATION] = f"Bearer {config.access_token}"
        return headers

    async def _execute_request(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        config: RequestConfig,
    ) -> httpx.Response:
        """Execute the actual HTTP request.

        Returns:
            The HTTP response.

        """
        url = self.url_for(path)
        params = clean_params(config.params)

        if config.form_data is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            return await self._client.request(
                method,
                url,
                data=config.form_data,
                params=params,
                headers=headers,
            )

        if config.json_data is None and method in ("POST", "PUT", "PATCH"):
            headers["Content-Type"] = "application/json"
            return await self._client.request(
                method, url, content=b"", params=params, headers=headers
            )

        return await self._client.request(
            method,
            url,
            json=config.json_data,
            params=params,
            headers=headers,
        )

    @staticmethod
    def _parse_error_response(response: httpx.Response) -> dict[str, Any]:
        """Parse error response from the API.

        Returns:
            Parsed error data, or an empty dict when the body is not a JSON object.

        """
        try:
            error_data = response.json()
        except ValueError:
            return {}
        return error_data if isinstance(error_data, dict) else {}
