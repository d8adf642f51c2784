"""
HTTP client for the Gerrit REST API.

This module provides a small synchronous client built on httpx with:
- Optional HTTP basic authentication (and the ``/a`` path prefix it requires)
- Stripping of the ``)]}'`` anti-XSSI prefix from JSON responses
- Conversion of error responses into the ``ApiError`` hierarchy
- Timeout configuration
"""

from typing import Any, Dict, List, Optional, Tuple, Union
import json
import logging

import httpx
from pydantic import BaseModel

from gerrit_groups.exceptions import (
    ConnectionError as ClientConnectionError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)

XSSI_PREFIX = ")]}'"

Params = Union[Dict[str, Any], List[Tuple[str, Any]]]


def decode_json(text: str) -> Any:
    """
    Decode a Gerrit JSON body, dropping the anti-XSSI prefix line.

    Raises:
        MalformedResponseError: If the body is not valid JSON
    """
    if text.startswith(XSSI_PREFIX):
        text = text[len(XSSI_PREFIX):]
    try:
        return json.loads(text)
    except ValueError as e:
        raise MalformedResponseError(f"Invalid JSON in response: {e}")


class HTTPClient:
    """
    HTTP client for Gerrit REST requests.

    This client handles:
    - Base URL management
    - Authentication
    - Response decoding and error handling
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Server URL (e.g., "https://review.example.org")
            username: Account username for basic authentication
            password: HTTP password of that account
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._auth = httpx.BasicAuth(username, password or "") if username else None
        self._default_headers = headers or {}
        self._client: Optional[httpx.Client] = None

    @property
    def is_authenticated(self) -> bool:
        return self._auth is not None

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                auth=self._auth,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HTTPClient":
        self._get_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _build_path(self, path: str) -> str:
        """Authenticated requests go through the ``/a`` prefix."""
        if not path.startswith("/"):
            path = "/" + path
        if self.is_authenticated:
            return "/a" + path
        return path

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        status_code = response.status_code
        detail = response.text.strip() or f"HTTP {status_code}"

        if status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                detail,
                status_code=status_code,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        raise exception_from_response(status_code, detail)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Params] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE)
            path: Request path relative to the server URL
            params: Query parameters; list values are sent as repeated keys
            json_data: JSON body data (can be dict or Pydantic model)
            headers: Additional headers

        Returns:
            httpx.Response object

        Raises:
            ApiError: On HTTP errors
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = self._get_client()
        request_headers = self._build_headers(headers)

        if json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", exclude_none=True)

        if isinstance(params, dict):
            params = {k: v for k, v in params.items() if v is not None}

        url = self._build_path(path)
        logger.debug(f"{method} {url} params={params}")

        try:
            response = client.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}")
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}")
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}")

        if not response.is_success:
            self._handle_error_response(response)
        return response

    def get_json(self, path: str, *, params: Optional[Params] = None) -> Any:
        """Make a GET request and return the decoded JSON body."""
        response = self.request("GET", path, params=params)
        return decode_json(response.text)

    def put_json(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
    ) -> Any:
        """Make a PUT request and return the decoded JSON body (None if empty)."""
        response = self.request("PUT", path, json_data=json_data)
        return decode_json(response.text) if response.text.strip() else None

    def post_json(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
    ) -> Any:
        """Make a POST request and return the decoded JSON body (None if empty)."""
        response = self.request("POST", path, json_data=json_data)
        return decode_json(response.text) if response.text.strip() else None

    def delete(self, path: str) -> None:
        """Make a DELETE request."""
        self.request("DELETE", path)
