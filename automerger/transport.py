"""
HTTP Transport for automerger.

Handles HTTP communication with the GitHub REST API, including token
authentication, automatic retry logic and error handling.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from automerger.exceptions import (
    AuthenticationError,
    AuthorizationError,
    AutoMergerError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from automerger.logging import log_http_request, log_http_response

GITHUB_API_VERSION = "2022-11-28"

# Methods that are safe to resend after a connection error
_IDEMPOTENT_METHODS = frozenset({"GET", "HEAD"})


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer with token authentication and retry logic.

    Handles:
    - Bearer token authentication and GitHub API headers
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: API token used as bearer credential
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a request with automatic retry.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/hello/pulls/1")
            params: Query parameters
            body: JSON request body (for PUT/POST)

        Returns:
            Parsed JSON response, or None for empty responses

        Raises:
            AutoMergerError: On API errors
        """
        def make_request() -> httpx.Response:
            log_http_request(method, path, params=params, body=body)
            started = time.monotonic()
            response = self._client.request(method, path, params=params, json=body)
            log_http_response(
                response.status_code,
                path,
                elapsed_ms=(time.monotonic() - started) * 1000,
                request_id=response.headers.get("X-GitHub-Request-Id"),
            )
            return response

        return self._execute_with_retry(
            make_request, retry_connection_errors=method.upper() in _IDEMPOTENT_METHODS
        )

    def _execute_with_retry(
        self,
        request_fn: Callable[[], httpx.Response],
        retry_connection_errors: bool = True,
    ) -> Any:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request
            retry_connection_errors: Resend after a network error. Must be False
                for requests that may have taken effect (e.g. a merge)

        Returns:
            Parsed JSON response

        Raises:
            AutoMergerError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    if response.status_code == 204 or not response.content:
                        return None
                    return response.json()

                error = self._parse_error_response(response)

                if not self._should_retry(response.status_code, attempt, error):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                if (
                    retry_after is None
                    and response.status_code == 403
                    and isinstance(error, RateLimitedError)
                ):
                    retry_after = str(error.retry_after)
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                if not retry_connection_errors or attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        if last_error:
            if isinstance(last_error, AutoMergerError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(
        self, status_code: int, attempt: int, error: AutoMergerError | None = None
    ) -> bool:
        """
        Determine if a request should be retried.

        A 403 rate limit is retried only when it resets within ``max_backoff``.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)
            error: Error parsed from the response (optional)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        if status_code == 403 and isinstance(error, RateLimitedError):
            return error.retry_after <= self.retry_config.max_backoff

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> AutoMergerError:
        """
        Parse a GitHub error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate AutoMergerError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            # GitHub reports exhausted and secondary rate limits as 403
            headers = response.headers
            if "Retry-After" in headers:
                return RateLimitedError(
                    "RATE_LIMITED", message, _parse_seconds(headers["Retry-After"]), request_id
                )
            if headers.get("X-RateLimit-Remaining") == "0":
                return RateLimitedError(
                    "RATE_LIMITED",
                    message,
                    _seconds_until_reset(headers.get("X-RateLimit-Reset")),
                    request_id,
                )
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code == 405:
            return ConflictError("NOT_MERGEABLE", message, request_id)
        elif status_code == 409:
            return ConflictError("CONFLICT", message, request_id)
        elif status_code == 429:
            retry_after = _parse_seconds(response.headers.get("Retry-After", "60"))
            return RateLimitedError("RATE_LIMITED", message, retry_after, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("VALIDATION_FAILED", message, request_id)


def _parse_seconds(value: str, default: int = 60) -> int:
    try:
        return int(value)
    except ValueError:
        return default


def _seconds_until_reset(reset: str | None) -> int:
    """Seconds until an ``X-RateLimit-Reset`` epoch timestamp, at least 0."""
    if reset is None:
        return 60
    try:
        return max(int(reset) - int(time.time()), 0)
    except ValueError:
        return 60
