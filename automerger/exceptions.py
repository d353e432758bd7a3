"""automerger exception classes."""


class AutoMergerError(Exception):
    """Base exception for all automerger errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(AutoMergerError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(AutoMergerError):
    """Raised when the API token is rejected."""

    pass


class AuthorizationError(AutoMergerError):
    """Raised when access is denied."""

    pass


class NotFoundError(AutoMergerError):
    """Raised when a resource is not found."""

    pass


class ConflictError(AutoMergerError):
    """Raised on conflicts (not mergeable, head SHA moved, etc.)."""

    pass


class RateLimitedError(AutoMergerError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(AutoMergerError):
    """Raised on validation errors."""

    pass


class ServerError(AutoMergerError):
    """Raised on server errors (5xx)."""

    pass


class ForgeLookupError(AutoMergerError):
    """Raised when a lookup needed for a merge decision fails.

    The underlying error is chained as ``__cause__``.
    """

    def __init__(
        self, message: str, cause: Exception, url: str | None = None
    ) -> None:
        super().__init__("LOOKUP_FAILED", f"{message}: {cause}")
        self.url = url
        self.cause = cause


class MergeFailedError(AutoMergerError):
    """Raised when the forge refuses or fails to merge a pull request."""

    def __init__(self, message: str, cause: Exception, url: str) -> None:
        super().__init__("MERGE_FAILED", f"{message}: {cause}")
        self.url = url
        self.cause = cause


class BatchError(AutoMergerError):
    """Raised once after a batch when one or more pull requests failed."""

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = list(errors)
        super().__init__(
            "BATCH_FAILED",
            "; ".join(_describe(err) for err in self.errors),
        )


def _describe(err: Exception) -> str:
    if isinstance(err, AutoMergerError):
        return err.message
    return str(err)
