"""automerger - merge approved pull requests once their checks pass."""

from automerger.client import GitHubClient
from automerger.config import Labels, RepoConfig
from automerger.engine import (
    EVENT_TYPES_HANDLED,
    AutoMerger,
    BatchErrorCollector,
    MergeDecision,
    handle_event,
    is_eligible,
)
from automerger.exceptions import (
    AuthenticationError,
    AuthorizationError,
    AutoMergerError,
    BatchError,
    ConfigurationError,
    ConflictError,
    ForgeLookupError,
    MergeFailedError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from automerger.logging import configure_logging, get_logger
from automerger.transport import HTTPTransport, RetryConfig
from automerger.types.events import (
    CommitStatusUpdated,
    Event,
    PullRequestLabeled,
    Repository,
    ReviewSubmitted,
    parse_event,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "handle_event",
    "AutoMerger",
    "EVENT_TYPES_HANDLED",
    "MergeDecision",
    "BatchErrorCollector",
    "is_eligible",
    # Events
    "Event",
    "PullRequestLabeled",
    "ReviewSubmitted",
    "CommitStatusUpdated",
    "Repository",
    "parse_event",
    # Client
    "GitHubClient",
    "HTTPTransport",
    "RetryConfig",
    # Configuration
    "RepoConfig",
    "Labels",
    # Exceptions
    "AutoMergerError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    "ForgeLookupError",
    "MergeFailedError",
    "BatchError",
    # Logging
    "configure_logging",
    "get_logger",
]
