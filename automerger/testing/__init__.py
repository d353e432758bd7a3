"""automerger testing utilities.

Provides a mock client and fixtures for testing code that uses the merge engine.
"""

from automerger.testing.fixtures import (
    create_check_runs,
    create_mock_issue,
    create_mock_pull_request,
    create_statuses,
)
from automerger.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_issue",
    "create_mock_pull_request",
    "create_statuses",
    "create_check_runs",
]
