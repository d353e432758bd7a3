"""
Pytest plugin for automerger testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest.

To use these fixtures in your tests, add this to your top-level conftest.py:

    pytest_plugins = ["automerger.testing.conftest"]

Or import the fixtures directly:

    from automerger.testing.fixtures import mock_client, repo_config
"""

# Re-export all fixtures for pytest auto-discovery
from automerger.testing.fixtures import (
    mock_client,
    mock_client_with_approved_pr,
    repo_config,
    sample_approved_issue,
    sample_merge_result,
    sample_pull_request,
    sample_repository,
)

__all__ = [
    "mock_client",
    "repo_config",
    "sample_repository",
    "sample_pull_request",
    "sample_approved_issue",
    "sample_merge_result",
    "mock_client_with_approved_pr",
]
