"""Shared fixtures for the automerger test suite."""

from automerger.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_client_with_approved_pr,
    repo_config,
    sample_approved_issue,
    sample_merge_result,
    sample_pull_request,
    sample_repository,
)
