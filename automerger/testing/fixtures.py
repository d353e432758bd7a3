"""
Pytest fixtures for automerger testing.

Provides common fixtures and sample data builders for tests of code that
uses the merge engine.
"""

from typing import Any, Generator

import pytest

from automerger.config import Labels, RepoConfig
from automerger.testing.mock import MockGitHubClient
from automerger.types.events import Repository
from automerger.types.pulls import Issue, MergeResult, PullRequest
from automerger.types.statuses import CheckRun, CommitStatus

APPROVED_LABEL = "approved"


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.issues.configure_get(response=my_issue)
            handle_event(event, mock_client, config)
            assert mock_client.was_called("pulls.merge")
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def repo_config() -> RepoConfig:
    """Provide a configuration with the approved label enabled."""
    return RepoConfig(labels=Labels(approved=APPROVED_LABEL))


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return Repository(owner="octo", name="hello")


@pytest.fixture
def sample_pull_request() -> PullRequest:
    """Provide a sample PullRequest object."""
    return create_mock_pull_request()


@pytest.fixture
def sample_approved_issue() -> Issue:
    """Provide the issue view of the sample pull request, labeled approved."""
    return create_mock_issue(labels=[APPROVED_LABEL])


@pytest.fixture
def sample_merge_result() -> MergeResult:
    """Provide a sample MergeResult object."""
    return MergeResult(
        sha="6dcb09b5b57875f334f61aebed695e2e4193db5e",
        merged=True,
        message="Pull Request successfully merged",
    )


@pytest.fixture
def mock_client_with_approved_pr(
    mock_client: MockGitHubClient,
    sample_pull_request: PullRequest,
    sample_approved_issue: Issue,
) -> MockGitHubClient:
    """
    Provide a MockGitHubClient whose pull request is approved and unprotected.

    Example:
        ```python
        def test_merges(mock_client_with_approved_pr, repo_config):
            handle_event(event, mock_client_with_approved_pr, repo_config)
            assert mock_client_with_approved_pr.was_called("pulls.merge")
        ```
    """
    mock_client.issues.configure_get(response=sample_approved_issue)
    mock_client.pulls.configure_get(response=sample_pull_request)
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_pull_request(
    number: int = 7,
    head_sha: str = "a1b2c3d4",
    base_ref: str = "main",
    **kwargs: Any,
) -> PullRequest:
    """
    Create a PullRequest with customizable fields.

    Args:
        number: Pull request number
        head_sha: Head commit SHA
        base_ref: Target branch
        **kwargs: Additional fields to override

    Returns:
        PullRequest object
    """
    defaults = {
        "html_url": f"https://github.com/octo/hello/pull/{number}",
        "state": "open",
    }
    defaults.update(kwargs)
    return PullRequest(
        number=number,
        head_sha=head_sha,
        base_ref=base_ref,
        **defaults,
    )


def create_mock_issue(
    number: int = 7,
    labels: list[str] | None = None,
    **kwargs: Any,
) -> Issue:
    """
    Create an Issue with customizable fields.

    Args:
        number: Issue number
        labels: Label names (default: none)
        **kwargs: Additional fields to override

    Returns:
        Issue object
    """
    defaults = {
        "html_url": f"https://github.com/octo/hello/pull/{number}",
        "state": "open",
        "is_pull_request": True,
    }
    defaults.update(kwargs)
    return Issue(
        number=number,
        labels=list(labels or []),
        **defaults,
    )


def create_statuses(states: dict[str, str]) -> list[CommitStatus]:
    """Create legacy statuses from a ``{context: state}`` mapping."""
    return [CommitStatus(context=context, state=state) for context, state in states.items()]


def create_check_runs(conclusions: dict[str, str | None]) -> list[CheckRun]:
    """Create check runs from a ``{name: conclusion}`` mapping (None means still running)."""
    return [
        CheckRun(
            name=name,
            status="completed" if conclusion is not None else "in_progress",
            conclusion=conclusion,
        )
        for name, conclusion in conclusions.items()
    ]


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "repo_config",
    "sample_repository",
    "sample_pull_request",
    "sample_approved_issue",
    "sample_merge_result",
    "mock_client_with_approved_pr",
    # Helper functions
    "create_mock_pull_request",
    "create_mock_issue",
    "create_statuses",
    "create_check_runs",
    "APPROVED_LABEL",
]
