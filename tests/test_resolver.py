"""
Tests for resolving the required contexts of a target branch.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from automerger.engine.resolver import resolve_required_contexts
from automerger.exceptions import (
    AuthorizationError,
    ForgeLookupError,
    NotFoundError,
    ServerError,
)
from automerger.testing import MockGitHubClient
from automerger.types.protection import Found, NotConfigured, required_names


def test_not_found_means_not_configured() -> None:
    mock = MockGitHubClient()
    mock.branches.configure_required_contexts(
        error=NotFoundError("NOT_FOUND", "Branch not protected")
    )

    required = resolve_required_contexts(mock, "octo", "hello", "main")

    assert required == NotConfigured()
    assert required_names(required) == []


def test_contexts_are_returned_in_order() -> None:
    mock = MockGitHubClient()
    mock.branches.configure_required_contexts(response=["ci/build", "ci/test"])

    required = resolve_required_contexts(mock, "octo", "hello", "main")

    assert required == Found(contexts=["ci/build", "ci/test"])
    assert mock.get_calls("branches.list_required_status_check_contexts")[0].args == (
        "octo", "hello", "main",
    )


def test_empty_protection_is_found_but_empty() -> None:
    mock = MockGitHubClient()
    mock.branches.configure_required_contexts(response=[])

    required = resolve_required_contexts(mock, "octo", "hello", "main")

    assert required == Found(contexts=[])
    assert required_names(required) == []


@given(
    error=st.sampled_from([
        ServerError("SERVER_ERROR", "boom"),
        AuthorizationError("FORBIDDEN", "Resource not accessible by integration"),
    ]),
)
@settings(max_examples=10)
def test_other_failures_are_propagated(error: Exception) -> None:
    """
    Only a not-found answer is tolerated; every other failure is raised.
    """
    mock = MockGitHubClient()
    mock.branches.configure_required_contexts(error=error)

    with pytest.raises(ForgeLookupError) as exc_info:
        resolve_required_contexts(mock, "octo", "hello", "release/1.x", url="https://x/7")

    assert "failed to get target branch (release/1.x) protection" in str(exc_info.value)
    assert exc_info.value.__cause__ is error
