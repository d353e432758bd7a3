"""
Tests for building events from webhook payloads.
"""

import pytest

from automerger.types.events import (
    CommitStatusUpdated,
    PullRequestLabeled,
    Repository,
    ReviewSubmitted,
    parse_event,
)

REPOSITORY_PAYLOAD = {
    "name": "hello",
    "full_name": "octo/hello",
    "owner": {"login": "octo"},
}

PULL_REQUEST_PAYLOAD = {
    "number": 7,
    "html_url": "https://github.com/octo/hello/pull/7",
    "state": "open",
    "head": {"sha": "a1b2c3d4", "ref": "feature"},
    "base": {"ref": "main"},
}


def test_pull_request_event() -> None:
    event = parse_event("pull_request", {
        "action": "labeled",
        "label": {"name": "approved"},
        "pull_request": PULL_REQUEST_PAYLOAD,
        "repository": REPOSITORY_PAYLOAD,
    })

    assert isinstance(event, PullRequestLabeled)
    assert event.action == "labeled"
    assert event.repo == Repository(owner="octo", name="hello")
    assert event.pull_request.head_sha == "a1b2c3d4"
    assert event.pull_request.base_ref == "main"


def test_review_event() -> None:
    event = parse_event("pull_request_review", {
        "action": "submitted",
        "review": {"state": "approved"},
        "pull_request": PULL_REQUEST_PAYLOAD,
        "repository": REPOSITORY_PAYLOAD,
    })

    assert isinstance(event, ReviewSubmitted)
    assert event.review_state == "approved"
    assert event.pull_request.number == 7


def test_status_event() -> None:
    event = parse_event("status", {
        "sha": "a1b2c3d4",
        "state": "success",
        "context": "ci/build",
        "repository": REPOSITORY_PAYLOAD,
    })

    assert event == CommitStatusUpdated(
        repo=Repository(owner="octo", name="hello"),
        sha="a1b2c3d4",
        state="success",
        context="ci/build",
    )
    assert event.repo.full_name == "octo/hello"


def test_repository_from_full_name_only() -> None:
    event = parse_event("status", {
        "sha": "a1b2c3d4",
        "state": "success",
        "repository": {"full_name": "octo/hello"},
    })

    assert event is not None
    assert event.repo == Repository(owner="octo", name="hello")


@pytest.mark.parametrize("event_type", ["push", "issues", "check_run", "ping"])
def test_unhandled_event_types(event_type: str) -> None:
    assert parse_event(event_type, {"repository": REPOSITORY_PAYLOAD}) is None


def test_missing_fields_raise() -> None:
    with pytest.raises(KeyError):
        parse_event("status", {"state": "success", "repository": REPOSITORY_PAYLOAD})
