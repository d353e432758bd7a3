"""Webhook event data models.

Each event variant carries just enough of the webhook payload to locate the
pull request(s) and commit it concerns. ``parse_event`` builds a variant
from a decoded GitHub webhook payload.
"""

from dataclasses import dataclass
from typing import Any

from automerger.types.pulls import PullRequest


@dataclass
class Repository:
    """Repository identity."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass
class PullRequestLabeled:
    """A ``pull_request`` event (any action; only "labeled" is acted upon)."""

    repo: Repository
    action: str
    pull_request: PullRequest


@dataclass
class ReviewSubmitted:
    """A ``pull_request_review`` event."""

    repo: Repository
    review_state: str
    pull_request: PullRequest


@dataclass
class CommitStatusUpdated:
    """A ``status`` event for a commit."""

    repo: Repository
    sha: str
    state: str
    context: str = ""


Event = PullRequestLabeled | ReviewSubmitted | CommitStatusUpdated


def parse_event(event_type: str, payload: dict[str, Any]) -> Event | None:
    """
    Build an event from a decoded webhook payload.

    Args:
        event_type: Value of the ``X-GitHub-Event`` header
        payload: Decoded JSON body of the webhook delivery

    Returns:
        The matching event variant, or None for event types that are not handled

    Raises:
        KeyError: If the payload lacks a field the variant needs
    """
    if event_type == "pull_request":
        return PullRequestLabeled(
            repo=_parse_repository(payload["repository"]),
            action=payload.get("action", ""),
            pull_request=parse_pull_request(payload["pull_request"]),
        )
    if event_type == "pull_request_review":
        return ReviewSubmitted(
            repo=_parse_repository(payload["repository"]),
            review_state=(payload.get("review") or {}).get("state", ""),
            pull_request=parse_pull_request(payload["pull_request"]),
        )
    if event_type == "status":
        return CommitStatusUpdated(
            repo=_parse_repository(payload["repository"]),
            sha=payload["sha"],
            state=payload.get("state", ""),
            context=payload.get("context", ""),
        )
    return None


def parse_pull_request(data: dict[str, Any]) -> PullRequest:
    """Parse a pull request object as returned by the API and in webhooks."""
    return PullRequest(
        number=data["number"],
        html_url=data.get("html_url", ""),
        head_sha=data["head"]["sha"],
        base_ref=data["base"]["ref"],
        state=data.get("state", "open"),
    )


def _parse_repository(data: dict[str, Any]) -> Repository:
    owner = (data.get("owner") or {}).get("login")
    name = data.get("name")
    if not owner or not name:
        # Some payloads only carry full_name
        owner, _, name = data["full_name"].partition("/")
    return Repository(owner=owner, name=name)
