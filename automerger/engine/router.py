"""
Event routing for the auto-merge engine.

A pull request is merged once it carries the configured approved label and
its head commit passes the branch's status checks. The engine re-evaluates
on the events that can change either condition: a label being added, an
approving review, and a successful commit status.
"""

import logging
from typing import TYPE_CHECKING

from automerger.config import RepoConfig
from automerger.engine.aggregator import STATUS_SUCCESS_STATE, aggregate_statuses
from automerger.engine.evaluator import MergeDecision, evaluate
from automerger.engine.executor import BatchErrorCollector, execute_merge
from automerger.engine.resolver import resolve_required_contexts
from automerger.exceptions import AutoMergerError, ForgeLookupError
from automerger.logging import get_logger
from automerger.types.events import (
    CommitStatusUpdated,
    Event,
    PullRequestLabeled,
    Repository,
    ReviewSubmitted,
)
from automerger.types.pulls import Issue, PullRequest

if TYPE_CHECKING:
    from automerger.client import GitHubClient

LABELED_ACTION = "labeled"
APPROVED_REVIEW_STATE = "approved"

EVENT_TYPES_HANDLED = ("pull_request", "status", "pull_request_review")


class AutoMerger:
    """Merge approved pull requests whose checks pass."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("engine")

    @property
    def event_types_handled(self) -> tuple[str, ...]:
        return EVENT_TYPES_HANDLED

    def handle_event(
        self, event: Event, client: "GitHubClient", config: RepoConfig
    ) -> None:
        """
        Evaluate the pull request(s) an event concerns and merge eligible ones.

        Args:
            event: Parsed webhook event
            client: Forge client
            config: Configuration of the event's repository

        Raises:
            ForgeLookupError: If a lookup for a single pull request fails
            MergeFailedError: If the merge of a single pull request fails
            BatchError: If any pull request touched by a status event failed
        """
        if not config.enabled:
            return

        match event:
            case PullRequestLabeled():
                self._handle_pull_request_event(event, client, config)
            case ReviewSubmitted():
                self._handle_review_event(event, client, config)
            case CommitStatusUpdated():
                self._handle_status_event(event, client, config)
            case _:
                return

    def _handle_pull_request_event(
        self, event: PullRequestLabeled, client: "GitHubClient", config: RepoConfig
    ) -> None:
        if event.action.lower() != LABELED_ACTION:
            self.logger.debug(
                "skipping PullRequest event as it is not a label event action=%s pr=%d",
                event.action,
                event.pull_request.number,
            )
            return

        self._merge_from_event(event.repo, event.pull_request, client, config)

    def _handle_review_event(
        self, event: ReviewSubmitted, client: "GitHubClient", config: RepoConfig
    ) -> None:
        if event.review_state.lower() != APPROVED_REVIEW_STATE:
            self.logger.debug(
                "skipping PullRequestReview event as it is not in approved state state=%s pr=%d",
                event.review_state,
                event.pull_request.number,
            )
            return

        self._merge_from_event(event.repo, event.pull_request, client, config)

    def _handle_status_event(
        self, event: CommitStatusUpdated, client: "GitHubClient", config: RepoConfig
    ) -> None:
        if event.state.lower() != STATUS_SUCCESS_STATE:
            self.logger.debug(
                "skipping status event as it does not report success state=%s", event.state
            )
            return

        repo = event.repo
        try:
            issues = client.issues.search_open_pull_requests(repo.full_name, event.sha)
        except AutoMergerError as err:
            raise ForgeLookupError("failed to search for open issues", err) from err

        errors = BatchErrorCollector()
        for issue in issues:
            if not issue.is_pull_request:
                continue
            with errors.capture():
                try:
                    pull_request = client.pulls.get(repo.owner, repo.name, issue.number)
                except AutoMergerError as err:
                    raise ForgeLookupError(
                        f"failed to get pull request {issue.html_url}", err, issue.html_url
                    ) from err
                self.merge_pull_request(
                    repo, issue, pull_request, client, config, commit_sha=event.sha
                )
        errors.raise_if_any()

    def _merge_from_event(
        self,
        repo: Repository,
        pull_request: PullRequest,
        client: "GitHubClient",
        config: RepoConfig,
    ) -> None:
        try:
            issue = client.issues.get(repo.owner, repo.name, pull_request.number)
        except AutoMergerError as err:
            raise ForgeLookupError(
                f"failed to get pull request {pull_request.html_url}",
                err,
                pull_request.html_url,
            ) from err

        self.merge_pull_request(repo, issue, pull_request, client, config)

    def merge_pull_request(
        self,
        repo: Repository,
        issue: Issue,
        pull_request: PullRequest,
        client: "GitHubClient",
        config: RepoConfig,
        commit_sha: str | None = None,
    ) -> MergeDecision | None:
        """
        Run the merge pipeline for one pull request.

        Args:
            repo: Repository of the pull request
            issue: Issue view of the pull request (labels)
            pull_request: The pull request (head SHA, base ref)
            client: Forge client
            config: Repository configuration
            commit_sha: If set, only evaluate when it is the pull request's head

        Returns:
            The decision, or None when the pull request was gated out before
            evaluation (not approved or stale commit)
        """
        if not issue.has_label(config.labels.approved):
            self.logger.debug(
                "skipping pull request without approved label pr=%d label=%s",
                issue.number,
                config.labels.approved,
            )
            return None

        if commit_sha and pull_request.head_sha != commit_sha:
            self.logger.debug(
                "Commit SHA is unequal PR Head SHA commitSHA=%s prHeadSha=%s",
                commit_sha,
                pull_request.head_sha,
            )
            return None

        sha = pull_request.head_sha
        url = issue.html_url or pull_request.html_url

        status_map = aggregate_statuses(client, repo.owner, repo.name, sha, url)
        required = resolve_required_contexts(
            client, repo.owner, repo.name, pull_request.base_ref, url
        )

        decision = evaluate(status_map, required, sha, issue.number, url)
        if decision.merge:
            execute_merge(client, repo.owner, repo.name, decision)
        return decision


def handle_event(event: Event, client: "GitHubClient", config: RepoConfig) -> None:
    """Evaluate an event with a default AutoMerger. See ``AutoMerger.handle_event``."""
    AutoMerger().handle_event(event, client, config)
