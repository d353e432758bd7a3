"""Merge execution and batch error accumulation."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from automerger.exceptions import AutoMergerError, BatchError, MergeFailedError
from automerger.logging import get_logger
from automerger.types.pulls import MergeResult

if TYPE_CHECKING:
    from automerger.client import GitHubClient
    from automerger.engine.evaluator import MergeDecision

logger = get_logger("engine")


def execute_merge(
    client: "GitHubClient", owner: str, repo: str, decision: "MergeDecision"
) -> MergeResult:
    """
    Merge the pull request at the commit the decision was made for.

    Raises:
        MergeFailedError: If the forge refuses or fails the merge
    """
    try:
        result = client.pulls.merge(owner, repo, decision.number, sha=decision.sha)
    except AutoMergerError as err:
        raise MergeFailedError(
            f"failed to merge pull request {decision.html_url}", err, decision.html_url
        ) from err

    logger.debug("Successfully merged %s/%s: %d", owner, repo, decision.number)
    return result


class BatchErrorCollector:
    """
    Collect errors from independent units of work and raise them together.

    Example:
        ```python
        errors = BatchErrorCollector()
        for pr in pull_requests:
            with errors.capture():
                process(pr)
        errors.raise_if_any()
        ```
    """

    def __init__(self) -> None:
        self.errors: list[Exception] = []

    def add(self, error: Exception) -> None:
        self.errors.append(error)

    @contextmanager
    def capture(self) -> Iterator[None]:
        """Record an exception raised inside the block instead of propagating it."""
        try:
            yield
        except Exception as err:
            self.add(err)

    def raise_if_any(self) -> None:
        """Raise a BatchError holding every collected error, if there are any."""
        if self.errors:
            raise BatchError(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
