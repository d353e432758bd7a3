"""Pull requests resource client."""

from typing import TYPE_CHECKING

from automerger.types.events import parse_pull_request
from automerger.types.pulls import MergeResult, PullRequest

if TYPE_CHECKING:
    from automerger.transport import HTTPTransport


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, owner: str, repo: str, number: int) -> PullRequest:
        """
        Get pull request information.

        Args:
            owner: Repository owner login
            repo: Repository name
            number: Pull request number

        Returns:
            PullRequest with head SHA and base ref

        Raises:
            NotFoundError: If pull request not found
        """
        data = self.transport.request(
            method="GET",
            path=f"/repos/{owner}/{repo}/pulls/{number}",
        )
        return parse_pull_request(data)

    def merge(
        self,
        owner: str,
        repo: str,
        number: int,
        sha: str | None = None,
    ) -> MergeResult:
        """
        Merge a pull request.

        Args:
            owner: Repository owner login
            repo: Repository name
            number: Pull request number
            sha: Head SHA the merge must match; the forge refuses if the head moved

        Returns:
            MergeResult with the merge commit SHA

        Raises:
            ConflictError: If not mergeable or the head SHA changed
            NotFoundError: If pull request not found
        """
        body: dict[str, str] = {}
        if sha:
            body["sha"] = sha

        data = self.transport.request(
            method="PUT",
            path=f"/repos/{owner}/{repo}/pulls/{number}/merge",
            body=body,
        )
        return MergeResult(
            sha=data.get("sha", ""),
            merged=data.get("merged", False),
            message=data.get("message", ""),
        )
