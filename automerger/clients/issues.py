"""Issues resource client."""

from typing import TYPE_CHECKING, Any

from automerger.types.pulls import Issue

if TYPE_CHECKING:
    from automerger.transport import HTTPTransport


class IssuesClient:
    """Client for issue lookups and issue search."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the issues client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, owner: str, repo: str, number: int) -> Issue:
        """
        Get the issue view of a pull request.

        Args:
            owner: Repository owner login
            repo: Repository name
            number: Issue or pull request number

        Returns:
            Issue with labels and html_url

        Raises:
            NotFoundError: If the issue does not exist
        """
        data = self.transport.request(
            method="GET",
            path=f"/repos/{owner}/{repo}/issues/{number}",
        )
        return self._parse_issue(data)

    def search_open_pull_requests(self, full_name: str, sha: str) -> list[Issue]:
        """
        Search open pull requests in a repository that reference a commit.

        Search results mix issues and pull requests; callers should check
        ``Issue.is_pull_request``.

        Args:
            full_name: Repository in ``owner/name`` form
            sha: Commit SHA to search for

        Returns:
            List of matching issues
        """
        data = self.transport.request(
            method="GET",
            path="/search/issues",
            params={"q": f"type:pr state:open repo:{full_name} {sha}"},
        )
        return [self._parse_issue(item) for item in (data or {}).get("items", [])]

    def _parse_issue(self, data: dict[str, Any]) -> Issue:
        """Parse issue data from API response."""
        return Issue(
            number=data["number"],
            html_url=data.get("html_url", ""),
            labels=[label["name"] for label in data.get("labels", [])],
            state=data.get("state", "open"),
            is_pull_request=data.get("pull_request") is not None,
        )
