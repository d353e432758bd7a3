"""Commit statuses and check runs resource clients."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from automerger.types.statuses import CheckRun, CommitStatus

if TYPE_CHECKING:
    from automerger.transport import HTTPTransport

_PAGE_SIZE = 100


def _paginate(transport: "HTTPTransport", path: str, items_key: str) -> Iterator[dict[str, Any]]:
    """
    Yield every item of a paged list endpoint that reports ``total_count``.

    Stops when ``total_count`` items were seen or a page comes back short.
    """
    page = 1
    seen = 0
    while True:
        data = transport.request(
            method="GET",
            path=path,
            params={"per_page": _PAGE_SIZE, "page": page},
        ) or {}
        items = data.get(items_key, [])
        yield from items

        seen += len(items)
        total = data.get("total_count", seen)
        if len(items) < _PAGE_SIZE or seen >= total:
            return
        page += 1


class StatusesClient:
    """Client for legacy commit statuses."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get_combined_status(self, owner: str, repo: str, sha: str) -> list[CommitStatus]:
        """
        Get the latest status for each context of a commit.

        Follows pagination until every context is fetched.

        Args:
            owner: Repository owner login
            repo: Repository name
            sha: Commit SHA

        Returns:
            List of CommitStatus entries, one per context
        """
        return [
            CommitStatus(context=status["context"], state=status.get("state", ""))
            for status in _paginate(
                self.transport, f"/repos/{owner}/{repo}/commits/{sha}/status", "statuses"
            )
        ]


class ChecksClient:
    """Client for check runs."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def list_for_ref(self, owner: str, repo: str, ref: str) -> list[CheckRun]:
        """
        List check runs for a commit SHA, branch or tag.

        Follows pagination until every check run is fetched.

        Args:
            owner: Repository owner login
            repo: Repository name
            ref: Commit SHA, branch or tag

        Returns:
            List of CheckRun entries
        """
        return [
            CheckRun(
                name=run["name"],
                status=run.get("status", ""),
                conclusion=run.get("conclusion"),
            )
            for run in _paginate(
                self.transport, f"/repos/{owner}/{repo}/commits/{ref}/check-runs", "check_runs"
            )
        ]
