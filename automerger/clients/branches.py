"""Branches resource client."""

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from automerger.transport import HTTPTransport


class BranchesClient:
    """Client for branch protection lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def list_required_status_check_contexts(
        self, owner: str, repo: str, branch: str
    ) -> list[str]:
        """
        List the status check contexts a protected branch requires.

        Args:
            owner: Repository owner login
            repo: Repository name
            branch: Branch name

        Returns:
            List of required context names

        Raises:
            NotFoundError: If the branch is not protected (or does not exist)
        """
        data = self.transport.request(
            method="GET",
            path=(
                f"/repos/{owner}/{repo}/branches/{quote(branch, safe='')}"
                "/protection/required_status_checks/contexts"
            ),
        )
        return list(data or [])
