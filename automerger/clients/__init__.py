"""automerger resource clients."""

from automerger.clients.branches import BranchesClient
from automerger.clients.issues import IssuesClient
from automerger.clients.pulls import PullsClient
from automerger.clients.statuses import ChecksClient, StatusesClient

__all__ = [
    "IssuesClient",
    "PullsClient",
    "StatusesClient",
    "ChecksClient",
    "BranchesClient",
]
