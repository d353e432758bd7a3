"""Lookup of the status check contexts a target branch requires."""

from typing import TYPE_CHECKING

from automerger.exceptions import AutoMergerError, ForgeLookupError, NotFoundError
from automerger.types.protection import Found, NotConfigured, RequiredContexts

if TYPE_CHECKING:
    from automerger.client import GitHubClient


def resolve_required_contexts(
    client: "GitHubClient",
    owner: str,
    repo: str,
    branch: str,
    url: str = "",
) -> RequiredContexts:
    """
    Resolve the required contexts of ``branch``.

    A not-found answer means the branch is unprotected and yields
    ``NotConfigured``; every other failure is raised.

    Raises:
        ForgeLookupError: If the lookup fails for any reason but not-found
    """
    try:
        contexts = client.branches.list_required_status_check_contexts(owner, repo, branch)
    except NotFoundError:
        return NotConfigured()
    except AutoMergerError as err:
        raise ForgeLookupError(
            f"failed to get target branch ({branch}) protection for pull request {url}",
            err,
            url,
        ) from err
    return Found(contexts=list(contexts))
