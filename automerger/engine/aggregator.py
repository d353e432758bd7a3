"""Aggregation of commit statuses and check runs into one success map."""

from typing import TYPE_CHECKING

from automerger.exceptions import AutoMergerError, ForgeLookupError
from automerger.logging import get_logger
from automerger.types.statuses import CheckRun, CommitStatus

if TYPE_CHECKING:
    from automerger.client import GitHubClient

STATUS_SUCCESS_STATE = "success"
CHECK_SUCCESS_CONCLUSION = "success"

logger = get_logger("engine")


def merge_status_entries(
    statuses: list[CommitStatus], check_runs: list[CheckRun]
) -> dict[str, bool]:
    """
    Combine legacy statuses and check runs into ``{context: success}``.

    Check runs are applied last, so a check run overrides a legacy status
    with the same name.
    """
    status_map: dict[str, bool] = {}
    for status in statuses:
        status_map[status.context] = status.state == STATUS_SUCCESS_STATE
    for check in check_runs:
        status_map[check.name] = check.conclusion == CHECK_SUCCESS_CONCLUSION
    return status_map


def aggregate_statuses(
    client: "GitHubClient",
    owner: str,
    repo: str,
    sha: str,
    url: str = "",
) -> dict[str, bool]:
    """
    Fetch statuses and check runs for a commit and aggregate them.

    Args:
        client: Forge client
        owner: Repository owner login
        repo: Repository name
        sha: Commit SHA to inspect
        url: Pull request URL used in error messages

    Returns:
        Mapping of context name to success

    Raises:
        ForgeLookupError: If either lookup fails
    """
    try:
        statuses = client.statuses.get_combined_status(owner, repo, sha)
    except AutoMergerError as err:
        raise ForgeLookupError(
            f"failed to get statuses of pull request {url}", err, url
        ) from err

    for status in statuses:
        logger.debug("found PR status context=%s state=%s", status.context, status.state)

    try:
        check_runs = client.checks.list_for_ref(owner, repo, sha)
    except AutoMergerError as err:
        raise ForgeLookupError(
            f"failed to retrieve all checks for pull request {url}", err, url
        ) from err

    for check in check_runs:
        logger.debug(
            "found PR check name=%s conclusion=%s ref=%s", check.name, check.conclusion, sha
        )

    return merge_status_entries(statuses, check_runs)
