"""
Merge eligibility policy.

Two rules apply, chosen by whether the target branch requires any contexts:

- No required contexts (unprotected branch, or protection without required
  checks): every known context must be successful. Nothing reported at all
  is eligible.
- Required contexts: every required context must be reported and
  successful. A required context that was never reported blocks the merge;
  contexts that are not required are ignored.
"""

from dataclasses import dataclass

from automerger.logging import get_logger
from automerger.types.protection import RequiredContexts, required_names

logger = get_logger("engine")


@dataclass
class MergeDecision:
    """Outcome of evaluating one pull request at one head commit."""

    merge: bool
    sha: str
    number: int
    html_url: str
    reason: str = ""


def find_blocking_context(
    status_map: dict[str, bool], required: RequiredContexts
) -> str | None:
    """Return the first context that blocks the merge, or None if eligible."""
    names = required_names(required)
    if not names:
        for context, success in status_map.items():
            if not success:
                return context
        return None

    for context in names:
        if not status_map.get(context, False):
            return context
    return None


def is_eligible(status_map: dict[str, bool], required: RequiredContexts) -> bool:
    return find_blocking_context(status_map, required) is None


def evaluate(
    status_map: dict[str, bool],
    required: RequiredContexts,
    sha: str,
    number: int,
    html_url: str,
) -> MergeDecision:
    """
    Decide whether the pull request may be merged at ``sha``.

    Args:
        status_map: Aggregated ``{context: success}`` for ``sha``
        required: Required contexts of the target branch
        sha: Head commit the decision applies to
        number: Pull request number
        html_url: Pull request URL

    Returns:
        MergeDecision; ``reason`` names the blocking context when not merging
    """
    blocking = find_blocking_context(status_map, required)
    if blocking is None:
        return MergeDecision(merge=True, sha=sha, number=number, html_url=html_url)

    present = blocking in status_map
    logger.debug(
        "not merging because status/check failed context=%s present=%s success=%s pr=%d",
        blocking,
        present,
        status_map.get(blocking, False),
        number,
    )
    reason = f"{blocking} is failing" if present else f"{blocking} is missing"
    return MergeDecision(
        merge=False, sha=sha, number=number, html_url=html_url, reason=reason
    )
