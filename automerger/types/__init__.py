"""automerger type definitions.

This module exports all data model types used by the package.
"""

from automerger.types.events import (
    CommitStatusUpdated,
    Event,
    PullRequestLabeled,
    Repository,
    ReviewSubmitted,
    parse_event,
)
from automerger.types.protection import Found, NotConfigured, RequiredContexts
from automerger.types.pulls import Issue, MergeResult, PullRequest
from automerger.types.statuses import CheckRun, CommitStatus

__all__ = [
    # Event types
    "Event",
    "PullRequestLabeled",
    "ReviewSubmitted",
    "CommitStatusUpdated",
    "Repository",
    "parse_event",
    # Pull request types
    "Issue",
    "PullRequest",
    "MergeResult",
    # Status types
    "CommitStatus",
    "CheckRun",
    # Branch protection types
    "RequiredContexts",
    "NotConfigured",
    "Found",
]
