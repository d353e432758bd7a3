"""Commit status and check run data models."""

from dataclasses import dataclass


@dataclass
class CommitStatus:
    """Legacy commit status reported for a context."""

    context: str
    state: str  # "error", "failure", "pending", "success"


@dataclass
class CheckRun:
    """Check run reported for a commit."""

    name: str
    status: str  # "queued", "in_progress", "completed"
    conclusion: str | None  # None until the run completes
