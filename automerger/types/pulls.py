"""Issue and pull request data models."""

from dataclasses import dataclass, field


@dataclass
class Issue:
    """Issue view of a pull request (carries the labels)."""

    number: int
    html_url: str
    labels: list[str] = field(default_factory=list)
    state: str = "open"  # "open", "closed"
    is_pull_request: bool = True

    def has_label(self, name: str) -> bool:
        return name in self.labels


@dataclass
class PullRequest:
    """Pull request information."""

    number: int
    html_url: str
    head_sha: str
    base_ref: str
    state: str = "open"  # "open", "closed"


@dataclass
class MergeResult:
    """Result of merging a pull request."""

    sha: str
    merged: bool
    message: str
