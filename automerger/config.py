"""Per-repository configuration."""

import os
from dataclasses import dataclass, field
from typing import Any

from automerger.exceptions import ConfigurationError

APPROVED_LABEL_ENV = "AUTOMERGER_APPROVED_LABEL"


@dataclass
class Labels:
    """Label names with a meaning to the bot."""

    approved: str = ""  # empty disables auto-merge


@dataclass
class RepoConfig:
    """Configuration for a single repository."""

    labels: Labels = field(default_factory=Labels)

    @property
    def enabled(self) -> bool:
        return bool(self.labels.approved)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "RepoConfig":
        """
        Build a configuration from the decoded per-repository config file.

        Args:
            data: Mapping shaped like ``{"labels": {"approved": "approved"}}``

        Returns:
            RepoConfig instance

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        labels_data = (data or {}).get("labels") or {}
        if not isinstance(labels_data, dict):
            raise ConfigurationError("'labels' must be a mapping")

        approved = labels_data.get("approved", "")
        if approved is None:
            approved = ""
        if not isinstance(approved, str):
            raise ConfigurationError(
                f"'labels.approved' must be a string, got {type(approved).__name__}"
            )

        return cls(labels=Labels(approved=approved.strip()))

    @classmethod
    def from_env(cls) -> "RepoConfig":
        """
        Build a configuration from environment variables.

        Environment variables:
            AUTOMERGER_APPROVED_LABEL: Approved label name (optional, empty disables)
        """
        return cls(labels=Labels(approved=os.environ.get(APPROVED_LABEL_ENV, "").strip()))
