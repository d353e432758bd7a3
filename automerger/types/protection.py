"""Branch protection data models.

The required status check lookup has two outcomes that are not errors: the
branch has no protection at all, or it declares a (possibly empty) list of
required contexts. Lookup failures are raised, not returned.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NotConfigured:
    """The target branch has no branch protection."""


@dataclass(frozen=True)
class Found:
    """The target branch declares these contexts as required."""

    contexts: list[str] = field(default_factory=list)


RequiredContexts = NotConfigured | Found


def required_names(required: RequiredContexts) -> list[str]:
    """Return the required context names, empty when protection is absent."""
    if isinstance(required, Found):
        return list(required.contexts)
    return []
