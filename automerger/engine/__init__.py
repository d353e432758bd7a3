"""Merge eligibility decision engine."""

from automerger.engine.aggregator import aggregate_statuses, merge_status_entries
from automerger.engine.evaluator import (
    MergeDecision,
    evaluate,
    find_blocking_context,
    is_eligible,
)
from automerger.engine.executor import BatchErrorCollector, execute_merge
from automerger.engine.resolver import resolve_required_contexts
from automerger.engine.router import EVENT_TYPES_HANDLED, AutoMerger, handle_event

__all__ = [
    "AutoMerger",
    "handle_event",
    "EVENT_TYPES_HANDLED",
    "aggregate_statuses",
    "merge_status_entries",
    "resolve_required_contexts",
    "MergeDecision",
    "evaluate",
    "find_blocking_context",
    "is_eligible",
    "execute_merge",
    "BatchErrorCollector",
]
