"""Logging policy: maps query stages onto log decisions."""

from query_event_alert.policy.engine import (
    RULES,
    UNCATEGORIZED,
    PolicyRule,
    decide,
    failure_category,
    match_rule,
    query_prefix,
)

__all__ = [
    "RULES",
    "UNCATEGORIZED",
    "PolicyRule",
    "decide",
    "failure_category",
    "match_rule",
    "query_prefix",
]
