"""Decides whether, at what severity and with which notification routing a query stage is logged.

Rules are evaluated in order and the first whose predicate matches wins. The
last rule matches everything, so every stage receives a decision.
"""

from collections.abc import Callable
from dataclasses import dataclass

from query_event_alert.config import PolicyConfig
from query_event_alert.domain import (
    FailureInfo,
    LogDecision,
    QueryEnd,
    QueryInfo,
    QuerySplit,
    QueryStage,
    QueryStart,
    Severity,
)
from query_event_alert.timefmt import human

UNCATEGORIZED = "UNCATEGORIZED"


@dataclass(frozen=True, slots=True)
class PolicyRule:
    name: str
    matches: Callable[[QueryStage], bool]
    decide: Callable[[QueryStage, PolicyConfig], LogDecision]


def query_prefix(info: QueryInfo) -> str:
    type_info = f"{info.query_type} " if info.query_type else ""
    tag_info = f" [{', '.join(info.tags)}]" if info.tags else ""
    return f"{type_info}Query `{info.id}` _{info.state}_{tag_info}"


def failure_category(failure: FailureInfo) -> str:
    return failure.category if failure.category is not None else UNCATEGORIZED


def _enabled(switch: bool | None) -> bool:
    return switch is not False


def _has_subject(info: QueryInfo) -> bool:
    return info.resource is not None and info.user is not None


def _submitted_line(info: QueryInfo) -> str:
    return f"submitted by `{info.user}` against `{info.resource.display()}`"  # type: ignore[union-attr]


def _decide_created(stage: QueryStage, config: PolicyConfig) -> LogDecision:
    info = stage.info
    message = None
    if _enabled(config.log_query_created):
        message = (
            f"{query_prefix(info)}\n"
            f"{_submitted_line(info)}\n"
            f"created at _*{info.time.created_iso}*_"
        )
    return LogDecision(Severity.INFO, message, config.slack_query_created)


def _decide_split(stage: QueryStage, config: PolicyConfig) -> LogDecision:
    if not isinstance(stage, QuerySplit):
        raise TypeError(f"Expected a split stage, got {type(stage).__name__}")
    info = stage.info
    elapsed = human(info.time.run_duration)
    split = f"{stage.stage_id}.{stage.task_id}"

    if info.failure is None:
        message = f"{query_prefix(info)}\ncompleted split {split} (lasted _*{elapsed}*_)"
    else:
        failure = info.failure
        message = (
            f"{query_prefix(info)}\n"
            f"failed split {split} (lasted _*{elapsed}*_)\n"
            f"--\n"
            f"{failure_category(failure)}:{failure.code} => {failure.message or ''}"
        )
    return LogDecision(Severity.INFO, message, config.slack_split_complete)


def _decide_success(stage: QueryStage, config: PolicyConfig) -> LogDecision:
    info = stage.info
    message = None
    if _enabled(config.log_query_success):
        message = (
            f"{query_prefix(info)}\n"
            f"{_submitted_line(info)}\n"
            f"ended at _*{info.time.ended_iso}*_ (lasted _*{human(info.time.total_duration)}*_)"
        )
    return LogDecision(Severity.INFO, message, config.slack_query_success)


def _decide_failure(stage: QueryStage, config: PolicyConfig) -> LogDecision:
    info = stage.info
    failure = info.failure
    if failure is None:
        raise TypeError(f"Expected a failed query, got {stage!r}")
    message = None
    if _enabled(config.log_query_failure):
        message = (
            f"{query_prefix(info)}\n"
            f"{_submitted_line(info)}\n"
            f"ended at _*{info.time.ended_iso}*_ (lasted _*{human(info.time.total_duration)}*_)\n"
            f"--\n"
            f"*{failure_category(failure)}:{failure.code}*\n"
            f"{failure.message or ''}"
        )
    return LogDecision(Severity.WARN, message, config.slack_query_failure)


def _decide_unrecognized(stage: QueryStage, config: PolicyConfig) -> LogDecision:
    return LogDecision(Severity.WARN, f"Unrecognized query stage: {stage!r}", None)


RULES: tuple[PolicyRule, ...] = (
    PolicyRule(
        "query_created",
        lambda s: isinstance(s, QueryStart) and _has_subject(s.info),
        _decide_created,
    ),
    PolicyRule(
        "split_completed",
        lambda s: isinstance(s, QuerySplit) and s.info.failure is None,
        _decide_split,
    ),
    PolicyRule(
        "split_failed",
        lambda s: isinstance(s, QuerySplit) and s.info.failure is not None,
        _decide_split,
    ),
    PolicyRule(
        "query_succeeded",
        lambda s: isinstance(s, QueryEnd) and _has_subject(s.info) and s.info.failure is None,
        _decide_success,
    ),
    PolicyRule(
        "query_failed",
        lambda s: isinstance(s, QueryEnd) and _has_subject(s.info) and s.info.failure is not None,
        _decide_failure,
    ),
    PolicyRule("unrecognized", lambda s: True, _decide_unrecognized),
)


def match_rule(stage: QueryStage, rules: tuple[PolicyRule, ...] = RULES) -> PolicyRule:
    for rule in rules:
        if rule.matches(stage):
            return rule
    raise LookupError(f"No policy rule matches {stage!r}")


def decide(stage: QueryStage, config: PolicyConfig, rules: tuple[PolicyRule, ...] = RULES) -> LogDecision:
    """Return the log decision of the first rule matching the stage."""
    return match_rule(stage, rules).decide(stage, config)
