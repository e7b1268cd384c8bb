"""Configuration, env-var driven.

All settings have safe defaults. Log and notification switches are
tri-state: unset means "use the default", an explicit false suppresses
and an explicit true forces.

    QEA_LOG_QUERY_CREATED / QEA_LOG_QUERY_SUCCESS / QEA_LOG_QUERY_FAILURE
    QEA_LOG_SPLIT_COMPLETE      splits are only processed when explicitly true
    QEA_SLACK_QUERY_CREATED / QEA_SLACK_SPLIT_COMPLETE
    QEA_SLACK_QUERY_SUCCESS / QEA_SLACK_QUERY_FAILURE
"""

import os
from dataclasses import dataclass, field

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def parse_tristate(value: str | None) -> bool | None:
    if value is None or not value.strip():
        return None
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"Expected a boolean value, got {value!r}")


def _env_tristate(name: str) -> bool | None:
    return parse_tristate(os.environ.get(name))


@dataclass(frozen=True)
class PolicyConfig:
    """Read-only snapshot of the log and notification switches."""

    log_query_created: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_LOG_QUERY_CREATED")
    )
    log_query_success: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_LOG_QUERY_SUCCESS")
    )
    log_query_failure: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_LOG_QUERY_FAILURE")
    )
    log_split_complete: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_LOG_SPLIT_COMPLETE")
    )

    slack_query_created: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_SLACK_QUERY_CREATED")
    )
    slack_split_complete: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_SLACK_SPLIT_COMPLETE")
    )
    slack_query_success: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_SLACK_QUERY_SUCCESS")
    )
    slack_query_failure: bool | None = field(
        default_factory=lambda: _env_tristate("QEA_SLACK_QUERY_FAILURE")
    )


@dataclass(frozen=True)
class ListenerConfig:
    """Process-level settings: logging, context names and notification channels."""

    log_level: str = field(default_factory=lambda: os.environ.get("QEA_LOG_LEVEL", "INFO"))
    log_format: str = field(
        default_factory=lambda: os.environ.get("QEA_LOG_FORMAT", "json")
    )  # "json" | "console"

    cluster_name: str | None = field(
        default_factory=lambda: os.environ.get("QEA_CLUSTER_NAME") or None
    )
    org_name: str | None = field(default_factory=lambda: os.environ.get("QEA_ORG_NAME") or None)

    slack_webhook_url: str | None = field(
        default_factory=lambda: os.environ.get("QEA_SLACK_WEBHOOK_URL") or None
    )
    sqs_queue_url: str | None = field(
        default_factory=lambda: os.environ.get("QEA_SQS_QUEUE_URL") or None
    )
    sqs_region: str = field(default_factory=lambda: os.environ.get("QEA_SQS_REGION", "us-east-1"))
    console_notifications: bool = field(
        default_factory=lambda: bool(_env_tristate("QEA_CONSOLE_NOTIFICATIONS"))
    )

    policy: PolicyConfig = field(default_factory=PolicyConfig)
