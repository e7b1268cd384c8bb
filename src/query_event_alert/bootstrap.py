"""Process bootstrap: builds the listener and its collaborators from configuration."""

from query_event_alert.config import ListenerConfig
from query_event_alert.core import QueryEventListener, QueryLogger
from query_event_alert.domain import (
    EVENTS_PLUGIN,
    NamedCluster,
    NamedOrg,
    NoOrg,
    Org,
    UnknownCluster,
)
from query_event_alert.logconfig import configure_logging
from query_event_alert.output import (
    ConsoleNotificationOutput,
    NotificationOutput,
    SlackNotificationOutput,
    SqsNotificationOutput,
)


def build_outputs(config: ListenerConfig) -> list[NotificationOutput]:
    outputs: list[NotificationOutput] = []
    if config.console_notifications:
        outputs.append(ConsoleNotificationOutput())
    if config.slack_webhook_url:
        outputs.append(SlackNotificationOutput(config.slack_webhook_url))
    if config.sqs_queue_url:
        outputs.append(SqsNotificationOutput(config.sqs_queue_url, region=config.sqs_region))
    return outputs


def build_sink(config: ListenerConfig) -> QueryLogger:
    cluster = NamedCluster(config.cluster_name) if config.cluster_name else UnknownCluster()
    org = NamedOrg(Org(config.org_name)) if config.org_name else NoOrg()
    return QueryLogger(build_outputs(config), cluster=cluster, plugin=EVENTS_PLUGIN, org=org)


def build_listener(config: ListenerConfig | None = None, setup_logging: bool = True) -> QueryEventListener:
    config = config or ListenerConfig()
    if setup_logging:
        configure_logging(config.log_level, config.log_format)
    return QueryEventListener(build_sink(config), config.policy)
