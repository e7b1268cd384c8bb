__version__ = "0.1.0"

from query_event_alert.bootstrap import build_listener
from query_event_alert.config import ListenerConfig, PolicyConfig
from query_event_alert.core import EventPipeline, QueryEventListener, QueryLogger, isolate
from query_event_alert.domain import (
    FailureInfo,
    LogDecision,
    Notification,
    QueryEnd,
    QueryInfo,
    QuerySplit,
    QueryStage,
    QueryStart,
    Severity,
    TimeInfo,
)
from query_event_alert.input import (
    EventPayloadParser,
    JsonLinesEventInput,
    QueryCompletedEvent,
    QueryCreatedEvent,
    SplitCompletedEvent,
)
from query_event_alert.output import ConsoleNotificationOutput, NotificationOutput
from query_event_alert.policy import decide

__all__ = [
    "__version__",
    "build_listener",
    "ListenerConfig",
    "PolicyConfig",
    "EventPipeline",
    "QueryEventListener",
    "QueryLogger",
    "isolate",
    "FailureInfo",
    "LogDecision",
    "Notification",
    "QueryEnd",
    "QueryInfo",
    "QuerySplit",
    "QueryStage",
    "QueryStart",
    "Severity",
    "TimeInfo",
    "EventPayloadParser",
    "JsonLinesEventInput",
    "QueryCompletedEvent",
    "QueryCreatedEvent",
    "SplitCompletedEvent",
    "ConsoleNotificationOutput",
    "NotificationOutput",
    "decide",
]
