from query_event_alert.core.isolation import (
    SECONDARY_FAILURE,
    FallbackWriter,
    isolate,
    write_stderr,
)
from query_event_alert.core.listener import QueryEventListener
from query_event_alert.core.pipeline import EventPipeline
from query_event_alert.core.sink import QueryLogger, should_notify

__all__ = [
    "SECONDARY_FAILURE",
    "FallbackWriter",
    "isolate",
    "write_stderr",
    "QueryEventListener",
    "EventPipeline",
    "QueryLogger",
    "should_notify",
]
