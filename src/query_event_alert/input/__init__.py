from query_event_alert.input.base import EventInput
from query_event_alert.input.events import (
    ErrorCode,
    QueryCompletedEvent,
    QueryContext,
    QueryCreatedEvent,
    QueryFailureInfo,
    QueryMetadata,
    RawEvent,
    SplitCompletedEvent,
    SplitFailureInfo,
)
from query_event_alert.input.jsonl import JsonLinesEventInput
from query_event_alert.input.normalizer import (
    derive_resource,
    info_from_completed,
    info_from_created,
    info_from_split,
    stage_from_completed,
    stage_from_created,
    stage_from_split,
)
from query_event_alert.input.parser import EventPayloadParser

__all__ = [
    "EventInput",
    "ErrorCode",
    "QueryCompletedEvent",
    "QueryContext",
    "QueryCreatedEvent",
    "QueryFailureInfo",
    "QueryMetadata",
    "RawEvent",
    "SplitCompletedEvent",
    "SplitFailureInfo",
    "JsonLinesEventInput",
    "EventPayloadParser",
    "derive_resource",
    "info_from_completed",
    "info_from_created",
    "info_from_split",
    "stage_from_completed",
    "stage_from_created",
    "stage_from_split",
]
