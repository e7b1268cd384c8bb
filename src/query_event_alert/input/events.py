"""Raw lifecycle events as the query engine reports them."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class QueryContext:
    """Session context a query was submitted under."""

    user: str | None = None
    catalog: str | None = None
    schema: str | None = None
    client_tags: tuple[str, ...] = field(default_factory=tuple)
    query_type: str | None = None
    source: str | None = None


@dataclass(frozen=True, slots=True)
class QueryMetadata:
    query_id: str
    query_state: str
    query: str | None = None


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """Structured error classification attached to a failed query."""

    code: int
    name: str
    type: str


@dataclass(frozen=True, slots=True)
class QueryFailureInfo:
    error_code: ErrorCode
    failure_message: str | None = None
    failure_type: str | None = None


@dataclass(frozen=True, slots=True)
class SplitFailureInfo:
    failure_type: str
    failure_message: str


@dataclass(frozen=True, slots=True)
class QueryCreatedEvent:
    create_time: datetime
    context: QueryContext
    metadata: QueryMetadata


@dataclass(frozen=True, slots=True)
class SplitCompletedEvent:
    query_id: str
    stage_id: str
    task_id: str
    create_time: datetime
    start_time: datetime | None = None
    end_time: datetime | None = None
    failure_info: SplitFailureInfo | None = None


@dataclass(frozen=True, slots=True)
class QueryCompletedEvent:
    metadata: QueryMetadata
    context: QueryContext
    create_time: datetime
    execution_start_time: datetime
    end_time: datetime
    failure_info: QueryFailureInfo | None = None


RawEvent = QueryCreatedEvent | SplitCompletedEvent | QueryCompletedEvent
