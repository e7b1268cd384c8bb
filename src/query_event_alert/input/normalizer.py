"""Projects the three raw event shapes onto one QueryInfo record."""

from query_event_alert.domain import (
    UNKNOWN_RESOURCE,
    Catalog,
    FailureInfo,
    QueryEnd,
    QueryInfo,
    QuerySplit,
    QueryStart,
    Resource,
    Schema,
    TimeInfo,
)
from query_event_alert.input.events import (
    QueryCompletedEvent,
    QueryContext,
    QueryCreatedEvent,
    SplitCompletedEvent,
)

SPLIT_STATE = "RUNNING"


def derive_resource(context: QueryContext) -> Resource:
    """Schema when both catalog and schema are set, Catalog when only the catalog is."""
    match (context.catalog, context.schema):
        case (str() as catalog, str() as schema):
            return Schema(schema, Catalog(catalog))
        case (str() as catalog, None):
            return Catalog(catalog)
        case _:
            return UNKNOWN_RESOURCE


def info_from_created(event: QueryCreatedEvent) -> QueryInfo:
    context = event.context
    return QueryInfo(
        id=event.metadata.query_id,
        state=event.metadata.query_state,
        time=TimeInfo(event.create_time),
        resource=derive_resource(context),
        user=context.user,
        tags=tuple(context.client_tags),
        query_type=context.query_type,
    )


def info_from_split(event: SplitCompletedEvent) -> QueryInfo:
    # Split failures carry no classification; the category is filled in when rendered.
    failure = None
    if event.failure_info is not None:
        failure = FailureInfo(
            code=event.failure_info.failure_type,
            message=event.failure_info.failure_message,
            category=None,
        )

    return QueryInfo(
        id=event.query_id,
        state=SPLIT_STATE,
        time=TimeInfo(event.create_time, event.start_time, event.end_time),
        failure=failure,
    )


def info_from_completed(event: QueryCompletedEvent) -> QueryInfo:
    context = event.context
    failure = None
    if event.failure_info is not None:
        error_code = event.failure_info.error_code
        failure = FailureInfo(
            code=error_code.name,
            message=event.failure_info.failure_message,
            category=error_code.type,
        )

    return QueryInfo(
        id=event.metadata.query_id,
        state=event.metadata.query_state,
        time=TimeInfo(event.create_time, event.execution_start_time, event.end_time),
        resource=derive_resource(context),
        user=context.user,
        tags=tuple(context.client_tags),
        failure=failure,
        query_type=context.query_type,
    )


def stage_from_created(event: QueryCreatedEvent) -> QueryStart:
    return QueryStart(info_from_created(event))


def stage_from_split(event: SplitCompletedEvent) -> QuerySplit:
    return QuerySplit(info_from_split(event), stage_id=event.stage_id, task_id=event.task_id)


def stage_from_completed(event: QueryCompletedEvent) -> QueryEnd:
    return QueryEnd(info_from_completed(event))
