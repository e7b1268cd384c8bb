"""Tests for projecting raw engine events onto QueryInfo."""

from datetime import UTC, datetime, timedelta

from query_event_alert.domain import (
    UNKNOWN_RESOURCE,
    Catalog,
    FailureInfo,
    QueryEnd,
    QuerySplit,
    QueryStart,
    Schema,
)
from query_event_alert.input import (
    ErrorCode,
    QueryCompletedEvent,
    QueryContext,
    QueryCreatedEvent,
    QueryFailureInfo,
    QueryMetadata,
    SplitCompletedEvent,
    SplitFailureInfo,
    derive_resource,
    info_from_completed,
    info_from_created,
    info_from_split,
    stage_from_completed,
    stage_from_created,
    stage_from_split,
)

T0 = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


def make_context(**overrides: object) -> QueryContext:
    fields: dict[str, object] = {
        "user": "bob",
        "catalog": "sales",
        "schema": "orders",
        "client_tags": ("etl", "nightly"),
        "query_type": "SELECT",
    }
    fields.update(overrides)
    return QueryContext(**fields)  # type: ignore[arg-type]


def make_completed(failure: QueryFailureInfo | None = None) -> QueryCompletedEvent:
    return QueryCompletedEvent(
        metadata=QueryMetadata("Q1", "FAILED" if failure else "FINISHED"),
        context=make_context(),
        create_time=T0,
        execution_start_time=T0 + timedelta(seconds=1),
        end_time=T0 + timedelta(seconds=11),
        failure_info=failure,
    )


class TestDeriveResource:
    def test_catalog_and_schema(self) -> None:
        assert derive_resource(make_context()) == Schema("orders", Catalog("sales"))

    def test_catalog_only(self) -> None:
        assert derive_resource(make_context(schema=None)) == Catalog("sales")

    def test_neither(self) -> None:
        assert derive_resource(make_context(catalog=None, schema=None)) == UNKNOWN_RESOURCE

    def test_schema_without_catalog_is_unknown(self) -> None:
        assert derive_resource(make_context(catalog=None)) == UNKNOWN_RESOURCE


class TestFromCreated:
    def test_copies_fields(self) -> None:
        event = QueryCreatedEvent(T0, make_context(), QueryMetadata("Q1", "QUEUED"))
        info = info_from_created(event)

        assert info.id == "Q1"
        assert info.state == "QUEUED"
        assert info.user == "bob"
        assert info.tags == ("etl", "nightly")
        assert info.query_type == "SELECT"
        assert info.resource == Schema("orders", Catalog("sales"))

    def test_has_no_failure_or_start_and_end(self) -> None:
        event = QueryCreatedEvent(T0, make_context(), QueryMetadata("Q1", "QUEUED"))
        info = info_from_created(event)

        assert info.time.created == T0
        assert info.time.started is None
        assert info.time.ended is None
        assert info.failure is None
        assert not info.failed

    def test_stage_is_start(self) -> None:
        event = QueryCreatedEvent(T0, make_context(), QueryMetadata("Q1", "QUEUED"))
        assert isinstance(stage_from_created(event), QueryStart)


class TestFromSplit:
    def test_state_is_always_running(self) -> None:
        event = SplitCompletedEvent("Q1", "3", "3.0.1", T0)
        info = info_from_split(event)

        assert info.state == "RUNNING"
        assert info.resource is None
        assert info.user is None
        assert info.tags == ()

    def test_in_flight_split_has_no_start_or_end(self) -> None:
        info = info_from_split(SplitCompletedEvent("Q1", "3", "3.0.1", T0))
        assert info.time.started is None
        assert info.time.ended is None

    def test_failure_has_no_category(self) -> None:
        event = SplitCompletedEvent(
            "Q1",
            "3",
            "3.0.1",
            T0,
            T0 + timedelta(seconds=1),
            T0 + timedelta(seconds=2),
            SplitFailureInfo("java.io.IOException", "disk full"),
        )
        info = info_from_split(event)

        assert info.failure == FailureInfo("java.io.IOException", "disk full", None)
        assert info.failed

    def test_stage_carries_stage_and_task(self) -> None:
        stage = stage_from_split(SplitCompletedEvent("Q1", "3", "3.0.1", T0))
        assert isinstance(stage, QuerySplit)
        assert stage.stage_id == "3"
        assert stage.task_id == "3.0.1"


class TestFromCompleted:
    def test_successful_query(self) -> None:
        info = info_from_completed(make_completed())

        assert info.state == "FINISHED"
        assert info.resource == Schema("orders", Catalog("sales"))
        assert info.user == "bob"
        assert info.failure is None
        assert info.time.started == T0 + timedelta(seconds=1)
        assert info.time.total_duration == timedelta(seconds=11)

    def test_failure_carries_code_and_category(self) -> None:
        failure = QueryFailureInfo(
            ErrorCode(1, "SYNTAX_ERROR", "USER_ERROR"), failure_message="line 1:1: mismatched input"
        )
        info = info_from_completed(make_completed(failure))

        assert info.failure == FailureInfo(
            "SYNTAX_ERROR", "line 1:1: mismatched input", "USER_ERROR"
        )
        assert info.failed

    def test_failure_without_message(self) -> None:
        failure = QueryFailureInfo(ErrorCode(65536, "GENERIC_INTERNAL_ERROR", "INTERNAL_ERROR"))
        info = info_from_completed(make_completed(failure))

        assert info.failure is not None
        assert info.failure.message is None
        assert info.failure.category == "INTERNAL_ERROR"

    def test_stage_is_end(self) -> None:
        assert isinstance(stage_from_completed(make_completed()), QueryEnd)
