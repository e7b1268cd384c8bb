from datetime import UTC, datetime
from typing import Any

from query_event_alert.exceptions import EventParseError
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


class EventPayloadParser:
    """Parser for JSON event payloads in the engine's HTTP event listener format.

    Payloads use camelCase keys. The event kind is taken from an explicit
    ``eventType`` key when present, otherwise inferred from the keys the
    payload carries.
    """

    EVENT_TYPES = {
        "queryCreated": "created",
        "splitCompleted": "split",
        "queryCompleted": "completed",
    }

    def parse(self, payload: dict[str, Any]) -> RawEvent | None:
        """Parse a payload. Returns None if it is not a recognized event shape."""
        kind = self._detect_kind(payload)
        if kind == "created":
            return self.parse_created(payload)
        if kind == "split":
            return self.parse_split(payload)
        if kind == "completed":
            return self.parse_completed(payload)
        return None

    def parse_created(self, payload: dict[str, Any]) -> QueryCreatedEvent:
        return QueryCreatedEvent(
            create_time=self._timestamp(payload, "createTime"),
            context=self._parse_context(self._section(payload, "context")),
            metadata=self._parse_metadata(self._section(payload, "metadata")),
        )

    def parse_split(self, payload: dict[str, Any]) -> SplitCompletedEvent:
        failure_info = None
        raw_failure = payload.get("failureInfo")
        if raw_failure:
            failure_info = SplitFailureInfo(
                failure_type=self._required(raw_failure, "failureType"),
                failure_message=raw_failure.get("failureMessage") or "",
            )

        return SplitCompletedEvent(
            query_id=self._required(payload, "queryId"),
            stage_id=str(self._required(payload, "stageId")),
            task_id=str(self._required(payload, "taskId")),
            create_time=self._timestamp(payload, "createTime"),
            start_time=self._optional_timestamp(payload, "startTime"),
            end_time=self._optional_timestamp(payload, "endTime"),
            failure_info=failure_info,
        )

    def parse_completed(self, payload: dict[str, Any]) -> QueryCompletedEvent:
        failure_info = None
        raw_failure = payload.get("failureInfo")
        if raw_failure:
            raw_code = self._section(raw_failure, "errorCode")
            failure_info = QueryFailureInfo(
                error_code=ErrorCode(
                    code=self._error_code_number(raw_code, payload),
                    name=self._required(raw_code, "name"),
                    type=self._required(raw_code, "type"),
                ),
                failure_message=raw_failure.get("failureMessage"),
                failure_type=raw_failure.get("failureType"),
            )

        return QueryCompletedEvent(
            metadata=self._parse_metadata(self._section(payload, "metadata")),
            context=self._parse_context(self._section(payload, "context")),
            create_time=self._timestamp(payload, "createTime"),
            execution_start_time=self._timestamp(payload, "executionStartTime"),
            end_time=self._timestamp(payload, "endTime"),
            failure_info=failure_info,
        )

    def _detect_kind(self, payload: dict[str, Any]) -> str | None:
        event_type = payload.get("eventType")
        if event_type is not None:
            return self.EVENT_TYPES.get(event_type)

        if "stageId" in payload and "taskId" in payload:
            return "split"
        if "metadata" in payload and "endTime" in payload:
            return "completed"
        if "metadata" in payload and "createTime" in payload:
            return "created"
        return None

    def _parse_context(self, raw: dict[str, Any]) -> QueryContext:
        return QueryContext(
            user=raw.get("user"),
            catalog=raw.get("catalog"),
            schema=raw.get("schema"),
            client_tags=tuple(raw.get("clientTags") or ()),
            query_type=raw.get("queryType"),
            source=raw.get("source"),
        )

    def _parse_metadata(self, raw: dict[str, Any]) -> QueryMetadata:
        return QueryMetadata(
            query_id=self._required(raw, "queryId"),
            query_state=self._required(raw, "queryState"),
            query=raw.get("query"),
        )

    def _section(self, payload: dict[str, Any], key: str) -> dict[str, Any]:
        value = self._required(payload, key)
        if not isinstance(value, dict):
            raise EventParseError(f"Expected an object for '{key}'", payload)
        return value

    def _required(self, payload: dict[str, Any], key: str) -> Any:
        value = payload.get(key)
        if value is None:
            raise EventParseError(f"Missing required field '{key}'", payload)
        return value

    def _timestamp(self, payload: dict[str, Any], key: str) -> datetime:
        return self._to_datetime(self._required(payload, key), key, payload)

    def _optional_timestamp(self, payload: dict[str, Any], key: str) -> datetime | None:
        value = payload.get(key)
        if value is None:
            return None
        return self._to_datetime(value, key, payload)

    @staticmethod
    def _error_code_number(raw_code: dict[str, Any], payload: dict[str, Any]) -> int:
        value = raw_code.get("code", 0)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise EventParseError(f"Invalid error code number: {value}", payload) from e

    @staticmethod
    def _to_datetime(value: Any, key: str, payload: dict[str, Any]) -> datetime:
        if not isinstance(value, datetime):
            try:
                value = datetime.fromisoformat(str(value))
            except ValueError as e:
                raise EventParseError(f"Invalid timestamp for '{key}': {value}", payload) from e
        # Naive timestamps are taken to be UTC so they compare with aware ones.
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value
