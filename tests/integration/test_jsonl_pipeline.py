import json
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from query_event_alert import (
    EventPipeline,
    JsonLinesEventInput,
    PolicyConfig,
    QueryEventListener,
    QueryLogger,
)

EVENTS = [
    {
        "eventType": "queryCreated",
        "createTime": "2024-03-01T08:00:00Z",
        "context": {"user": "alice", "catalog": "hive", "queryType": "SELECT"},
        "metadata": {"queryId": "20240301_080000_00001_abcde", "queryState": "QUEUED"},
    },
    {"type": "heartbeat"},
    {
        "eventType": "queryCompleted",
        "createTime": "2024-03-01T08:00:00Z",
        "executionStartTime": "2024-03-01T08:00:00.500Z",
        "endTime": "2024-03-01T08:00:03Z",
        "context": {"user": "alice", "catalog": "hive", "queryType": "SELECT"},
        "metadata": {"queryId": "20240301_080000_00001_abcde", "queryState": "FINISHED"},
    },
]


@pytest.mark.asyncio
async def test_jsonl_file_through_listener(tmp_path: Path):
    event_file = tmp_path / "events.jsonl"
    event_file.write_text("\n".join(json.dumps(e) for e in EVENTS) + "\n")

    policy = PolicyConfig(
        log_query_created=False,
        log_query_success=None,
        log_query_failure=None,
        log_split_complete=None,
        slack_query_created=None,
        slack_split_complete=None,
        slack_query_success=None,
        slack_query_failure=None,
    )
    fallback_lines: list[str] = []
    listener = QueryEventListener(QueryLogger(), policy, fallback=fallback_lines.append)

    with capture_logs() as logs:
        processed = await EventPipeline(JsonLinesEventInput(event_file), listener).run()

    assert processed == 2
    assert fallback_lines == []
    assert [entry["event"].splitlines()[0] for entry in logs] == [
        "event-query-created => 20240301_080000_00001_abcde",
        "event-query-completed => 20240301_080000_00001_abcde",
        "SELECT Query `20240301_080000_00001_abcde` _FINISHED_",
    ]
    assert "against `hive`" in logs[2]["event"]
    assert "(lasted _*3s*_)" in logs[2]["event"]
    assert logs[2]["user"] == "alice"


@pytest.mark.asyncio
async def test_events_without_user_and_bad_lines_do_not_stop_replay():
    created_without_user = {
        "eventType": "queryCreated",
        "createTime": "2024-03-01T08:00:00Z",
        "context": {"catalog": "hive"},
        "metadata": {"queryId": "Q2", "queryState": "QUEUED"},
    }
    completed_without_user = {
        "eventType": "queryCompleted",
        "createTime": "2024-03-01T08:00:00Z",
        "executionStartTime": "2024-03-01T08:00:01Z",
        "endTime": "2024-03-01T08:00:02Z",
        "context": {"catalog": "hive"},
        "metadata": {"queryId": "Q3", "queryState": "FINISHED"},
    }
    lines = [
        json.dumps(EVENTS[0]),
        json.dumps(created_without_user),
        "{truncated",
        json.dumps(completed_without_user),
        json.dumps(EVENTS[2]),
    ]
    fallback_lines: list[str] = []
    policy = PolicyConfig(**dict.fromkeys(PolicyConfig.__dataclass_fields__))
    listener = QueryEventListener(QueryLogger(), policy, fallback=fallback_lines.append)

    with capture_logs() as logs:
        processed = await EventPipeline(JsonLinesEventInput.from_lines(lines), listener).run()

    assert processed == 4
    assert fallback_lines == []
    assert [entry["line"] for entry in logs if entry["event"] == "event_parse_failed"] == [3]

    unrecognized = [
        entry for entry in logs if entry["event"].startswith("Unrecognized query stage:")
    ]
    assert len(unrecognized) == 2
    assert all(entry["log_level"] == "warning" for entry in unrecognized)
    assert all(entry["user"] == "unknown" for entry in unrecognized)
    assert "QueryStart(" in unrecognized[0]["event"]
    assert "QueryEnd(" in unrecognized[1]["event"]
