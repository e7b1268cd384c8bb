"""Tests for domain models."""

from datetime import UTC, datetime, timedelta

import pytest

from query_event_alert.domain import (
    AuthIdUnknown,
    AuthIdUser,
    FailureInfo,
    LogDecision,
    QueryInfo,
    Severity,
    TimeInfo,
)

T0 = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


class TestSeverity:
    def test_severity_ordering(self) -> None:
        assert Severity.ERROR > Severity.WARN > Severity.INFO


class TestTimeInfo:
    def test_durations_are_zero_without_start_or_end(self) -> None:
        time = TimeInfo(T0)
        assert time.wait_duration == timedelta(0)
        assert time.run_duration == timedelta(0)
        assert time.total_duration == timedelta(0)

    def test_durations_with_all_instants(self) -> None:
        time = TimeInfo(T0, T0 + timedelta(seconds=5), T0 + timedelta(seconds=20))
        assert time.wait_duration == timedelta(seconds=5)
        assert time.run_duration == timedelta(seconds=15)
        assert time.total_duration == timedelta(seconds=20)

    def test_run_duration_needs_both_start_and_end(self) -> None:
        time = TimeInfo(T0, ended=T0 + timedelta(seconds=20))
        assert time.run_duration == timedelta(0)
        assert time.total_duration == timedelta(seconds=20)

    def test_iso_renderings(self) -> None:
        time = TimeInfo(T0, T0 + timedelta(seconds=5))
        assert time.created_iso == "2024-01-15T10:30:00Z"
        assert time.started_iso == "2024-01-15T10:30:05Z"
        assert time.ended_iso == ""

    def test_started_before_created_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="started"):
            TimeInfo(T0, started=T0 - timedelta(seconds=1))

    def test_ended_before_created_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="ended"):
            TimeInfo(T0, ended=T0 - timedelta(seconds=1))


class TestQueryInfo:
    def test_defaults(self) -> None:
        info = QueryInfo("Q1", "QUEUED", TimeInfo(T0))
        assert info.resource is None
        assert info.user is None
        assert info.tags == ()
        assert info.failure is None
        assert info.query_type is None
        assert not info.failed

    def test_failed_follows_failure_presence(self) -> None:
        info = QueryInfo("Q1", "FAILED", TimeInfo(T0), failure=FailureInfo("SYNTAX_ERROR"))
        assert info.failed

    def test_auth_id_for_known_user(self) -> None:
        info = QueryInfo("Q1", "QUEUED", TimeInfo(T0), user="alice")
        assert info.auth_id == AuthIdUser("alice")

    def test_auth_id_for_missing_user(self) -> None:
        info = QueryInfo("Q1", "QUEUED", TimeInfo(T0))
        assert info.auth_id == AuthIdUnknown()


class TestLogDecision:
    def test_suppressed_when_message_absent(self) -> None:
        assert LogDecision(Severity.INFO, None).suppressed
        assert not LogDecision(Severity.INFO, "hello").suppressed

    def test_notify_defaults_to_absent(self) -> None:
        assert LogDecision(Severity.WARN, "x").notify is None
