"""Normalized query records and the decisions made about them."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import IntEnum

from query_event_alert.domain.resources import AuthId, AuthIdUnknown, AuthIdUser, Resource
from query_event_alert.timefmt import to_iso


class Severity(IntEnum):
    """Log severity levels, ordered for comparison (higher value = higher severity)."""

    INFO = 1
    WARN = 2
    ERROR = 3


@dataclass(frozen=True, slots=True)
class FailureInfo:
    """A failure reported by the engine for a query or one of its splits."""

    code: str
    message: str | None = None
    category: str | None = None


@dataclass(frozen=True, slots=True)
class TimeInfo:
    """Creation, start and end instants of a query or split."""

    created: datetime
    started: datetime | None = None
    ended: datetime | None = None

    def __post_init__(self) -> None:
        if self.started is not None and self.started < self.created:
            raise ValueError("started must not precede created")
        if self.ended is not None and self.ended < self.created:
            raise ValueError("ended must not precede created")

    @property
    def created_iso(self) -> str:
        return to_iso(self.created)

    @property
    def started_iso(self) -> str:
        return to_iso(self.started) if self.started is not None else ""

    @property
    def ended_iso(self) -> str:
        return to_iso(self.ended) if self.ended is not None else ""

    @property
    def wait_duration(self) -> timedelta:
        if self.started is None:
            return timedelta(0)
        return self.started - self.created

    @property
    def run_duration(self) -> timedelta:
        if self.started is None or self.ended is None:
            return timedelta(0)
        return self.ended - self.started

    @property
    def total_duration(self) -> timedelta:
        if self.ended is None:
            return timedelta(0)
        return self.ended - self.created


@dataclass(frozen=True, slots=True)
class QueryInfo:
    """A query as observed at one stage of its life."""

    id: str
    state: str
    time: TimeInfo
    resource: Resource | None = None
    user: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    failure: FailureInfo | None = None
    query_type: str | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    @property
    def auth_id(self) -> AuthId:
        if self.user is None:
            return AuthIdUnknown()
        return AuthIdUser(self.user)


@dataclass(frozen=True, slots=True)
class QueryStart:
    info: QueryInfo


@dataclass(frozen=True, slots=True)
class QuerySplit:
    info: QueryInfo
    stage_id: str
    task_id: str


@dataclass(frozen=True, slots=True)
class QueryEnd:
    info: QueryInfo


QueryStage = QueryStart | QuerySplit | QueryEnd


@dataclass(frozen=True, slots=True)
class LogDecision:
    """What to do with a query stage: a message of None means nothing is logged."""

    severity: Severity
    message: str | None
    notify: bool | None = None

    @property
    def suppressed(self) -> bool:
        return self.message is None


@dataclass(frozen=True, slots=True)
class Notification:
    """A message routed to the external alert channels."""

    severity: Severity
    message: str
    user: str
    query_id: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)
