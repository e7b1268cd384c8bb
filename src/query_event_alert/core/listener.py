import structlog

from query_event_alert.config import PolicyConfig
from query_event_alert.core.isolation import FallbackWriter, isolate, write_stderr
from query_event_alert.core.sink import QueryLogger
from query_event_alert.domain import QueryStage, Severity
from query_event_alert.input.events import (
    QueryCompletedEvent,
    QueryCreatedEvent,
    RawEvent,
    SplitCompletedEvent,
)
from query_event_alert.input.normalizer import (
    stage_from_completed,
    stage_from_created,
    stage_from_split,
)
from query_event_alert.policy import RULES, PolicyRule, decide

logger = structlog.get_logger(__name__)


class QueryEventListener:
    """Entry points the engine calls for each query lifecycle event.

    Each entry point normalizes the event, asks the logging policy what to
    do with it and hands the result to the sink. Nothing raised while doing
    so escapes to the caller; failures go to the fallback writer instead.
    """

    def __init__(
        self,
        sink: QueryLogger,
        config: PolicyConfig | None = None,
        fallback: FallbackWriter = write_stderr,
        rules: tuple[PolicyRule, ...] = RULES,
    ) -> None:
        self._sink = sink
        self._config = config or PolicyConfig()
        self._fallback = fallback
        self._rules = rules

    @property
    def config(self) -> PolicyConfig:
        return self._config

    async def query_created(self, event: QueryCreatedEvent) -> None:
        await isolate("query_created", lambda: self._on_created(event), self._fallback, self._report)

    async def split_completed(self, event: SplitCompletedEvent) -> None:
        await isolate("split_completed", lambda: self._on_split(event), self._fallback, self._report)

    async def query_completed(self, event: QueryCompletedEvent) -> None:
        await isolate(
            "query_completed", lambda: self._on_completed(event), self._fallback, self._report
        )

    async def handle(self, event: RawEvent) -> None:
        """Route a raw event to its entry point."""
        match event:
            case QueryCreatedEvent():
                await self.query_created(event)
            case SplitCompletedEvent():
                await self.split_completed(event)
            case QueryCompletedEvent():
                await self.query_completed(event)
            case _:
                logger.warning("unsupported_event", event_type=type(event).__name__)

    async def _on_created(self, event: QueryCreatedEvent) -> None:
        await self._sink.info(f"event-query-created => {event.metadata.query_id}")
        await self._log_stage(stage_from_created(event))

    async def _on_split(self, event: SplitCompletedEvent) -> None:
        # Splits are high volume and only logged when explicitly enabled.
        if self._config.log_split_complete is not True:
            return
        await self._sink.info(f"event-split-completed => {event.query_id}")
        await self._log_stage(stage_from_split(event))

    async def _on_completed(self, event: QueryCompletedEvent) -> None:
        await self._sink.info(f"event-query-completed => {event.metadata.query_id}")
        await self._log_stage(stage_from_completed(event))

    async def _log_stage(self, stage: QueryStage) -> None:
        decision = decide(stage, self._config, self._rules)
        if decision.message is None:
            return
        await self._sink.for_user(stage.info.auth_id).log(
            decision.severity,
            decision.message,
            decision.notify,
            query_id=stage.info.id,
        )

    async def _report(self, error: Exception) -> None:
        await self._sink.log(
            Severity.ERROR,
            f"Error in the event listener ({type(error).__name__}). "
            "The stack trace is in the fallback log.",
        )
