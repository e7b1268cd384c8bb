from collections.abc import Sequence
from typing import Any

import structlog

from query_event_alert.domain import (
    EVENTS_PLUGIN,
    AuthId,
    ClusterContext,
    Notification,
    NoOrg,
    OrgContext,
    PluginContext,
    Severity,
    UnknownCluster,
)
from query_event_alert.output import NotificationOutput

_LOG_METHODS = {
    Severity.INFO: "info",
    Severity.WARN: "warning",
    Severity.ERROR: "error",
}

UNKNOWN_USER = "unknown"


def should_notify(severity: Severity, override: bool | None) -> bool:
    """Explicit overrides win; otherwise WARN and above are routed to the alert channels."""
    if override is not None:
        return override
    return severity >= Severity.WARN


class QueryLogger:
    """Structured log sink that also routes messages to notification outputs.

    Every record carries the cluster, plugin and org names. ``for_user``
    returns a logger scoped to one authenticated user.
    """

    def __init__(
        self,
        outputs: Sequence[NotificationOutput] = (),
        cluster: ClusterContext = UnknownCluster(),
        plugin: PluginContext = EVENTS_PLUGIN,
        org: OrgContext = NoOrg(),
        logger_name: str = "query_event_alert.events",
    ) -> None:
        self._outputs = tuple(outputs)
        self._logger_name = logger_name
        self._logger = structlog.get_logger(logger_name)
        self._context: dict[str, Any] = {
            "cluster": cluster.name,
            "plugin": plugin.name,
            "org": org.name,
        }

    @property
    def outputs(self) -> tuple[NotificationOutput, ...]:
        return self._outputs

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    @property
    def user(self) -> str:
        return self._context.get("user", UNKNOWN_USER)

    def for_user(self, auth_id: AuthId) -> "QueryLogger":
        scoped = QueryLogger.__new__(QueryLogger)
        scoped._outputs = self._outputs
        scoped._logger_name = self._logger_name
        scoped._logger = self._logger
        scoped._context = {**self._context, "user": auth_id.display()}
        return scoped

    async def log(
        self,
        severity: Severity,
        message: str,
        notify: bool | None = None,
        query_id: str | None = None,
    ) -> None:
        fields = dict(self._context)
        if query_id is not None:
            fields["query_id"] = query_id
        getattr(self._logger, _LOG_METHODS[severity])(message, **fields)

        if self._outputs and should_notify(severity, notify):
            await self._notify(Notification(severity, message, self.user, query_id))

    async def info(self, message: str, notify: bool | None = None) -> None:
        await self.log(Severity.INFO, message, notify)

    async def warn(self, message: str, notify: bool | None = None) -> None:
        await self.log(Severity.WARN, message, notify)

    async def error(self, message: str, notify: bool | None = None) -> None:
        await self.log(Severity.ERROR, message, notify)

    async def _notify(self, notification: Notification) -> None:
        for output in self._outputs:
            try:
                await output.send(notification)
            except Exception as e:
                self._logger.warning(
                    "notification_failed",
                    channel=output.name,
                    error=str(e),
                    **self._context,
                )
