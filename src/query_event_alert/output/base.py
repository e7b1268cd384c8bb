from typing import Protocol, runtime_checkable

from query_event_alert.domain import Notification


@runtime_checkable
class NotificationOutput(Protocol):
    """Protocol for external alert channels."""

    @property
    def name(self) -> str:
        ...

    async def send(self, notification: Notification) -> None:
        ...
