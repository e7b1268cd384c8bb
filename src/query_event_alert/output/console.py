from query_event_alert.domain import Notification


class ConsoleNotificationOutput:
    """Console output adapter for notifications."""

    def __init__(self, prefix: str = "[ALERT]") -> None:
        self._prefix = prefix

    @property
    def name(self) -> str:
        return "console"

    async def send(self, notification: Notification) -> None:
        query = f" {notification.query_id}" if notification.query_id else ""
        print(f"{self._prefix} [{notification.severity.name}]{query} ({notification.user})")

        for line in notification.message.splitlines():
            print(f"  {line}")
