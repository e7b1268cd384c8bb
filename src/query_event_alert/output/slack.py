from typing import Any

import httpx

from query_event_alert.domain import Notification, Severity
from query_event_alert.exceptions import NotificationError


class SlackNotificationOutput:
    """Posts notifications to a Slack incoming webhook.

    Messages already use Slack's mrkdwn emphasis (``*bold*``, ``_italic_``
    and backtick code spans), so they are sent as-is.
    """

    ICONS = {
        Severity.INFO: ":information_source:",
        Severity.WARN: ":warning:",
        Severity.ERROR: ":rotating_light:",
    }

    def __init__(
        self,
        webhook_url: str,
        channel: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.webhook_url = webhook_url
        self.channel = channel
        self.timeout = timeout
        self._client = client

    @property
    def name(self) -> str:
        return "slack"

    async def send(self, notification: Notification) -> None:
        payload = self._build_payload(notification)
        try:
            if self._client is not None:
                response = await self._client.post(self.webhook_url, json=payload)
                response.raise_for_status()
                return

            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotificationError(f"Slack webhook delivery failed: {e}", channel=self.name) from e

    def _build_payload(self, notification: Notification) -> dict[str, Any]:
        icon = self.ICONS.get(notification.severity, "")
        payload: dict[str, Any] = {"text": f"{icon} {notification.message}".strip()}
        if self.channel:
            payload["channel"] = self.channel
        return payload
