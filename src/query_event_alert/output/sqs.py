import json
from dataclasses import asdict
from datetime import datetime
from typing import Any

from aiobotocore.session import get_session

from query_event_alert.domain import Notification


class SqsNotificationOutput:
    def __init__(self, queue_url: str, region: str = "us-east-1") -> None:
        self._queue_url = queue_url
        self._region = region
        self._session = get_session()

    @property
    def name(self) -> str:
        return "sqs"

    async def send(self, notification: Notification) -> None:
        async with self._session.create_client("sqs", region_name=self._region) as client:
            await client.send_message(
                QueueUrl=self._queue_url,
                MessageBody=self._serialize(notification),
            )

    def _serialize(self, notification: Notification) -> str:
        body = asdict(notification)
        body["severity"] = notification.severity.name
        return json.dumps(body, default=self._json_default)

    @staticmethod
    def _json_default(obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
