from query_event_alert.output.base import NotificationOutput
from query_event_alert.output.console import ConsoleNotificationOutput
from query_event_alert.output.slack import SlackNotificationOutput
from query_event_alert.output.sqs import SqsNotificationOutput

__all__ = [
    "NotificationOutput",
    "ConsoleNotificationOutput",
    "SlackNotificationOutput",
    "SqsNotificationOutput",
]
