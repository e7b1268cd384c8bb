class QueryEventAlertError(Exception):
    pass


class EventParseError(QueryEventAlertError, ValueError):
    def __init__(self, message: str, payload: object | None = None) -> None:
        super().__init__(message)
        self.payload = payload


class NotificationError(QueryEventAlertError):
    def __init__(self, message: str, channel: str | None = None) -> None:
        super().__init__(message)
        self.channel = channel
