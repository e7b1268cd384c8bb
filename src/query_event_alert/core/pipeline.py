from query_event_alert.core.listener import QueryEventListener
from query_event_alert.input import EventInput


class EventPipeline:
    """Replays events from an input source through the listener, one at a time."""

    def __init__(self, input_source: EventInput, listener: QueryEventListener) -> None:
        self._input = input_source
        self._listener = listener

    async def run(self) -> int:
        processed = 0
        async for event in self._input:
            await self._listener.handle(event)
            processed += 1
        return processed
