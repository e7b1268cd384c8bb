from typing import Protocol, Self, runtime_checkable

from query_event_alert.input.events import RawEvent


@runtime_checkable
class EventInput(Protocol):
    """Protocol for async sources of raw engine events."""

    def __aiter__(self) -> Self:
        ...

    async def __anext__(self) -> RawEvent:
        ...
