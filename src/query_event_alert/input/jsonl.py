import json
from pathlib import Path
from typing import Any

import structlog

from query_event_alert.exceptions import EventParseError
from query_event_alert.input.events import RawEvent
from query_event_alert.input.parser import EventPayloadParser

logger = structlog.get_logger(__name__)


class JsonLinesEventInput:
    """Input adapter that reads raw engine events from a JSON-lines file.

    Lines that cannot be parsed are logged and skipped.
    """

    def __init__(
        self,
        file_path: str | Path,
        parser: EventPayloadParser | None = None,
    ) -> None:
        self._file_path = Path(file_path)
        self._parser = parser or EventPayloadParser()
        self._lines: list[str] | None = None
        self._index: int = 0

    @classmethod
    def from_lines(
        cls,
        lines: list[str],
        parser: EventPayloadParser | None = None,
    ) -> "JsonLinesEventInput":
        """Create adapter from pre-loaded lines (for testing)."""
        instance = cls.__new__(cls)
        instance._file_path = Path("/dev/null")
        instance._parser = parser or EventPayloadParser()
        instance._lines = lines
        instance._index = 0
        return instance

    def __aiter__(self) -> "JsonLinesEventInput":
        return self

    async def __anext__(self) -> RawEvent:
        if self._lines is None:
            self._lines = self._read_lines()

        while self._index < len(self._lines):
            line = self._lines[self._index].strip()
            self._index += 1
            if not line:
                continue

            try:
                event = self._parse_line(line)
            except EventParseError as e:
                logger.warning("event_parse_failed", line=self._index, error=str(e))
                continue

            if event is None:
                continue
            return event

        raise StopAsyncIteration

    def _parse_line(self, line: str) -> RawEvent | None:
        try:
            payload: Any = json.loads(line)
        except json.JSONDecodeError as e:
            raise EventParseError(f"Invalid JSON: {e.msg}", line) from e

        if not isinstance(payload, dict):
            return None
        return self._parser.parse(payload)

    def _read_lines(self) -> list[str]:
        if not self._file_path.exists():
            raise FileNotFoundError(f"Event file not found: {self._file_path}")
        with open(self._file_path, encoding="utf-8") as f:
            return f.readlines()
