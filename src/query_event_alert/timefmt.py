"""Human-friendly duration and ISO-8601 instant rendering."""

from datetime import UTC, datetime, timedelta

_UNITS = (("d", 86_400), ("h", 3_600), ("m", 60))


def human(duration: timedelta) -> str:
    """Render a duration for humans, e.g. ``250ms``, ``11s``, ``1.5s``, ``2h 3m 4s``.

    Sub-second precision is only kept for durations under a minute. Negative
    durations render with a leading minus sign.
    """
    millis = round(duration.total_seconds() * 1000)
    if millis < 0:
        return "-" + human(-duration)
    if millis == 0:
        return "0s"
    if millis < 1000:
        return f"{millis}ms"
    if millis < 60_000:
        seconds, remainder = divmod(millis, 1000)
        if remainder == 0:
            return f"{seconds}s"
        return f"{seconds}.{remainder:03d}".rstrip("0") + "s"

    remaining = millis // 1000
    parts: list[str] = []
    for suffix, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count or parts:
            parts.append(f"{count}{suffix}")
    parts.append(f"{remaining}s")
    return " ".join(parts)


def to_iso(instant: datetime) -> str:
    """Render an instant as UTC ISO-8601 with a ``Z`` suffix.

    Naive datetimes are taken to already be in UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    timespec = "seconds" if instant.microsecond == 0 else "milliseconds"
    return instant.astimezone(UTC).isoformat(timespec=timespec).replace("+00:00", "Z")
