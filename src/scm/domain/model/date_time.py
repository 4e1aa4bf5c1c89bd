"""DateTime value object.

Wraps a timezone-aware UTC ``datetime`` held at millisecond precision.
Equality compares instants; the human-readable rendering is presentation
only and never used for comparison or storage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from scm.domain.exceptions import ValidationError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _truncate_to_millis(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _parse(raw: object) -> datetime:
    """Turn any supported input into an aware UTC datetime.

    Raises ValueError/OverflowError/TypeError for bad input; the caller
    converts those into a ValidationError.
    """
    if raw is None:
        return datetime.now(timezone.utc)
    if isinstance(raw, DateTime):
        return raw.date
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, str):
        parsed = datetime.fromisoformat(raw.strip())
    elif isinstance(raw, (int, float)) and not isinstance(raw, bool):
        # milliseconds since the Unix epoch
        if not math.isfinite(raw):
            raise ValueError("timestamp must be finite")
        parsed = _EPOCH + timedelta(milliseconds=raw)
    else:
        raise TypeError(f"unsupported date type {type(raw).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class DateTime:
    """A point in time.

    Accepts a ``datetime`` (naive values are read as UTC), another DateTime,
    an ISO-8601 string, or milliseconds since the epoch. Defaults to now.

    Example::

        >>> DateTime("2023-10-05T14:48:00.000Z").to_iso_string()
        '2023-10-05T14:48:00.000Z'
    """

    date: datetime = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        try:
            parsed = _parse(self.date)
        except (ValueError, OverflowError, TypeError) as exc:
            raise ValidationError(f"Invalid date format: {self.date}") from exc
        object.__setattr__(self, "date", _truncate_to_millis(parsed))

    def to_iso_string(self) -> str:
        """Strict ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
        return self.date.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def __str__(self) -> str:
        # e.g. "October 5, 2023, 02:48 PM"
        d = self.date
        return f"{d:%B} {d.day}, {d.year}, {d:%I:%M %p}"
