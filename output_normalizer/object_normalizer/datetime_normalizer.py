"""ISO-8601 rendering of dates and times."""

from __future__ import annotations

import datetime
from typing import Any


class DateTimeNormalizer:
    """Normalize date, datetime and time objects to ISO-8601 strings.

    Aware datetimes always carry their UTC offset. Naive datetimes have no
    offset to render, so they come out without one unless default_tz is set,
    in which case they are treated as local to that zone.

    Args:
        timespec: Precision passed to isoformat() for datetimes and times.
        default_tz: Zone attached to naive datetimes before rendering.
    """

    def __init__(
        self, timespec: str = "seconds", default_tz: datetime.tzinfo | None = None
    ) -> None:
        self._timespec = timespec
        self._default_tz = default_tz

    def supports(self, obj: Any) -> bool:
        return isinstance(obj, (datetime.date, datetime.time))

    def normalize(self, obj: datetime.date | datetime.time) -> str:
        if isinstance(obj, datetime.datetime):
            if obj.tzinfo is None and self._default_tz is not None:
                obj = obj.replace(tzinfo=self._default_tz)
            return obj.isoformat(timespec=self._timespec)
        if isinstance(obj, datetime.time):
            return obj.isoformat(timespec=self._timespec)
        return obj.isoformat()
