"""The 24-hour UTC window a report covers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ghactivity.exceptions import InvalidDateFormat

DATE_FORMAT = "%d-%m-%Y"
_DATE_RE = re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII)
_DAY = timedelta(hours=24)


@dataclass(frozen=True)
class DateWindow:
    """Half-open interval ``[start, end)``; always exactly one day long."""

    start: datetime
    end: datetime

    @classmethod
    def for_day(cls, value: str) -> DateWindow:
        """Parse a ``DD-MM-YYYY`` string into the window for that UTC day.

        Raises :class:`InvalidDateFormat` for anything else, including
        impossible dates such as ``31-02-2024`` and days whose window
        would end past ``datetime.max``.
        """
        if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
            raise InvalidDateFormat(str(value))
        try:
            day = datetime.strptime(value, DATE_FORMAT)
        except ValueError as exc:
            raise InvalidDateFormat(value, str(exc)) from exc
        start = day.replace(tzinfo=timezone.utc)
        try:
            end = start + _DAY
        except OverflowError as exc:
            raise InvalidDateFormat(value, "date out of range") from exc
        return cls(start=start, end=end)

    @property
    def search_date(self) -> str:
        """The day in GitHub search qualifier form (``YYYY-MM-DD``)."""
        return self.start.date().isoformat()
