from __future__ import annotations

"""
Date formatting with LDML (ICU) style patterns.

Log timestamps are configured with patterns such as
``"yyyy-MM-dd'T'HH:mm:ss.SSSZZZZZ"``. A pattern is compiled once into literal
runs and field specs; formatting a timestamp only walks that list.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import InvalidTimeZoneError

DEFAULT_DATE_FORMAT = "yyyy-MM-dd'T'HH:mm:ss.SSSZZZZZ"

_FIELD_LETTERS = frozenset("yMdDEahHkKmsSZz")


@dataclass(frozen=True)
class _Field:
    letter: str
    count: int


def resolve_time_zone(value: Union[str, tzinfo, None]) -> Optional[tzinfo]:
    """
    Normalize a time zone setting into a ``tzinfo``.

    Parameters
    ----------
    value : str | tzinfo | None
        IANA zone name, ready ``tzinfo`` or None for system local time.

    Returns
    -------
    tzinfo | None
        Resolved zone, None meaning system local time.

    Raises
    ------
    InvalidTimeZoneError
        If ``value`` is a string that names no known zone.
    """
    if value is None or isinstance(value, tzinfo):
        return value
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimeZoneError(f'Unknown time zone "{value}".') from exc


def _compile_pattern(pattern: str) -> tuple[Union[str, _Field], ...]:
    parts: list[Union[str, _Field]] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            i += 1
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    break
                literal.append(pattern[i])
                i += 1
            i += 1  # closing quote
            continue
        if ch in _FIELD_LETTERS:
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            if literal:
                parts.append("".join(literal))
                literal = []
            parts.append(_Field(ch, j - i))
            i = j
            continue
        literal.append(ch)
        i += 1
    if literal:
        parts.append("".join(literal))
    return tuple(parts)


def _format_offset(offset: Optional[timedelta], count: int) -> str:
    seconds = int(offset.total_seconds()) if offset is not None else 0
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    if count <= 3:
        return f"{sign}{hours:02d}{minutes:02d}"
    if count == 4:
        if seconds == 0:
            return "GMT"
        return f"GMT{sign}{hours:02d}:{minutes:02d}"
    if seconds == 0:
        return "Z"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _format_field(field: _Field, date: datetime) -> str:
    letter, count = field.letter, field.count
    if letter == "y":
        if count == 2:
            return f"{date.year % 100:02d}"
        return str(date.year).zfill(count)
    if letter == "M":
        if count == 3:
            return date.strftime("%b")
        if count >= 4:
            return date.strftime("%B")
        return str(date.month).zfill(count)
    if letter == "d":
        return str(date.day).zfill(count)
    if letter == "D":
        return str(date.timetuple().tm_yday).zfill(count)
    if letter == "E":
        return date.strftime("%A" if count >= 4 else "%a")
    if letter == "a":
        return "AM" if date.hour < 12 else "PM"
    if letter == "h":
        return str(date.hour % 12 or 12).zfill(count)
    if letter == "H":
        return str(date.hour).zfill(count)
    if letter == "k":
        return str(date.hour or 24).zfill(count)
    if letter == "K":
        return str(date.hour % 12).zfill(count)
    if letter == "m":
        return str(date.minute).zfill(count)
    if letter == "s":
        return str(date.second).zfill(count)
    if letter == "S":
        # fractional seconds are truncated, not rounded
        return f"{date.microsecond:06d}".ljust(count, "0")[:count]
    if letter == "Z":
        return _format_offset(date.utcoffset(), count)
    return date.tzname() or ""


class DateFormatter:
    """
    Formatter for a single date pattern and time zone pair.

    Parameters
    ----------
    date_format : str | None, optional
        LDML pattern, by default ``DEFAULT_DATE_FORMAT``.
    time_zone : str | tzinfo | None, optional
        Zone to render timestamps in, by default system local time.
    """

    def __init__(
        self,
        date_format: Optional[str] = None,
        time_zone: Union[str, tzinfo, None] = None,
    ) -> None:
        self.date_format = date_format if date_format is not None else DEFAULT_DATE_FORMAT
        self.time_zone = resolve_time_zone(time_zone)
        self._parts = _compile_pattern(self.date_format)

    def format(self, date: Optional[datetime] = None) -> str:
        """
        Format ``date`` (defaults to now) with the configured pattern.

        Naive datetimes are taken as local time. Aware datetimes keep their
        own offset unless a time zone is configured.

        Parameters
        ----------
        date : datetime | None, optional
            Timestamp to format, by default the current time.

        Returns
        -------
        str
            Formatted timestamp.
        """
        if date is None:
            date = datetime.now(self.time_zone)
            if self.time_zone is None:
                date = date.astimezone()
        elif self.time_zone is not None:
            date = date.astimezone(self.time_zone)
        elif date.tzinfo is None:
            date = date.astimezone()

        return "".join(
            part if isinstance(part, str) else _format_field(part, date)
            for part in self._parts
        )
