"""
Log entry rendering.

Turns one log event into its final text line, either through a parsed custom
template or through the built-in layout
``[date] [label] [type] [metadata] [file:line function] message``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional, Sequence, Union

from .colors import TerminalColor, colorize
from .date_format import DateFormatter
from .template import LiteralSegment, Segment
from .tokens import FormatValue, MetadataFormatValue


@dataclass(frozen=True)
class LoggerConfig:
    """
    Rendering options of a ``HeliumLogger``.

    Parameters
    ----------
    colored : bool
        Wrap lines in the severity color, by default False.
    details : bool
        Add ``[file:line function]`` to the built-in layout, by default True.
    include_metadata : bool
        Add ``[metadata]`` to the built-in layout when present, by default True.
    include_label : bool
        Add ``[label]`` to the built-in layout when present, by default True.
    full_file_path : bool
        Keep the whole source path instead of the file name, by default False.
    format : str | None
        Custom template, by default None (built-in layout).
    date_format : str | None
        LDML date pattern, by default None (ISO-8601).
    time_zone : str | tzinfo | None
        Time zone for dates, by default None (system local time).
    """

    colored: bool = False
    details: bool = True
    include_metadata: bool = True
    include_label: bool = True
    full_file_path: bool = False
    format: Optional[str] = None
    date_format: Optional[str] = None
    time_zone: Union[str, tzinfo, None] = None


@dataclass(frozen=True)
class LogEvent:
    """
    Values of a single log call.
    """

    type: str
    msg: str
    function_name: str
    line_num: int
    file_name: str
    label: Optional[str] = None
    metadata: Optional[str] = None
    color: TerminalColor = TerminalColor.FOREGROUND


def get_file(path: str, full_file_path: bool = False) -> str:
    """
    Return the file name part of ``path`` unless the full path is wanted.

    Parameters
    ----------
    path : str
        Source file path as reported by the caller.
    full_file_path : bool, optional
        Return ``path`` unchanged, by default False.

    Returns
    -------
    str
        Text after the last ``/``, or ``path`` itself.
    """
    if full_file_path:
        return path
    index = path.rfind("/")
    if index < 0:
        return path
    return path[index + 1:]


def _resolve_segment(
    segment: Segment,
    event: LogEvent,
    config: LoggerConfig,
    date_formatter: DateFormatter,
    now: Optional[datetime],
) -> str:
    if isinstance(segment, LiteralSegment):
        return segment.text

    token = segment.token
    if token is FormatValue.DATE:
        return date_formatter.format(now)
    if token is FormatValue.LOG_TYPE:
        return event.type
    if token is FormatValue.FILE:
        return get_file(event.file_name, config.full_file_path)
    if token is FormatValue.LINE:
        return str(event.line_num)
    if token is FormatValue.FUNCTION:
        return event.function_name
    if token is FormatValue.MESSAGE:
        return event.msg
    if token is MetadataFormatValue.METADATA:
        return event.metadata or ""
    if token is MetadataFormatValue.LABEL:
        return event.label or ""
    return ""


def _default_layout(
    event: LogEvent,
    config: LoggerConfig,
    date_formatter: DateFormatter,
    now: Optional[datetime],
) -> str:
    pieces = [f"[{date_formatter.format(now)}]"]

    if config.include_label and event.label is not None:
        pieces.append(f"[{event.label}]")

    pieces.append(f"[{event.type}]")

    if config.include_metadata and event.metadata is not None:
        pieces.append(f"[{event.metadata}]")

    if config.details:
        file_name = get_file(event.file_name, config.full_file_path)
        pieces.append(f"[{file_name}:{event.line_num} {event.function_name}]")

    pieces.append(event.msg)
    return " ".join(pieces)


def render_entry(
    segments: Optional[Sequence[Segment]],
    event: LogEvent,
    config: LoggerConfig,
    date_formatter: DateFormatter,
    now: Optional[datetime] = None,
) -> str:
    """
    Render ``event`` into its final, optionally colorized, line.

    Parameters
    ----------
    segments : Sequence[Segment] | None
        Parsed custom template, or None for the built-in layout.
    event : LogEvent
        Values of the current log call.
    config : LoggerConfig
        Rendering options.
    date_formatter : DateFormatter
        Formatter matching ``config.date_format`` and ``config.time_zone``.
    now : datetime | None, optional
        Fixed timestamp, by default the current time.

    Returns
    -------
    str
        Rendered line.
    """
    if now is None:
        now = datetime.now().astimezone()

    if segments is not None:
        line = "".join(
            _resolve_segment(segment, event, config, date_formatter, now)
            for segment in segments
        )
    else:
        line = _default_layout(event, config, date_formatter, now)

    return colorize(line, event.color, config.colored)
