from __future__ import annotations

"""
Console logger implementing the ``Log`` facade contract.
"""

from dataclasses import dataclass, replace
from datetime import datetime
import sys
import threading
from typing import Any, Callable, Optional, Union

from loguru import logger

from ..formatting.date_format import DEFAULT_DATE_FORMAT, DateFormatter
from ..formatting.renderer import LogEvent, LoggerConfig, get_file, render_entry
from ..formatting.template import Segment, inspect_format, parse_format
from .api import Log
from .severity import LoggerMessageType, should_log


@dataclass(frozen=True)
class _RenderState:
    config: LoggerConfig
    segments: Optional[tuple[Segment, ...]]
    date_formatter: DateFormatter


def _parse_template(template: Optional[str]) -> Optional[tuple[Segment, ...]]:
    if template is None:
        return None
    segments = parse_format(template)
    if segments is None:
        logger.warning(
            "Token scanner unavailable, log format {!r} ignored in favor of the built-in layout.",
            template,
        )
        return None
    report = inspect_format(template)
    if not report.has_tokens:
        logger.warning("Log format {!r} contains no tokens and will be printed verbatim.", template)
    for text in report.unknown_tokens:
        logger.warning("Unknown token {} in log format {!r}, printed as literal text.", text, template)
    return segments


def _config_property(name: str, doc: str) -> property:
    def getter(self: HeliumLogger) -> Any:
        return getattr(self._state.config, name)

    def setter(self: HeliumLogger, value: Any) -> None:
        self.configure(**{name: value})

    return property(getter, setter, doc=doc)


class HeliumLogger:
    """
    Lightweight console logger with optional colors and custom templates.

    Parameters
    ----------
    type : LoggerMessageType | str, optional
        The most detailed message type to output, by default ``VERBOSE``.
        Messages of this type and every more severe type are printed.
    sink : Callable[[str], None] | None, optional
        Line writer, by default ``print``.
    config : LoggerConfig | None, optional
        Initial rendering options, by default ``LoggerConfig()``.

    Notes
    -----
    Configuration writes replace the whole render state under a lock; log
    calls read that state once and never lock, so a render never observes a
    half-updated template or date formatter.

    Examples
    --------
    >>> helium = HeliumLogger.use(LoggerMessageType.WARNING)
    >>> helium.format = "[(%date)] [(%type)] (%msg)"
    >>> Log.warning("disk almost full")
    """

    default_date_format = DEFAULT_DATE_FORMAT

    colored = _config_property("colored", "Colorize output lines by severity.")
    details = _config_property(
        "details", "Add ``[file:line function]`` when no custom format is set."
    )
    include_metadata = _config_property(
        "include_metadata", "Add ``[metadata]`` when no custom format is set."
    )
    include_label = _config_property(
        "include_label", "Add ``[label]`` when no custom format is set."
    )
    full_file_path = _config_property(
        "full_file_path", "Print the full source path instead of the file name."
    )
    format = _config_property(
        "format",
        'Custom template, e.g. "[(%date)] [(%label)] [(%type)] [(%file):(%line) (%func)] (%msg)".',
    )
    date_format = _config_property(
        "date_format", "LDML date pattern, None for ``default_date_format``."
    )
    time_zone = _config_property(
        "time_zone", "Time zone name or tzinfo for dates, None for local time."
    )

    def __init__(
        self,
        type: Union[LoggerMessageType, str] = LoggerMessageType.VERBOSE,
        *,
        sink: Optional[Callable[[str], None]] = None,
        config: Optional[LoggerConfig] = None,
    ) -> None:
        if isinstance(type, str):
            type = LoggerMessageType.from_name(type)
        self._type = type
        self._sink = sink if sink is not None else print
        self._lock = threading.RLock()
        self._state = self._build_state(config if config is not None else LoggerConfig(), None)

    @classmethod
    def use(
        cls,
        type: Union[LoggerMessageType, str] = LoggerMessageType.VERBOSE,
        *,
        sink: Optional[Callable[[str], None]] = None,
    ) -> HeliumLogger:
        """
        Create a logger and install it as the active ``Log.logger``.

        Standard output is switched to write-through so lines appear
        immediately.

        Parameters
        ----------
        type : LoggerMessageType | str, optional
            The most detailed message type to output, by default ``VERBOSE``.
        sink : Callable[[str], None] | None, optional
            Line writer, by default ``print``.

        Returns
        -------
        HeliumLogger
            The installed logger, for the caller to keep and configure.
        """
        helium = cls(type, sink=sink)
        Log.set_logger(helium)
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if callable(reconfigure):
            reconfigure(write_through=True)
        return helium

    @property
    def type(self) -> LoggerMessageType:
        return self._type

    @property
    def config(self) -> LoggerConfig:
        return self._state.config

    def configure(self, **changes: Any) -> LoggerConfig:
        """
        Replace several configuration fields at once.

        Parameters
        ----------
        **changes : Any
            ``LoggerConfig`` field names and their new values.

        Returns
        -------
        LoggerConfig
            The configuration now in effect.

        Raises
        ------
        TypeError
            If a field name is unknown.
        InvalidTimeZoneError
            If ``time_zone`` names no known zone.
        """
        with self._lock:
            config = replace(self._state.config, **changes)
            self._state = self._build_state(config, self._state)
            return config

    @staticmethod
    def _build_state(config: LoggerConfig, previous: Optional[_RenderState]) -> _RenderState:
        if previous is not None and previous.config.format == config.format:
            segments = previous.segments
        else:
            segments = _parse_template(config.format)

        if (
            previous is not None
            and previous.config.date_format == config.date_format
            and previous.config.time_zone == config.time_zone
        ):
            date_formatter = previous.date_formatter
        else:
            date_formatter = DateFormatter(config.date_format, config.time_zone)

        return _RenderState(config=config, segments=segments, date_formatter=date_formatter)

    def do_print(self, message: str) -> None:
        self._sink(message)

    def is_logging(self, type: LoggerMessageType) -> bool:
        """
        Indicate whether messages of ``type`` pass this logger's threshold.

        Examples
        --------
        >>> helium = HeliumLogger(LoggerMessageType.WARNING)
        >>> helium.is_logging(LoggerMessageType.ERROR)
        True
        >>> helium.is_logging(LoggerMessageType.VERBOSE)
        False
        """
        return should_log(type, self._type)

    def log(
        self,
        type: LoggerMessageType,
        msg: str,
        function_name: str,
        line_num: int,
        file_name: str,
    ) -> None:
        """
        Output a logged message.

        Parameters
        ----------
        type : LoggerMessageType
            Type of the message being logged.
        msg : str
            Message text.
        function_name : str
            Name of the function invoking the logger.
        line_num : int
            Source line of the call.
        file_name : str
            Source file of the call.
        """
        if not self.is_logging(type):
            return
        line = self.format_entry(type, msg, function_name, line_num, file_name)
        try:
            self.do_print(line)
        except Exception as exc:
            logger.opt(exception=exc).error("Failed to write log line: {}", exc)

    def format_entry(
        self,
        type: LoggerMessageType,
        msg: str,
        function_name: str,
        line_num: int,
        file_name: str,
        now: Optional[datetime] = None,
    ) -> str:
        event = LogEvent(
            type=str(type),
            msg=msg,
            function_name=function_name,
            line_num=line_num,
            file_name=file_name,
            color=type.color,
        )
        return self.format_event(event, now)

    def format_event(self, event: LogEvent, now: Optional[datetime] = None) -> str:
        state = self._state
        return render_entry(state.segments, event, state.config, state.date_formatter, now)

    def format_date(self, now: Optional[datetime] = None) -> str:
        return self._state.date_formatter.format(now)

    def get_file(self, path: str) -> str:
        return get_file(path, self._state.config.full_file_path)
