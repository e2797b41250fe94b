from __future__ import annotations

"""
Loguru bridge.

Lets loguru records be printed by a ``HeliumLogger``. This is the front end
that supplies the label and structured metadata read by the ``(%label)`` and
``(%metadata)`` tokens.
"""

from typing import Any, Optional, Union

from loguru import logger

from ..formatting.colors import TerminalColor
from ..formatting.renderer import LogEvent
from .logger import HeliumLogger
from .severity import LoggerMessageType

_TRACE_LEVEL_NO = 5
_DEBUG_LEVEL_NO = 10
_SUCCESS_LEVEL_NO = 25
_WARNING_LEVEL_NO = 30
_ERROR_LEVEL_NO = 40


def level_color(level_no: int) -> TerminalColor:
    """
    Map a loguru level number onto the terminal color of its severity.
    """
    if level_no >= _ERROR_LEVEL_NO:
        return TerminalColor.RED
    if level_no >= _WARNING_LEVEL_NO:
        return TerminalColor.YELLOW
    if level_no <= _DEBUG_LEVEL_NO:
        return TerminalColor.GREY
    return TerminalColor.FOREGROUND


def message_type(level_no: int) -> LoggerMessageType:
    """
    Map a loguru level number onto the ``LoggerMessageType`` ranking.

    Parameters
    ----------
    level_no : int
        Loguru level number, custom levels included.

    Returns
    -------
    LoggerMessageType
        Level used against the ``HeliumLogger`` threshold.
    """
    if level_no <= _TRACE_LEVEL_NO:
        return LoggerMessageType.ENTRY
    if level_no <= _DEBUG_LEVEL_NO:
        return LoggerMessageType.DEBUG
    if level_no <= _SUCCESS_LEVEL_NO:
        return LoggerMessageType.INFO
    if level_no <= _WARNING_LEVEL_NO:
        return LoggerMessageType.WARNING
    return LoggerMessageType.ERROR


def format_metadata(metadata: dict[str, Any]) -> Optional[str]:
    """
    Render metadata as space separated ``key=value`` pairs sorted by key.

    Returns
    -------
    str | None
        Rendered pairs, or None when ``metadata`` is empty.
    """
    if not metadata:
        return None
    return " ".join(f"{key}={metadata[key]}" for key in sorted(metadata))


class HeliumLogHandler:
    """
    Loguru sink printing records through a ``HeliumLogger``.

    Parameters
    ----------
    helium : HeliumLogger
        Logger whose configuration and output sink are used.
    label : str | None, optional
        Label for every record, by default the record's module name.
    metadata : dict[str, Any] | None, optional
        Handler-level metadata, merged under each record's ``extra``.
    """

    def __init__(
        self,
        helium: HeliumLogger,
        *,
        label: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> None:
        self.helium = helium
        self.label = label
        self.metadata = dict(metadata or {})

    def __getitem__(self, key: str) -> Any:
        return self.metadata[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.metadata[key] = value

    def to_event(self, record: dict[str, Any]) -> LogEvent:
        metadata = {**self.metadata, **record["extra"]}
        level = record["level"]
        return LogEvent(
            type=level.name,
            msg=record["message"],
            function_name=record["function"],
            line_num=record["line"],
            file_name=record["file"].path,
            label=self.label if self.label is not None else record["name"],
            metadata=format_metadata(metadata),
            color=level_color(level.no),
        )

    def __call__(self, message: Any) -> None:
        record = message.record
        if not self.helium.is_logging(message_type(record["level"].no)):
            return
        self.helium.do_print(self.helium.format_event(self.to_event(record), record["time"]))


def use_loguru(
    helium: HeliumLogger,
    *,
    level: Union[str, int] = "TRACE",
    label: Optional[str] = None,
    metadata: Optional[dict[str, Any]] = None,
) -> int:
    """
    Register a ``HeliumLogHandler`` with loguru.

    Parameters
    ----------
    helium : HeliumLogger
        Logger that renders and prints the records.
    level : str | int, optional
        Minimum loguru level for the handler, by default ``"TRACE"``.
    label : str | None, optional
        Fixed label, by default each record's module name.
    metadata : dict[str, Any] | None, optional
        Handler-level metadata.

    Returns
    -------
    int
        Loguru handler id, usable with ``logger.remove``.
    """
    handler = HeliumLogHandler(helium, label=label, metadata=metadata)
    return logger.add(handler, level=level, format="{message}", colorize=False, catch=True)
