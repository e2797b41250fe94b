"""
helium_logger package.

A console logger for the ``Log`` facade with colorized output and
user-defined line templates::

    from helium_logger import HeliumLogger, Log, LoggerMessageType

    helium = HeliumLogger.use(LoggerMessageType.INFO)
    helium.format = "[(%date)] [(%type)] (%msg)"
    Log.info("service started")
"""

from .core import (
    HeliumLogger,
    HeliumLoggerError,
    HeliumLogHandler,
    InvalidTimeZoneError,
    Log,
    Logger,
    LoggerMessageType,
    UnknownLogLevelError,
    init_logger,
    use_loguru,
)
from .formatting import (
    DateFormatter,
    FormatValue,
    LoggerConfig,
    MetadataFormatValue,
    TerminalColor,
    parse_format,
)

__all__ = [
    "core",
    "formatting",
    "HeliumLogger",
    "HeliumLoggerError",
    "HeliumLogHandler",
    "InvalidTimeZoneError",
    "Log",
    "Logger",
    "LoggerMessageType",
    "UnknownLogLevelError",
    "init_logger",
    "use_loguru",
    "DateFormatter",
    "FormatValue",
    "LoggerConfig",
    "MetadataFormatValue",
    "TerminalColor",
    "parse_format",
]
