"""
Logging contract, console logger and loguru bridge.

``exceptions`` is imported first: the formatting package depends on it.
"""

from .exceptions import (
    HeliumLoggerError,
    InvalidTimeZoneError,
    UnknownLogLevelError,
)
from .severity import LoggerMessageType, should_log
from .api import Log, Logger
from .logger import HeliumLogger
from .sink import HeliumLogHandler, use_loguru
from .logging import init_logger

__all__ = [
    "HeliumLoggerError",
    "InvalidTimeZoneError",
    "UnknownLogLevelError",
    "LoggerMessageType",
    "should_log",
    "Log",
    "Logger",
    "HeliumLogger",
    "HeliumLogHandler",
    "use_loguru",
    "init_logger",
]
