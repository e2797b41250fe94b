from __future__ import annotations

"""
Abstract logging facade.

Application code logs through ``Log``; the concrete ``Logger`` behind it is
chosen once at startup by the composition root, e.g. ``HeliumLogger.use()``.
"""

import sys
from typing import Callable, Optional, Protocol, Union

from .severity import LoggerMessageType

Message = Union[str, Callable[[], str]]


class Logger(Protocol):
    """
    Contract implemented by concrete loggers installed behind ``Log``.
    """

    def log(
        self,
        type: LoggerMessageType,
        msg: str,
        function_name: str,
        line_num: int,
        file_name: str,
    ) -> None:
        ...

    def is_logging(self, type: LoggerMessageType) -> bool:
        ...


class Log:
    """
    Process-wide logging facade.

    Every level method accepts either a string or a zero-argument callable;
    the callable is only evaluated when the active logger will output the
    level. The caller's function, line and file are captured automatically.
    """

    logger: Optional[Logger] = None

    @classmethod
    def set_logger(cls, logger: Optional[Logger]) -> None:
        cls.logger = logger

    @classmethod
    def reset(cls) -> None:
        cls.logger = None

    @classmethod
    def is_logging(cls, type: LoggerMessageType) -> bool:
        """
        Indicate whether a message of ``type`` would reach the output.

        Returns
        -------
        bool
            False when no logger is installed.
        """
        logger = cls.logger
        if logger is None:
            return False
        return logger.is_logging(type)

    @classmethod
    def _log(
        cls,
        type: LoggerMessageType,
        msg: Message,
        function_name: Optional[str],
        line_num: Optional[int],
        file_name: Optional[str],
    ) -> None:
        logger = cls.logger
        if logger is None or not logger.is_logging(type):
            return

        # _log <- level method <- caller
        frame = sys._getframe(2)
        if function_name is None:
            function_name = frame.f_code.co_name
        if line_num is None:
            line_num = frame.f_lineno
        if file_name is None:
            file_name = frame.f_code.co_filename
        del frame

        text = msg() if callable(msg) else msg
        logger.log(type, str(text), function_name, line_num, file_name)

    @classmethod
    def entry(cls, msg: Message, *, function_name: Optional[str] = None,
              line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.ENTRY, msg, function_name, line_num, file_name)

    @classmethod
    def exit(cls, msg: Message, *, function_name: Optional[str] = None,
             line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.EXIT, msg, function_name, line_num, file_name)

    @classmethod
    def debug(cls, msg: Message, *, function_name: Optional[str] = None,
              line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.DEBUG, msg, function_name, line_num, file_name)

    @classmethod
    def verbose(cls, msg: Message, *, function_name: Optional[str] = None,
                line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.VERBOSE, msg, function_name, line_num, file_name)

    @classmethod
    def info(cls, msg: Message, *, function_name: Optional[str] = None,
             line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.INFO, msg, function_name, line_num, file_name)

    @classmethod
    def warning(cls, msg: Message, *, function_name: Optional[str] = None,
                line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.WARNING, msg, function_name, line_num, file_name)

    @classmethod
    def error(cls, msg: Message, *, function_name: Optional[str] = None,
              line_num: Optional[int] = None, file_name: Optional[str] = None) -> None:
        cls._log(LoggerMessageType.ERROR, msg, function_name, line_num, file_name)
