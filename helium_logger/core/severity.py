"""
Severity ranking shared by the ``Log`` facade and its loggers.
"""

from __future__ import annotations

from enum import Enum

from ..formatting.colors import TerminalColor
from .exceptions import UnknownLogLevelError


class LoggerMessageType(Enum):
    """
    Log levels, ranked from the most detailed (``ENTRY``) to the most
    severe (``ERROR``).
    """

    ENTRY = 1
    EXIT = 2
    DEBUG = 3
    VERBOSE = 4
    INFO = 5
    WARNING = 6
    ERROR = 7

    def __str__(self) -> str:
        return self.name

    @property
    def rank(self) -> int:
        return self.value

    @property
    def color(self) -> TerminalColor:
        if self is LoggerMessageType.WARNING:
            return TerminalColor.YELLOW
        if self is LoggerMessageType.ERROR:
            return TerminalColor.RED
        if self is LoggerMessageType.DEBUG:
            return TerminalColor.GREY
        return TerminalColor.FOREGROUND

    @classmethod
    def from_name(cls, name: str) -> LoggerMessageType:
        """
        Resolve a level name such as ``"warning"`` case-insensitively.

        Parameters
        ----------
        name : str
            Level name.

        Returns
        -------
        LoggerMessageType
            Matching level.

        Raises
        ------
        UnknownLogLevelError
            If the name is not a known level.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            available = ", ".join(level.name for level in cls)
            raise UnknownLogLevelError(
                f'Unknown log level "{name}". Available: {available}'
            ) from None


def should_log(event_type: LoggerMessageType, threshold: LoggerMessageType) -> bool:
    """
    Return True when ``event_type`` is at least as severe as ``threshold``.
    """
    return event_type.rank >= threshold.rank
