"""
Exception types raised by helium_logger configuration APIs.

Rendering never raises; these only surface when a caller hands the logger a
value it cannot interpret (an unknown level name or time zone).
"""


class HeliumLoggerError(Exception):
    pass


class UnknownLogLevelError(HeliumLoggerError, KeyError):
    pass


class InvalidTimeZoneError(HeliumLoggerError, ValueError):
    pass


__all__ = [
    "HeliumLoggerError",
    "UnknownLogLevelError",
    "InvalidTimeZoneError",
]
