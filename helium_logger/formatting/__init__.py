"""
Format-template engine: token vocabulary, template parsing and rendering.
"""

from .colors import TerminalColor, colorize
from .date_format import DEFAULT_DATE_FORMAT, DateFormatter, resolve_time_zone
from .renderer import LogEvent, LoggerConfig, get_file, render_entry
from .template import FormatReport, LiteralSegment, Segment, TokenSegment, inspect_format, parse_format
from .tokens import (
    FormatValue,
    MetadataFormatValue,
    Token,
    lookup_format_value,
    lookup_metadata_format_value,
    lookup_token,
)

__all__ = [
    "TerminalColor",
    "colorize",
    "DEFAULT_DATE_FORMAT",
    "DateFormatter",
    "resolve_time_zone",
    "LogEvent",
    "LoggerConfig",
    "get_file",
    "render_entry",
    "FormatReport",
    "LiteralSegment",
    "Segment",
    "TokenSegment",
    "inspect_format",
    "parse_format",
    "FormatValue",
    "MetadataFormatValue",
    "Token",
    "lookup_format_value",
    "lookup_metadata_format_value",
    "lookup_token",
]
