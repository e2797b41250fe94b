"""
Placeholder vocabulary of the format-template mini-language.

Two disjoint vocabularies exist: core tokens, always available, and
metadata-only tokens, filled in only when the logging front end supplies a
label or structured metadata (see ``helium_logger.core.sink``).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class FormatValue(Enum):
    """
    Core substitution variables, keyed by their literal spelling.
    """

    MESSAGE = "(%msg)"
    FUNCTION = "(%func)"
    LINE = "(%line)"
    FILE = "(%file)"
    LOG_TYPE = "(%type)"
    DATE = "(%date)"

    @property
    def kind(self) -> str:
        return "core"

    @classmethod
    def all(cls) -> tuple[FormatValue, ...]:
        return tuple(cls)


class MetadataFormatValue(Enum):
    """
    Substitution variables that only resolve for structured front ends.
    """

    METADATA = "(%metadata)"
    LABEL = "(%label)"

    @property
    def kind(self) -> str:
        return "metadata"

    @classmethod
    def all(cls) -> tuple[MetadataFormatValue, ...]:
        return tuple(cls)


Token = Union[FormatValue, MetadataFormatValue]

_CORE_TOKENS = {value.value: value for value in FormatValue}
_METADATA_TOKENS = {value.value: value for value in MetadataFormatValue}


def lookup_format_value(spelling: str) -> Optional[FormatValue]:
    return _CORE_TOKENS.get(spelling)


def lookup_metadata_format_value(spelling: str) -> Optional[MetadataFormatValue]:
    return _METADATA_TOKENS.get(spelling)


def lookup_token(spelling: str) -> Optional[Token]:
    """
    Resolve ``spelling`` against the core vocabulary first, then metadata.

    Parameters
    ----------
    spelling : str
        Exact token text including delimiters, e.g. ``"(%msg)"``.

    Returns
    -------
    FormatValue | MetadataFormatValue | None
        Matching token, or None when the spelling is unknown.
    """
    token = lookup_format_value(spelling)
    if token is not None:
        return token
    return lookup_metadata_format_value(spelling)
