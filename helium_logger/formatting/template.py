from __future__ import annotations

"""
Format-template parsing.

A template such as ``"[(%date)] [(%type)] (%msg)"`` is split into an ordered
tuple of literal and token segments once, when it is assigned, so each log call
only walks the segments.
"""

from dataclasses import dataclass
import re
from typing import Optional, Union

from loguru import logger

from .tokens import Token, lookup_token

_TOKEN_PATTERN = r"\(%\w+\)"


def _compile_token_regex(pattern: str) -> Optional[re.Pattern]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.error("Error creating helium_logger token regex {!r}: {}", pattern, exc)
        return None


_TOKEN_REGEX = _compile_token_regex(_TOKEN_PATTERN)


@dataclass(frozen=True)
class LiteralSegment:
    """
    Literal template text, copied to the output verbatim.
    """

    text: str


@dataclass(frozen=True)
class TokenSegment:
    """
    Reference to a known placeholder token.
    """

    token: Token


Segment = Union[LiteralSegment, TokenSegment]


@dataclass(frozen=True)
class FormatReport:
    """
    Result of inspecting a template for likely mistakes.

    Parameters
    ----------
    has_tokens : bool
        True when at least one ``(%name)`` sequence was found.
    unknown_tokens : tuple[str, ...]
        ``(%name)`` sequences that match no vocabulary, in template order.
    """

    has_tokens: bool
    unknown_tokens: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return self.has_tokens and not self.unknown_tokens


def parse_format(template: str) -> Optional[tuple[Segment, ...]]:
    """
    Parse a format template into its ordered segments.

    Unknown ``(%name)`` sequences and templates without any token degrade to
    literal text; parsing never fails.

    Parameters
    ----------
    template : str
        User supplied template string.

    Returns
    -------
    tuple[Segment, ...] | None
        Parsed segments, or None when the token scanner is unavailable.
    """
    if _TOKEN_REGEX is None:
        return None

    matches = list(_TOKEN_REGEX.finditer(template))
    if not matches:
        # entire format is a literal, probably a typo in the format
        return (LiteralSegment(template),)

    segments: list[Segment] = []
    loc = 0
    for match in matches:
        start, end = match.span()
        if loc < start:
            segments.append(LiteralSegment(template[loc:start]))

        text = match.group(0)
        token = lookup_token(text)
        if token is None:
            segments.append(LiteralSegment(text))
        else:
            segments.append(TokenSegment(token))
        loc = end

    if loc < len(template):
        segments.append(LiteralSegment(template[loc:]))

    return tuple(segments)


def inspect_format(template: str) -> FormatReport:
    """
    Report token problems in ``template`` without altering how it renders.

    Parameters
    ----------
    template : str
        User supplied template string.

    Returns
    -------
    FormatReport
        Whether any token syntax was found and which tokens are unknown.
    """
    if _TOKEN_REGEX is None:
        return FormatReport(has_tokens=False, unknown_tokens=())
    found = _TOKEN_REGEX.findall(template)
    unknown = tuple(text for text in found if lookup_token(text) is None)
    return FormatReport(has_tokens=bool(found), unknown_tokens=unknown)
