from loguru import logger

from helium_logger import HeliumLogger, LoggerMessageType
from helium_logger.formatting import template
from helium_logger.formatting.template import (
    LiteralSegment,
    TokenSegment,
    inspect_format,
    parse_format,
)
from helium_logger.formatting.tokens import FormatValue, MetadataFormatValue


def test_template_without_tokens_is_single_literal():
    for template in ["plain text", "", "(msg)", "(%", "%msg)", "(% msg)"]:
        assert parse_format(template) == (LiteralSegment(template),)


def test_only_tokens_yield_only_token_segments():
    segments = parse_format("(%date)(%type)(%msg)(%label)")
    assert segments == (
        TokenSegment(FormatValue.DATE),
        TokenSegment(FormatValue.LOG_TYPE),
        TokenSegment(FormatValue.MESSAGE),
        TokenSegment(MetadataFormatValue.LABEL),
    )


def test_literals_around_and_between_tokens():
    segments = parse_format("[(%date)] [(%type)] (%msg)!")
    assert segments == (
        LiteralSegment("["),
        TokenSegment(FormatValue.DATE),
        LiteralSegment("] ["),
        TokenSegment(FormatValue.LOG_TYPE),
        LiteralSegment("] "),
        TokenSegment(FormatValue.MESSAGE),
        LiteralSegment("!"),
    )


def test_unknown_token_degrades_to_literal():
    segments = parse_format("(%type) (%nope) (%msg)")
    assert segments == (
        TokenSegment(FormatValue.LOG_TYPE),
        LiteralSegment(" "),
        LiteralSegment("(%nope)"),
        LiteralSegment(" "),
        TokenSegment(FormatValue.MESSAGE),
    )


def test_unbalanced_delimiters_stay_literal():
    segments = parse_format("((%msg) (%line")
    assert segments == (
        LiteralSegment("("),
        TokenSegment(FormatValue.MESSAGE),
        LiteralSegment(" (%line"),
    )


def test_parse_is_idempotent():
    template = "[(%file):(%line) (%func)] (%msg)"
    assert parse_format(template) == parse_format(template)


def test_inspect_format_reports_problems():
    report = inspect_format("(%type) (%nope) (%bad)")
    assert report.has_tokens
    assert report.unknown_tokens == ("(%nope)", "(%bad)")
    assert not report.ok

    assert not inspect_format("no tokens").has_tokens
    assert inspect_format("(%msg)").ok


def test_unavailable_scanner_falls_back_to_builtin_layout(monkeypatch, lines):
    monkeypatch.setattr(template, "_TOKEN_REGEX", None)
    assert parse_format("(%msg)") is None
    assert not inspect_format("(%msg)").has_tokens

    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        helium = HeliumLogger(sink=lines.append)
        helium.format = "(%msg)!"
    finally:
        logger.remove(handler_id)

    assert len(messages) == 1
    assert "built-in layout" in messages[0]
    assert "no tokens" not in messages[0]

    helium.log(LoggerMessageType.INFO, "m", "f", 1, "a.py")
    assert len(lines) == 1
    assert lines[0].startswith("[")
    assert lines[0].endswith("] [INFO] [a.py:1 f] m")


def test_scanner_compile_failure_is_reported():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR", format="{level} {message}")
    try:
        assert template._compile_token_regex("(") is None
    finally:
        logger.remove(handler_id)

    assert len(messages) == 1
    assert messages[0].startswith("ERROR ")
    assert "token regex" in messages[0]
