from datetime import datetime, timezone

from helium_logger.formatting.colors import TerminalColor, colorize
from helium_logger.formatting.date_format import DateFormatter
from helium_logger.formatting.renderer import LogEvent, LoggerConfig, get_file, render_entry
from helium_logger.formatting.template import parse_format
from helium_logger.formatting.tokens import FormatValue, MetadataFormatValue

UTC_FORMATTER = DateFormatter(time_zone=timezone.utc)


def _event(**overrides) -> LogEvent:
    values = dict(
        type="ERROR",
        msg="boom",
        function_name="run()",
        line_num=42,
        file_name="/x/y/Main.py",
        color=TerminalColor.RED,
    )
    values.update(overrides)
    return LogEvent(**values)


def test_get_file_trims_to_last_separator():
    assert get_file("/a/b/c.ext") == "c.ext"
    assert get_file("/a/b/c.ext", full_file_path=True) == "/a/b/c.ext"
    assert get_file("c.ext") == "c.ext"
    assert get_file("c.ext", full_file_path=True) == "c.ext"
    assert get_file("dir/") == ""


def test_default_layout(fixed_now):
    line = render_entry(None, _event(), LoggerConfig(), UTC_FORMATTER, fixed_now)
    assert line == "[2024-03-05T14:07:09.123Z] [ERROR] [Main.py:42 run()] boom"


def test_default_layout_with_label_and_metadata(fixed_now):
    event = _event(label="api", metadata="rid=7")
    line = render_entry(None, event, LoggerConfig(), UTC_FORMATTER, fixed_now)
    assert line == "[2024-03-05T14:07:09.123Z] [api] [ERROR] [rid=7] [Main.py:42 run()] boom"

    config = LoggerConfig(include_label=False, include_metadata=False, details=False)
    line = render_entry(None, event, config, UTC_FORMATTER, fixed_now)
    assert line == "[2024-03-05T14:07:09.123Z] [ERROR] boom"


def test_default_layout_full_file_path(fixed_now):
    config = LoggerConfig(full_file_path=True)
    line = render_entry(None, _event(), config, UTC_FORMATTER, fixed_now)
    assert "[/x/y/Main.py:42 run()]" in line


def test_custom_template_scenario(fixed_now):
    event = _event(type="WARNING", msg="low disk", color=TerminalColor.YELLOW)
    segments = parse_format("(%type): (%msg)")
    assert render_entry(segments, event, LoggerConfig(), UTC_FORMATTER, fixed_now) == "WARNING: low disk"


def test_every_token_round_trips(fixed_now):
    tokens = list(FormatValue.all()) + list(MetadataFormatValue.all())
    template = "|".join(token.value for token in tokens)
    event = _event(label="lbl", metadata="k=v")
    line = render_entry(parse_format(template), event, LoggerConfig(), UTC_FORMATTER, fixed_now)
    assert line == "|".join(
        ["boom", "run()", "42", "Main.py", "ERROR", "2024-03-05T14:07:09.123Z", "k=v", "lbl"]
    )


def test_missing_metadata_tokens_render_empty(fixed_now):
    segments = parse_format("<(%label)><(%metadata)>(%msg)")
    assert render_entry(segments, _event(), LoggerConfig(), UTC_FORMATTER, fixed_now) == "<><>boom"


def test_render_is_deterministic(fixed_now):
    segments = parse_format("[(%date)] (%file):(%line) (%msg)")
    first = render_entry(segments, _event(), LoggerConfig(), UTC_FORMATTER, fixed_now)
    second = render_entry(segments, _event(), LoggerConfig(), UTC_FORMATTER, fixed_now)
    assert first == second == "[2024-03-05T14:07:09.123Z] Main.py:42 boom"


def test_color_wrapping_for_both_layouts(fixed_now):
    config = LoggerConfig(colored=True)
    segments = parse_format("(%msg)")
    for segs in (None, segments):
        line = render_entry(segs, _event(), config, UTC_FORMATTER, fixed_now)
        assert line.startswith(TerminalColor.RED.value)
        assert line.endswith(TerminalColor.FOREGROUND.value)

    plain = render_entry(segments, _event(), LoggerConfig(), UTC_FORMATTER, fixed_now)
    assert plain == "boom"
    assert "\x1b" not in plain


def test_colorize_disabled_returns_line():
    assert colorize("x", TerminalColor.RED, colored=False) == "x"
    assert colorize("x", TerminalColor.GREY) == "\x1b[0;30;1mx\x1b[0;39m"


def test_render_without_fixed_time_uses_now():
    segments = parse_format("(%date)")
    formatter = DateFormatter("yyyy", timezone.utc)
    line = render_entry(segments, _event(), LoggerConfig(), formatter)
    assert line == str(datetime.now(timezone.utc).year)
