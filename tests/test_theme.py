import pytest

from tailspin.theme import (
    RESET,
    Color,
    Style,
    Theme,
    boolean_keywords,
    rest_keywords,
    severity_keywords,
)


def test_boolean_keyword_style_paints_null():
    (keyword,) = boolean_keywords()
    assert keyword.style.paint("null") == "\x1b[3;31mnull\x1b[0m"


def test_foreground_prefixes_match_known_codes():
    assert Style(fg=Color.YELLOW).prefix() == "\x1b[33m"
    assert Style(fg=Color.RED).prefix() == "\x1b[31m"


def test_plain_style_leaves_text_unchanged():
    style = Style()
    assert style.paint("hello") == "hello"
    assert style.prefix() == ""
    assert style.is_plain


@pytest.mark.parametrize(
    "style",
    [
        Style(fg=Color.BLUE),
        Style(bold=True),
        Style(fg=Color.BLACK, bg=Color.RED),
        Style(fg=Color.DEFAULT, dimmed=True, underline=True),
    ],
)
def test_paint_wraps_with_prefix_and_reset(style):
    text = "word"
    assert style.paint(text) == style.prefix() + text + RESET
    assert not style.is_plain


def test_attributes_come_before_colours():
    assert Style(fg=Color.DEFAULT, dimmed=True).prefix() == "\x1b[2;39m"


@pytest.mark.parametrize(
    ("color", "expected"),
    [
        (Color.RED, "\x1b[41m"),
        (Color.GREEN, "\x1b[42m"),
        (Color.YELLOW, "\x1b[43m"),
        (Color.MAGENTA, "\x1b[45m"),
    ],
)
def test_background_prefix_uses_background_codes(color, expected):
    assert Style(bg=color).prefix() == expected


def test_severity_keywords_words():
    words = [w for k in severity_keywords() for w in k.words]
    assert words == ["ERROR", "WARN", "WARNING", "INFO", "DEBUG", "SUCCESS", "TRACE"]
    assert not any(k.border for k in severity_keywords())


def test_rest_keywords_have_border_and_black_text():
    keywords = rest_keywords()
    assert [w for k in keywords for w in k.words] == ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
    assert all(k.border and k.style.fg is Color.BLACK for k in keywords)


def test_default_theme_tokens_and_styles():
    theme = Theme()
    assert theme.quotes.token == '"'
    assert theme.pointer.separator_token == "•"
    assert theme.number.style == Style(fg=Color.CYAN)
    assert theme.quotes.style == Style(fg=Color.YELLOW)
    assert theme.keywords == [] and theme.regexps == []


def test_default_theme_sections_are_enabled():
    theme = Theme()
    sections = [
        theme.date, theme.date_word, theme.ip, theme.key_value, theme.number,
        theme.path, theme.pointer, theme.process, theme.quotes, theme.time,
        theme.url, theme.uuid,
    ]
    assert not any(section.disabled for section in sections)


def test_themes_do_not_share_keyword_lists():
    first, second = Theme(), Theme()
    first.keywords.extend(boolean_keywords())
    assert second.keywords == []