from tailspin.highlighters.quotes import QuoteHighlighter
from tailspin.line_info import LineInfo
from tailspin.theme import Color, Style


def test_highlight_quotes_with_ansi():
    highlighter = QuoteHighlighter(Style(fg=Color.YELLOW), '"')
    result = highlighter.apply("outside \"hello \x1b[34;42;3m42\x1b[0m world\" outside")
    expected = "outside \x1b[33m\"hello \x1b[34;42;3m42\x1b[0m\x1b[33m world\"\x1b[0m outside"
    assert result == expected


def test_highlight_quotes_without_ansi():
    highlighter = QuoteHighlighter(Style(fg=Color.RED), '"')
    result = highlighter.apply("outside \"hello \x1b[34;42;3m42\x1b[0m world\" outside")
    expected = "outside \x1b[31m\"hello \x1b[34;42;3m42\x1b[0m\x1b[31m world\"\x1b[0m outside"
    assert result == expected


def test_do_nothing_on_uneven_number_of_quotes():
    highlighter = QuoteHighlighter(Style(fg=Color.YELLOW), '"')
    assert highlighter.should_short_circuit(LineInfo(double_quotes=1)) is True


def test_short_circuit_without_quotes_and_with_pairs():
    highlighter = QuoteHighlighter(Style(fg=Color.YELLOW), '"')
    assert highlighter.should_short_circuit(LineInfo(double_quotes=0)) is True
    assert highlighter.should_short_circuit(LineInfo(double_quotes=2)) is False


def test_plain_quoted_text():
    highlighter = QuoteHighlighter(Style(fg=Color.YELLOW), '"')
    assert highlighter.apply('say "hi" now') == 'say \x1b[33m"hi"\x1b[0m now'


def test_custom_quote_token():
    highlighter = QuoteHighlighter(Style(fg=Color.YELLOW), "'")
    assert highlighter.apply("a 'b' c") == "a \x1b[33m'b'\x1b[0m c"


def test_applies_over_existing_highlighting():
    highlighter = QuoteHighlighter(Style(fg=Color.YELLOW), '"')
    assert highlighter.only_apply_to_segments_not_already_highlighted() is False