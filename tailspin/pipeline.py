"""Assembling the highlighters from a theme and running them over lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from tailspin.cli import Cli
from tailspin.highlight_utils import apply_without_overwriting_existing_highlighting
from tailspin.highlighters.dates import DateDashHighlighter, DateSlashHighlighter, DateWordHighlighter
from tailspin.highlighters.network import Ipv4Highlighter, Ipv6Highlighter, UrlHighlighter
from tailspin.highlighters.quotes import QuoteHighlighter
from tailspin.highlighters.structured import (
    PathHighlighter,
    PointerHighlighter,
    ProcessHighlighter,
    TimeHighlighter,
    UuidHighlighter,
)
from tailspin.highlighters.text import (
    KeyValueHighlighter,
    KeywordHighlighter,
    NumberHighlighter,
    RegexpHighlighter,
)
from tailspin.keywords import consolidate_keywords, extract_all_keywords
from tailspin.line_info import LineInfo
from tailspin.theme import Keyword, Theme, boolean_keywords, rest_keywords, severity_keywords
from tailspin.types import Highlighter


@dataclass
class Highlighters:
    """Highlighters run in three stages: before, main and after."""

    before: list[Highlighter] = field(default_factory=list)
    main: list[Highlighter] = field(default_factory=list)
    after: list[Highlighter] = field(default_factory=list)

    @property
    def stages(self) -> tuple[list[Highlighter], ...]:
        return (self.before, self.main, self.after)


def collect_keywords(theme: Theme, cli: Cli) -> list[Keyword]:
    """Combine theme, built-in and command line keywords into consolidated groups."""
    keywords = list(theme.keywords)

    if not cli.disable_keyword_builtins:
        if not cli.disable_booleans:
            keywords.extend(boolean_keywords())
        if not cli.disable_severity:
            keywords.extend(severity_keywords())
        if not cli.disable_rest:
            keywords.extend(rest_keywords())

    keywords.extend(
        extract_all_keywords(
            cli.words_red,
            cli.words_green,
            cli.words_yellow,
            cli.words_blue,
            cli.words_magenta,
            cli.words_cyan,
        )
    )
    return consolidate_keywords(keywords)


def _before(theme: Theme) -> list[Highlighter]:
    before: list[Highlighter] = []

    if not theme.date.disabled:
        before.append(
            DateWordHighlighter(theme.date_word.day, theme.date_word.month, theme.date_word.number)
        )
        before.append(DateDashHighlighter(theme.date.number, theme.date.separator))
        before.append(DateSlashHighlighter(theme.date.number, theme.date.separator))

    if not theme.url.disabled:
        url = theme.url
        before.append(
            UrlHighlighter(
                url.http,
                url.https,
                url.host,
                url.path,
                url.query_params_key,
                url.query_params_value,
                url.symbols,
            )
        )

    if not theme.time.disabled:
        before.append(TimeHighlighter(theme.time.time, theme.time.zone, theme.time.separator))

    if not theme.path.disabled:
        before.append(PathHighlighter(theme.path.segment, theme.path.separator))

    if not theme.ip.disabled:
        before.append(Ipv4Highlighter(theme.ip.number, theme.ip.separator))
        before.append(Ipv6Highlighter(theme.ip.number, theme.ip.letter, theme.ip.separator))

    if not theme.key_value.disabled:
        before.append(KeyValueHighlighter(theme.key_value.key, theme.key_value.separator))

    if not theme.uuid.disabled:
        before.append(UuidHighlighter(theme.uuid.number, theme.uuid.letter, theme.uuid.dash))

    if not theme.pointer.disabled:
        pointer = theme.pointer
        before.append(
            PointerHighlighter(
                pointer.number, pointer.letter, pointer.separator, pointer.separator_token, pointer.x
            )
        )

    if not theme.process.disabled:
        before.append(
            ProcessHighlighter(theme.process.name, theme.process.separator, theme.process.id)
        )

    return before


def _main(theme: Theme, cli: Cli) -> list[Highlighter]:
    main: list[Highlighter] = []

    if not theme.number.disabled:
        main.append(NumberHighlighter(theme.number.style))

    main.extend(
        KeywordHighlighter(keyword.words, keyword.style, keyword.border)
        for keyword in collect_keywords(theme, cli)
    )
    main.extend(
        RegexpHighlighter(regexp.regular_expression, regexp.style, regexp.border)
        for regexp in theme.regexps
    )
    return main


def _after(theme: Theme) -> list[Highlighter]:
    if theme.quotes.disabled:
        return []
    return [QuoteHighlighter(theme.quotes.style, theme.quotes.token)]


def build_highlighters(theme: Theme, cli: Cli) -> Highlighters:
    """Create every enabled highlighter in the order it has to run."""
    return Highlighters(before=_before(theme), main=_main(theme, cli), after=_after(theme))


class HighlightProcessor:
    """Runs all highlighter stages over lines of text."""

    def __init__(self, highlighters: Highlighters) -> None:
        self.highlighters = highlighters

    def highlight_line(self, line: str) -> str:
        """Highlight one line through the before, main and after stages."""
        line_info = LineInfo.from_line(line)
        result = line
        for stage in self.highlighters.stages:
            result = self._apply_stage(result, line_info, stage)
        return result

    def apply(self, lines: Iterable[str]) -> str:
        """Highlight lines and join them with newlines."""
        return "\n".join(map(self.highlight_line, lines))

    @staticmethod
    def _apply_stage(text: str, line_info: LineInfo, highlighters: Sequence[Highlighter]) -> str:
        for highlighter in highlighters:
            if highlighter.should_short_circuit(line_info):
                continue
            if highlighter.only_apply_to_segments_not_already_highlighted():
                text = apply_without_overwriting_existing_highlighting(text, highlighter.apply)
            else:
                text = highlighter.apply(text)
        return text