"""Colours, styles and the processed theme with its defaults."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

RESET = "\x1b[0m"


class Color(enum.Enum):
    """Terminal colours, valued by their foreground SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def foreground_code(self) -> str:
        return str(self.value)

    @property
    def background_code(self) -> str:
        return str(self.value + 10)


@dataclass(frozen=True)
class Style:
    """A set of terminal attributes and colours."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def is_plain(self) -> bool:
        return not self.prefix()

    def prefix(self) -> str:
        """Return the escape sequence that switches this style on."""
        codes = [
            code
            for enabled, code in (
                (self.bold, "1"),
                (self.dimmed, "2"),
                (self.italic, "3"),
                (self.underline, "4"),
            )
            if enabled
        ]
        if self.bg is not None:
            codes.append(self.bg.background_code)
        if self.fg is not None:
            codes.append(self.fg.foreground_code)
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def paint(self, text: str) -> str:
        """Wrap text in this style; a plain style leaves text unchanged."""
        prefix = self.prefix()
        if not prefix:
            return text
        return f"{prefix}{text}{RESET}"


@dataclass
class UuidTheme:
    number: Style = Style(fg=Color.BLUE, italic=True)
    letter: Style = Style(fg=Color.MAGENTA, italic=True)
    dash: Style = Style(fg=Color.RED)
    disabled: bool = False


@dataclass
class PointerTheme:
    number: Style = Style(fg=Color.BLUE, italic=True)
    letter: Style = Style(fg=Color.MAGENTA, italic=True)
    separator: Style = Style(dimmed=True)
    separator_token: str = "•"
    x: Style = Style(fg=Color.RED)
    disabled: bool = False


@dataclass
class IpTheme:
    number: Style = Style(fg=Color.BLUE, italic=True)
    letter: Style = Style(fg=Color.MAGENTA, italic=True)
    separator: Style = Style(fg=Color.RED)
    disabled: bool = False


@dataclass
class KeyValueTheme:
    key: Style = Style(dimmed=True)
    separator: Style = Style(fg=Color.WHITE)
    disabled: bool = False


@dataclass
class PathTheme:
    segment: Style = Style(fg=Color.GREEN, italic=True)
    separator: Style = Style(fg=Color.YELLOW)
    disabled: bool = False


@dataclass
class DateTheme:
    number: Style = Style(fg=Color.MAGENTA)
    separator: Style = Style(fg=Color.DEFAULT, dimmed=True)
    disabled: bool = False


@dataclass
class DateWordTheme:
    day: Style = Style(fg=Color.MAGENTA)
    month: Style = Style(fg=Color.MAGENTA)
    number: Style = Style(fg=Color.MAGENTA)
    disabled: bool = False


@dataclass
class TimeTheme:
    time: Style = Style(fg=Color.BLUE)
    zone: Style = Style(fg=Color.RED)
    separator: Style = Style(fg=Color.DEFAULT, dimmed=True)
    disabled: bool = False


@dataclass
class ProcessTheme:
    name: Style = Style(fg=Color.YELLOW)
    id: Style = Style(fg=Color.CYAN)
    separator: Style = Style(fg=Color.RED)
    disabled: bool = False


@dataclass
class NumberTheme:
    style: Style = Style(fg=Color.CYAN)
    disabled: bool = False


@dataclass
class QuotesTheme:
    style: Style = Style(fg=Color.YELLOW)
    token: str = '"'
    disabled: bool = False


@dataclass
class UrlTheme:
    http: Style = Style(fg=Color.RED, dimmed=True)
    https: Style = Style(fg=Color.GREEN, dimmed=True)
    host: Style = Style(fg=Color.BLUE, dimmed=True)
    path: Style = Style(fg=Color.BLUE)
    query_params_key: Style = Style(fg=Color.MAGENTA)
    query_params_value: Style = Style(fg=Color.CYAN)
    symbols: Style = Style(fg=Color.RED)
    disabled: bool = False


@dataclass
class Keyword:
    """A group of words highlighted with one style."""

    style: Style = Style()
    words: list[str] = field(default_factory=list)
    border: bool = False


@dataclass
class Regexp:
    """A user regular expression highlighted with one style."""

    regular_expression: str = ""
    style: Style = Style()
    border: bool = False


@dataclass
class Theme:
    """The fully resolved theme used to build highlighters."""

    date: DateTheme = field(default_factory=DateTheme)
    date_word: DateWordTheme = field(default_factory=DateWordTheme)
    ip: IpTheme = field(default_factory=IpTheme)
    key_value: KeyValueTheme = field(default_factory=KeyValueTheme)
    number: NumberTheme = field(default_factory=NumberTheme)
    path: PathTheme = field(default_factory=PathTheme)
    pointer: PointerTheme = field(default_factory=PointerTheme)
    process: ProcessTheme = field(default_factory=ProcessTheme)
    quotes: QuotesTheme = field(default_factory=QuotesTheme)
    time: TimeTheme = field(default_factory=TimeTheme)
    url: UrlTheme = field(default_factory=UrlTheme)
    uuid: UuidTheme = field(default_factory=UuidTheme)
    keywords: list[Keyword] = field(default_factory=list)
    regexps: list[Regexp] = field(default_factory=list)


def severity_keywords() -> list[Keyword]:
    """Built-in log level keywords."""
    return [
        Keyword(style=Style(fg=Color.RED), words=["ERROR"]),
        Keyword(style=Style(fg=Color.YELLOW), words=["WARN", "WARNING"]),
        Keyword(style=Style(fg=Color.WHITE), words=["INFO"]),
        Keyword(style=Style(fg=Color.GREEN), words=["DEBUG", "SUCCESS"]),
        Keyword(style=Style(dimmed=True), words=["TRACE"]),
    ]


def rest_keywords() -> list[Keyword]:
    """Built-in HTTP verb keywords, drawn with a border."""
    return [
        Keyword(style=Style(fg=Color.BLACK, bg=Color.GREEN), words=["GET", "HEAD"], border=True),
        Keyword(style=Style(fg=Color.BLACK, bg=Color.YELLOW), words=["POST"], border=True),
        Keyword(style=Style(fg=Color.BLACK, bg=Color.MAGENTA), words=["PUT", "PATCH"], border=True),
        Keyword(style=Style(fg=Color.BLACK, bg=Color.RED), words=["DELETE"], border=True),
    ]


def boolean_keywords() -> list[Keyword]:
    """Built-in boolean and null keywords."""
    return [Keyword(style=Style(fg=Color.RED, italic=True), words=["null", "true", "false"])]