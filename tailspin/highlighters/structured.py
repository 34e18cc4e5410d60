"""Highlighters for paths, pointers, process ids, times of day and UUIDs."""

from __future__ import annotations

import re

from tailspin.line_info import LineInfo
from tailspin.theme import Style
from tailspin.types import Highlighter

_PATH = re.compile(r"(?P<path>[~/.][\w./-]*/[\w.-]*)")

_POINTER = re.compile(
    r"""
    \b(?P<prefix>0x)(?P<first_half>[0-9a-fA-F]{8})\b
    |
    \b(?P<prefix64>0x)(?P<first_half64>[0-9a-fA-F]{8})(?P<second_half>[0-9a-fA-F]{8})\b
    """,
    re.IGNORECASE | re.VERBOSE,
)

_PROCESS = re.compile(r"(?P<process_name>\([^)]+\)|[\w-]+)\[(?P<process_num>\d+)]")

_TIME = re.compile(
    r"""
    \b
    (?P<T>[T\s])?
    (?P<hours>\d{2})(?P<colon1>:)
    (?P<minutes>\d{2})(?P<colon2>:)
    (?P<seconds>\d{2})
    (?P<frac_sep>[.,:])?(?P<frac_digits>\d+)?
    (?P<tz>Z)?
    """,
    re.VERBOSE,
)

_UUID = re.compile(
    r"""
    \b[0-9a-fA-F]{8}\b
    -
    \b[0-9a-fA-F]{4}\b
    -
    \b[0-9a-fA-F]{4}\b
    -
    \b[0-9a-fA-F]{4}\b
    -
    \b[0-9a-fA-F]{12}\b
    """,
    re.VERBOSE,
)

_HEX_LETTERS = frozenset("abcdefABCDEF")


class PathHighlighter(Highlighter):
    """Colours absolute, home-relative and dot-relative file paths."""

    def __init__(self, segment: Style, separator: Style) -> None:
        self.segment = segment
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.slashes == 0

    def apply(self, text: str) -> str:
        return _PATH.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        path = match.group(0)
        first, second = path[0], path[1:2]
        valid_start = first in "/~" or (first == "." and second == "/")
        if not valid_start or (first == "/" and second == "/"):
            return path
        return "".join(
            self.separator.paint(char) if char == "/" else self.segment.paint(char)
            for char in path
        )


class PointerHighlighter(Highlighter):
    """Colours 32-bit and 64-bit hexadecimal pointers such as 0x7ffd1234."""

    def __init__(
        self, number: Style, letter: Style, separator: Style, separator_token: str, x: Style
    ) -> None:
        self.number = number
        self.letter = letter
        self.separator = separator
        self.separator_token = separator_token
        self.x = x

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.x < 1 and line_info.zeros < 1

    def apply(self, text: str) -> str:
        return _POINTER.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        prefix = match.group("prefix") or match.group("prefix64")
        first_half = match.group("first_half") or match.group("first_half64")
        second_half = match.group("second_half")

        head = self._paint_hex(prefix) + self._paint_hex(first_half)
        if second_half is None:
            return head
        return head + self.separator.paint(self.separator_token) + self._paint_hex(second_half)

    def _paint_hex(self, text: str) -> str:
        return "".join(map(self._paint_char, text))

    def _paint_char(self, char: str) -> str:
        if "0" <= char <= "9":
            return self.number.paint(char)
        if char in "xX":
            return self.x.paint(char)
        if char in _HEX_LETTERS:
            return self.letter.paint(char)
        return char


class ProcessHighlighter(Highlighter):
    """Colours process names followed by a bracketed id, such as sshd[1234]."""

    def __init__(self, process_name: Style, bracket: Style, process_num: Style) -> None:
        self.process_name = process_name
        self.bracket = bracket
        self.process_num = process_num

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.left_bracket < 1 or line_info.right_bracket < 1

    def apply(self, text: str) -> str:
        return _PROCESS.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        return "".join(
            (
                self.process_name.paint(match.group("process_name")),
                self.bracket.paint("["),
                self.process_num.paint(match.group("process_num")),
                self.bracket.paint("]"),
            )
        )


class TimeHighlighter(Highlighter):
    """Colours times of day with optional fractional seconds and zone marker."""

    def __init__(self, time: Style, zone: Style, separator: Style) -> None:
        self.time = time
        self.zone = zone
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.colons < 2

    def apply(self, text: str) -> str:
        return _TIME.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        parts = (
            ("T", self.zone),
            ("hours", self.time),
            ("colon1", self.separator),
            ("minutes", self.time),
            ("colon2", self.separator),
            ("seconds", self.time),
            ("frac_sep", self.separator),
            ("frac_digits", self.time),
            ("tz", self.zone),
        )
        return "".join(
            style.paint(value)
            for name, style in parts
            if (value := match.group(name)) is not None
        )


class UuidHighlighter(Highlighter):
    """Colours UUIDs character by character."""

    def __init__(self, number: Style, letter: Style, dash: Style) -> None:
        self.number = number
        self.letter = letter
        self.dash = dash

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.dashes < 4

    def apply(self, text: str) -> str:
        return _UUID.sub(lambda match: "".join(map(self._paint_char, match.group(0))), text)

    def _paint_char(self, char: str) -> str:
        if "0" <= char <= "9":
            return self.number.paint(char)
        if char in _HEX_LETTERS:
            return self.letter.paint(char)
        if char == "-":
            return self.dash.paint(char)
        return char