"""Highlighters for key/value pairs, keywords, numbers and user regular expressions."""

from __future__ import annotations

import re
from collections.abc import Iterable

from tailspin.line_info import LineInfo
from tailspin.theme import Style
from tailspin.types import Highlighter

_KEY_VALUE = re.compile(r"(?P<space_or_start>(^)|\s)(?P<key>\w+\b)(?P<equals>=)")

_NUMBER = re.compile(r"\b\d+(\.\d+)?\b")


class KeyValueHighlighter(Highlighter):
    """Colours the key and equals sign of key=value pairs."""

    def __init__(self, key: Style, separator: Style) -> None:
        self.key = key
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.equals < 1

    def apply(self, text: str) -> str:
        return _KEY_VALUE.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        return "".join(
            (
                match.group("space_or_start"),
                self.key.paint(match.group("key")),
                self.separator.paint(match.group("equals")),
            )
        )


class KeywordHighlighter(Highlighter):
    """Colours whole-word occurrences of a set of keywords."""

    def __init__(self, keywords: Iterable[str], style: Style, border: bool) -> None:
        alternatives = "|".join(re.escape(word) for word in keywords)
        self.regex = re.compile(rf"\b({alternatives})\b")
        self.style = style
        self.border = border

    def apply(self, text: str) -> str:
        if self.border:
            return self.regex.sub(lambda match: self.style.paint(f" {match.group(0)} "), text)
        return self.regex.sub(lambda match: self.style.paint(match.group(0)), text)


class NumberHighlighter(Highlighter):
    """Colours integers and decimal numbers."""

    def __init__(self, style: Style) -> None:
        self.style = style

    def apply(self, text: str) -> str:
        return _NUMBER.sub(lambda match: self.style.paint(match.group(0)), text)


class RegexpHighlighter(Highlighter):
    """Colours matches of a user regular expression.

    With exactly one capturing group only that group is coloured; otherwise
    the whole match is. Raises re.error for an invalid expression.
    """

    def __init__(self, regular_expression: str, style: Style, border: bool) -> None:
        self.regex = re.compile(regular_expression)
        self.style = style
        self.border = border

    def apply(self, text: str) -> str:
        pieces: list[str] = []
        last_end = 0
        single_group = self.regex.groups == 1

        for match in self.regex.finditer(text):
            start, end = match.span()
            pieces.append(text[last_end:start])
            if single_group:
                captured = match.group(1)
                if captured is not None:
                    group_start, group_end = match.span(1)
                    pieces.append(text[start:group_start])
                    pieces.append(self.style.paint(captured))
                    pieces.append(text[group_end:end])
            else:
                pieces.append(self.style.paint(match.group(0)))
            last_end = end

        pieces.append(text[last_end:])
        return "".join(pieces)