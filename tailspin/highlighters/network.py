"""Highlighters for IPv4 and IPv6 addresses and HTTP URLs."""

from __future__ import annotations

import re

from tailspin.line_info import LineInfo
from tailspin.theme import Style
from tailspin.types import Highlighter

_IPV4 = re.compile(r"(\b\d{1,3})(\.)(\d{1,3})(\.)(\d{1,3})(\.)(\d{1,3}\b)")

_IPV6 = re.compile(r"(?:[0-9a-fA-F]{1,4}:{1,2}){3,}[0-9a-fA-F]{1,4}")

_URL = re.compile(
    r"(?P<protocol>http|https)(:)(//)(?P<host>[^:/\n\s]+)"
    r"(?P<path>[/a-zA-Z0-9\-_.]*)?(?P<query>\?[^#\n ]*)?"
)

_QUERY_PARAMS = re.compile(r"(?P<delimiter>[?&])(?P<key>[^=]*)(?P<equal>=)(?P<value>[^&]*)")

_HEX_LETTERS = frozenset("abcdefABCDEF")


class Ipv4Highlighter(Highlighter):
    """Colours dotted IPv4 addresses."""

    def __init__(self, number: Style, separator: Style) -> None:
        self.number = number
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.dots < 3

    def apply(self, text: str) -> str:
        return _IPV4.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        return "".join(
            (self.separator if group % 2 == 0 else self.number).paint(match.group(group))
            for group in range(1, 8)
        )


class Ipv6Highlighter(Highlighter):
    """Colours IPv6 addresses character by character."""

    def __init__(self, number: Style, letter: Style, separator: Style) -> None:
        self.number = number
        self.letter = letter
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.colons < 4

    def apply(self, text: str) -> str:
        return _IPV6.sub(lambda match: "".join(map(self._paint_char, match.group(0))), text)

    def _paint_char(self, char: str) -> str:
        if "0" <= char <= "9":
            return self.number.paint(char)
        if char in _HEX_LETTERS:
            return self.letter.paint(char)
        if char in ":.":
            return self.separator.paint(char)
        return char


class UrlHighlighter(Highlighter):
    """Colours http and https URLs, including their query parameters."""

    def __init__(
        self,
        http: Style,
        https: Style,
        host: Style,
        path: Style,
        query_params_key: Style,
        query_params_value: Style,
        symbols: Style,
    ) -> None:
        self.http = http
        self.https = https
        self.host = host
        self.path = path
        self.query_params_key = query_params_key
        self.query_params_value = query_params_value
        self.symbols = symbols

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.slashes < 1 or line_info.colons == 0

    def apply(self, text: str) -> str:
        return _URL.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        parts: list[str] = []

        protocol = match.group("protocol")
        if protocol is not None:
            style = {"http": self.http, "https": self.https}.get(protocol, Style())
            parts.append(f"{style.paint(protocol)}://")

        host = match.group("host")
        if host is not None:
            parts.append(self.host.paint(host))

        path = match.group("path")
        if path is not None:
            parts.append(self.path.paint(path))

        query = match.group("query")
        if query is not None:
            parts.append(_QUERY_PARAMS.sub(self._replace_query_param, query))

        return "".join(parts)

    def _replace_query_param(self, match: re.Match[str]) -> str:
        return "".join(
            (
                self.symbols.paint(match.group("delimiter")),
                self.query_params_key.paint(match.group("key")),
                self.symbols.paint(match.group("equal")),
                self.query_params_value.paint(match.group("value")),
            )
        )