"""Highlighters for calendar dates written with dashes, slashes or words."""

from __future__ import annotations

import re

from tailspin.line_info import LineInfo
from tailspin.theme import Style
from tailspin.types import Highlighter

_DATE_DASH = re.compile(
    r"(?P<year>\d{4})(?P<separator1>-)(?P<month>\d{2})(?P<separator2>-)(?P<day>\d{2})"
)

_DATE_SLASH = re.compile(
    r"(?P<year>20\d{2})(?P<separator1>/)(?P<month>(0[1-9]|1[0-2]))"
    r"(?P<separator2>/)(?P<day>(0[1-9]|[12][0-9]|3[01]))"
)

_DATE_WORD = re.compile(
    r"""
    (?P<day1>\b(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)\b)?
    \s*
    (?P<month>\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\b)
    \s+
    (?P<day2>\b(?:[0-2]?[0-9]|3[0-1])\b)
    """,
    re.VERBOSE,
)


def _paint_numeric_date(match: re.Match[str], number: Style, separator: Style) -> str:
    return "".join(
        (
            number.paint(match.group("year")),
            separator.paint(match.group("separator1")),
            number.paint(match.group("month")),
            separator.paint(match.group("separator2")),
            number.paint(match.group("day")),
        )
    )


class DateDashHighlighter(Highlighter):
    """Colours dates such as 2023-06-24."""

    def __init__(self, number: Style, separator: Style) -> None:
        self.number = number
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.dashes < 2

    def apply(self, text: str) -> str:
        return _DATE_DASH.sub(
            lambda match: _paint_numeric_date(match, self.number, self.separator), text
        )


class DateSlashHighlighter(Highlighter):
    """Colours dates such as 2023/06/24 in the 21st century."""

    def __init__(self, number: Style, separator: Style) -> None:
        self.number = number
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.slashes < 2

    def apply(self, text: str) -> str:
        return _DATE_SLASH.sub(
            lambda match: _paint_numeric_date(match, self.number, self.separator), text
        )


class DateWordHighlighter(Highlighter):
    """Colours dates such as "Mon Jan 5" with an optional day name."""

    def __init__(self, day_name: Style, month_name: Style, day_number: Style) -> None:
        self.day_name = day_name
        self.month_name = month_name
        self.day_number = day_number

    def apply(self, text: str) -> str:
        return _DATE_WORD.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        day1 = match.group("day1")
        prefix = f"{self.day_name.paint(day1)} " if day1 is not None else ""
        month = self.month_name.paint(match.group("month"))
        day2 = self.day_number.paint(match.group("day2"))
        return f"{prefix}{month} {day2}"